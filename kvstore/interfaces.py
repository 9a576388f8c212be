from __future__ import annotations

from typing import Any, Iterable, Protocol


class KeyValueStore(Protocol):
    """
    Uniform key-value interface shared by every backend.

    Keys are non-empty strings; anything else raises InvalidKeyError.
    """

    def set(self, key: str, value: Any) -> None:
        """Map key to value, replacing any previous value."""
        ...

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for key, or default when the key is absent."""
        ...

    def has(self, key: str) -> bool:
        """Return whether key is present (also when mapped to None)."""
        ...

    def remove(self, key: str) -> bool:
        """Remove key; return whether it was present."""
        ...

    def clear(self) -> None:
        """Remove all keys."""
        ...

    def keys(self) -> list[str]:
        """Return every stored key, in storage order."""
        ...

    def get_many(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Return {key: get(key, default)} for each of keys."""
        ...
