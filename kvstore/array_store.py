from __future__ import annotations

from typing import Any, Iterable, Mapping

from .assertions import assert_key, assert_keys
from .interfaces import KeyValueStore


class ArrayStore(KeyValueStore):
    """
    Keeps values in a plain dict.

    - Values are stored as-is; nothing is serialized.
    - Nothing is persisted; the contents live as long as the instance.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    def set(self, key: str, value: Any) -> None:
        assert_key(key)
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        assert_key(key)
        return self._values.get(key, default)

    def has(self, key: str) -> bool:
        assert_key(key)
        return key in self._values

    def remove(self, key: str) -> bool:
        assert_key(key)
        if key not in self._values:
            return False
        del self._values[key]
        return True

    def clear(self) -> None:
        self._values.clear()

    def keys(self) -> list[str]:
        return list(self._values)

    def get_many(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        return {k: self._values.get(k, default) for k in assert_keys(keys)}
