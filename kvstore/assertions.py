from __future__ import annotations

from typing import Any, Iterable

from .errors import InvalidKeyError


def assert_key(key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidKeyError(
            f"The key must be a string. Got: {type(key).__name__}",
            details={"type": type(key).__name__},
        )
    if not key:
        raise InvalidKeyError("The key must not be empty.")
    return key


def assert_keys(keys: Iterable[Any]) -> list[str]:
    return [assert_key(k) for k in keys]
