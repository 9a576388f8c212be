from __future__ import annotations

import asyncio
from typing import Any, Iterable

from .interfaces import KeyValueStore


class AsyncKeyValueStore:
    """
    Async wrapper around a synchronous store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    async def set(self, key: str, value: Any) -> None:
        await asyncio.to_thread(self._store.set, key, value)

    async def get(self, key: str, default: Any = None) -> Any:
        return await asyncio.to_thread(self._store.get, key, default)

    async def has(self, key: str) -> bool:
        return await asyncio.to_thread(self._store.has, key)

    async def remove(self, key: str) -> bool:
        return await asyncio.to_thread(self._store.remove, key)

    async def clear(self) -> None:
        await asyncio.to_thread(self._store.clear)

    async def keys(self) -> list[str]:
        return await asyncio.to_thread(self._store.keys)

    async def get_many(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        return await asyncio.to_thread(self._store.get_many, list(keys), default)
