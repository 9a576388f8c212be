from __future__ import annotations

import asyncio

import pytest

from kvstore import ArrayStore, AsyncKeyValueStore, InvalidKeyError, JsonFileStore, ReadError


def test_async_store_roundtrip(store_path):
    async def _run():
        repo = AsyncKeyValueStore(JsonFileStore(store_path))

        await repo.set("a", [1, 2, 3])
        assert await repo.get("a") == [1, 2, 3]
        assert await repo.has("a") is True
        assert await repo.keys() == ["a"]
        assert await repo.get_many(k for k in ["a", "b"]) == {"a": [1, 2, 3], "b": None}

        assert await repo.remove("a") is True
        assert await repo.remove("a") is False
        assert await repo.get("a", "gone") == "gone"

        await repo.set("b", 1)
        await repo.clear()
        assert await repo.keys() == []

    asyncio.run(_run())


def test_async_store_propagates_errors(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{broken", encoding="utf-8")

    async def _run():
        repo = AsyncKeyValueStore(JsonFileStore(store_path))
        with pytest.raises(ReadError):
            await repo.get("a")
        with pytest.raises(InvalidKeyError):
            await repo.set("", 1)

    asyncio.run(_run())


def test_async_store_exposes_wrapped_store():
    inner = ArrayStore()
    assert AsyncKeyValueStore(inner).store is inner
