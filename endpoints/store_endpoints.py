from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from kvstore.repositories import AsyncKeyValueStore

router = APIRouter(tags=["store"])
logger = logging.getLogger(__name__)


class PutValueRequest(BaseModel):
    value: Any


class ValueResponse(BaseModel):
    key: str
    value: Any


class ExistsResponse(BaseModel):
    key: str
    exists: bool


class StoredResponse(BaseModel):
    key: str
    stored: bool = True


class RemovedResponse(BaseModel):
    key: str
    removed: bool


class KeysResponse(BaseModel):
    keys: list[str]


def _store(request: Request) -> AsyncKeyValueStore:
    return request.app.state.store


@router.get("/keys", response_model=KeysResponse)
async def list_keys(request: Request) -> KeysResponse:
    return KeysResponse(keys=await _store(request).keys())


@router.delete("/keys")
async def clear_keys(request: Request) -> dict[str, bool]:
    await _store(request).clear()
    logger.info("store cleared")
    return {"cleared": True}


@router.get("/keys/{key}", response_model=ValueResponse)
async def get_value(key: str, request: Request) -> ValueResponse:
    store = _store(request)
    # A stored None is a hit, so ask has() instead of relying on a default.
    if not await store.has(key):
        raise HTTPException(status_code=404, detail=f"key not found: {key}")
    return ValueResponse(key=key, value=await store.get(key))


@router.get("/keys/{key}/exists", response_model=ExistsResponse)
async def key_exists(key: str, request: Request) -> ExistsResponse:
    return ExistsResponse(key=key, exists=await _store(request).has(key))


@router.put("/keys/{key}", response_model=StoredResponse)
async def put_value(key: str, body: PutValueRequest, request: Request) -> StoredResponse:
    await _store(request).set(key, body.value)
    logger.debug("stored %r", key)
    return StoredResponse(key=key)


@router.delete("/keys/{key}", response_model=RemovedResponse)
async def remove_value(key: str, request: Request) -> RemovedResponse:
    removed = await _store(request).remove(key)
    return RemovedResponse(key=key, removed=removed)
