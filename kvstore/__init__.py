from __future__ import annotations

from .array_store import ArrayStore
from .codec import MAX_FLOAT, JsonValueCodec, StoredEntry
from .errors import (
    ConfigurationError,
    ErrorCode,
    InvalidKeyError,
    ReadError,
    SerializationFailedError,
    StoreError,
    UnsupportedValueError,
    WriteError,
)
from .factory import create_store
from .interfaces import KeyValueStore
from .json_file_store import JsonFileStore
from .repositories import AsyncKeyValueStore

__all__ = [
    "KeyValueStore",
    "ArrayStore",
    "JsonFileStore",
    "AsyncKeyValueStore",
    "JsonValueCodec",
    "StoredEntry",
    "MAX_FLOAT",
    "create_store",
    "ErrorCode",
    "StoreError",
    "ConfigurationError",
    "InvalidKeyError",
    "UnsupportedValueError",
    "SerializationFailedError",
    "ReadError",
    "WriteError",
]
