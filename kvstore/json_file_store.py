from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable

from .array_store import ArrayStore
from .assertions import assert_key, assert_keys
from .codec import Document, JsonValueCodec
from .errors import ReadError, WriteError
from .interfaces import KeyValueStore
from .json_store import atomic_write_text, read_text, write_text
from .locks import GLOBAL_PATH_LOCKS

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """
    A key-value store backed by a single JSON file.

    Every mutating call loads the whole document, applies one change and
    writes the whole document back. A missing or blank file is an empty store.

    With ``cache=True`` an ArrayStore mirrors the entries already read or
    written, so repeated get/has calls skip loading the file. The cache never
    changes results: set/remove/clear update it together with the file.

    There is no coordination with other processes (or other instances) writing
    the same file: the last complete write wins.
    """

    def __init__(self, path: str | os.PathLike[str], cache: bool = True, *, atomic: bool = True):
        if not isinstance(path, (str, os.PathLike)):
            raise TypeError(f"The path must be a string or path-like. Got: {type(path).__name__}")
        if not os.fspath(path):
            raise ValueError("The path must not be empty.")
        if not isinstance(cache, bool):
            raise TypeError(f"The cache argument must be a boolean. Got: {type(cache).__name__}")

        self._path = Path(path)
        self._atomic = atomic
        self._codec = JsonValueCodec(self)
        # Holds StoredEntry objects, keyed like the document.
        self._cache: ArrayStore | None = ArrayStore() if cache else None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def cached(self) -> bool:
        return self._cache is not None

    def set(self, key: str, value: Any) -> None:
        assert_key(key)

        # Encode first: an unsupported value must never reach the file.
        entry = self._codec.encode_value(value)

        doc = self._load()
        doc[key] = entry

        if self._cache is not None:
            self._cache.remove(key)

        self._save(doc)

        if self._cache is not None:
            self._cache.set(key, entry)

    def get(self, key: str, default: Any = None) -> Any:
        assert_key(key)

        if self._cache is not None and self._cache.has(key):
            logger.debug("cache hit for %r in %s", key, self._path)
            return self._codec.decode_value(self._cache.get(key), key=key)

        doc = self._load()
        if key not in doc:
            return default

        entry = doc[key]
        value = self._codec.decode_value(entry, key=key)

        if self._cache is not None:
            self._cache.set(key, entry)

        return value

    def has(self, key: str) -> bool:
        assert_key(key)

        if self._cache is not None and self._cache.has(key):
            return True

        return key in self._load()

    def remove(self, key: str) -> bool:
        assert_key(key)

        if self._cache is not None:
            self._cache.remove(key)

        doc = self._load()
        if key not in doc:
            return False

        del doc[key]
        self._save(doc)
        return True

    def clear(self) -> None:
        if self._cache is not None:
            self._cache.clear()

        self._save({})

    def keys(self) -> list[str]:
        return list(self._load())

    def get_many(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        wanted = assert_keys(keys)
        result: dict[str, Any] = {}
        doc: Document | None = None

        for key in wanted:
            if self._cache is not None and self._cache.has(key):
                result[key] = self._codec.decode_value(self._cache.get(key), key=key)
                continue

            if doc is None:
                doc = self._load()

            if key not in doc:
                result[key] = default
                continue

            result[key] = self._codec.decode_value(doc[key], key=key)
            if self._cache is not None:
                self._cache.set(key, doc[key])

        return result

    def _load(self) -> Document:
        with GLOBAL_PATH_LOCKS.hold(self._path):
            try:
                contents = read_text(self._path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Could not read %s: %r", self._path, e)
                raise ReadError(
                    f"Could not read {self._path}: {e}",
                    details={"path": str(self._path)},
                    cause=e,
                ) from e

        logger.debug("loaded %s (%d bytes)", self._path, len(contents or ""))
        return self._codec.decode_document(contents or "", source=str(self._path))

    def _save(self, doc: Document) -> None:
        encoded = self._codec.encode_document(doc)

        with GLOBAL_PATH_LOCKS.hold(self._path):
            try:
                if self._atomic:
                    atomic_write_text(self._path, encoded)
                else:
                    write_text(self._path, encoded)
            except OSError as e:
                logger.warning("Could not write %s: %r", self._path, e)
                raise WriteError(
                    f"Could not write {self._path}: {e}",
                    details={"path": str(self._path)},
                    cause=e,
                ) from e

        logger.debug("saved %d key(s) to %s", len(doc), self._path)
