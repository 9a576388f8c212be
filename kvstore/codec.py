from __future__ import annotations

import base64
import copy
import io
import json
import logging
import math
import pickle
import socket
import sys
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .errors import ReadError, SerializationFailedError, UnsupportedValueError, WriteError

logger = logging.getLogger(__name__)

# Largest float magnitude accepted for storage.
MAX_FLOAT = 1.0e14

EntryKind = Literal["raw", "bytes", "pickle"]


class StoredEntry(BaseModel):
    """
    One value as it appears in the on-disk document:
      { "kind": "raw" | "bytes" | "pickle", "payload": ... }

    - raw: JSON-native value, stored as-is
    - bytes: UTF-8 text of a bytes value
    - pickle: base64 of the pickled value
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: EntryKind
    payload: Any

    @model_validator(mode="after")
    def check_payload(self) -> "StoredEntry":
        if self.kind != "raw" and not isinstance(self.payload, str):
            raise ValueError(f"payload of a {self.kind} entry must be a string")
        return self


Document = dict[str, StoredEntry]


def _int_fits_json(value: int) -> bool:
    # json refuses ints longer than the interpreter's str conversion limit
    limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
    if not limit:
        return True
    return value.bit_length() * math.log10(2) < limit - 1


def is_json_native(value: Any, _seen: set[int] | None = None) -> bool:
    """True when json.dumps/json.loads reproduces value with its exact types."""
    kind = type(value)
    if value is None or kind in (bool, str):
        return True
    if kind is int:
        return _int_fits_json(value)
    if kind is float:
        return math.isfinite(value)
    if kind not in (list, dict):
        return False

    # A container reached twice (shared or self-referencing) cannot be
    # reproduced by json; pickle keeps the references.
    seen = set() if _seen is None else _seen
    if id(value) in seen:
        return False
    seen.add(id(value))

    if kind is list:
        return all(is_json_native(v, seen) for v in value)
    return all(type(k) is str and is_json_native(v, seen) for k, v in value.items())


class JsonValueCodec:
    """
    Translates between Python values and the JSON document of a file store.

    ``owner`` is the store using the codec; it is named in error messages.
    """

    def __init__(self, owner: object) -> None:
        self._owner = owner

    def encode_value(self, value: Any) -> StoredEntry:
        if isinstance(value, (io.IOBase, socket.socket)):
            raise UnsupportedValueError.for_type("resource", self._owner)

        if isinstance(value, float) and (not math.isfinite(value) or abs(value) > MAX_FLOAT):
            raise UnsupportedValueError.for_type(
                "float",
                self._owner,
                reason=f"floats must be finite and not larger than {MAX_FLOAT:.1E}.",
            )

        if isinstance(value, (bytes, bytearray)):
            try:
                text = value.decode("utf-8")
            except UnicodeDecodeError as e:
                raise UnsupportedValueError.for_type("binary", self._owner, reason=str(e)) from e
            if type(value) is bytes:
                return StoredEntry(kind="bytes", payload=text)

        if is_json_native(value):
            return StoredEntry(kind="raw", payload=copy.deepcopy(value))

        try:
            pickled = pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
        except Exception as e:
            raise SerializationFailedError.for_value(value, e) from e
        return StoredEntry(kind="pickle", payload=base64.b64encode(pickled).decode("ascii"))

    def decode_value(self, entry: StoredEntry, *, key: str | None = None) -> Any:
        if entry.kind == "raw":
            # entries may be shared with a cache; never hand out the stored container
            return copy.deepcopy(entry.payload)
        if entry.kind == "bytes":
            return entry.payload.encode("utf-8")
        try:
            return pickle.loads(base64.b64decode(entry.payload, validate=True))
        except Exception as e:
            raise ReadError(
                f"Could not unserialize the value stored under {key!r}: {e}",
                details={"key": key},
                cause=e,
            ) from e

    def decode_document(self, contents: str, *, source: str = "") -> Document:
        if not contents.strip():
            return {}

        try:
            raw = json.loads(contents)
        except json.JSONDecodeError as e:
            logger.warning("Could not decode JSON data in %s: %s", source, e)
            raise ReadError(f"Could not decode JSON data: {e}", details={"path": source}, cause=e) from e

        if not isinstance(raw, dict):
            raise ReadError(
                f"Expected a JSON object at the top level, got {type(raw).__name__}.",
                details={"path": source},
            )

        doc: Document = {}
        for key, item in raw.items():
            try:
                doc[key] = StoredEntry.model_validate(item)
            except ValidationError as e:
                raise ReadError(
                    f"Malformed entry for key {key!r}: {e.error_count()} validation error(s)",
                    details={"path": source, "key": key},
                    cause=e,
                ) from e
        return doc

    def encode_document(self, doc: Document) -> str:
        payload = {k: entry.model_dump() for k, entry in doc.items()}
        try:
            return json.dumps(payload, indent=2, allow_nan=False) + "\n"
        except (TypeError, ValueError) as e:
            raise WriteError(f"Could not encode data as JSON: {e}", cause=e) from e
