"""Exception hierarchy for key-value stores.

Every store backend raises subclasses of StoreError, so callers can handle
failures uniformly regardless of which backend is configured.

Exception Hierarchy:
    StoreError (base)
    ├── ConfigurationError - Invalid settings / unknown backend
    ├── InvalidKeyError - Key is empty or not a string
    ├── UnsupportedValueError - Value cannot be represented by the backend
    ├── SerializationFailedError - Serializing a composite value raised
    ├── ReadError - Backing storage could not be read or decoded
    └── WriteError - Backing storage could not be written
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable codes included in API error responses."""

    CFG_INVALID = "CFG_INVALID"
    KEY_INVALID = "KEY_INVALID"
    VAL_UNSUPPORTED = "VAL_UNSUPPORTED"
    VAL_SERIALIZATION = "VAL_SERIALIZATION"
    IO_READ_FAILED = "IO_READ_FAILED"
    IO_WRITE_FAILED = "IO_WRITE_FAILED"
    STORE_FAILED = "STORE_FAILED"


class StoreError(Exception):
    """Base exception for all store errors.

    Attributes:
        message: Human-readable error message.
        code: Machine-readable error code of the class.
        details: Optional additional context about the error.
        cause: Optional original exception that caused this error.
    """

    default_message: str = "A store error occurred"
    default_code: ErrorCode = ErrorCode.STORE_FAILED

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.code = self.default_code
        self.details = details or {}
        self.cause = cause

        super().__init__(self.message)

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        result: dict[str, Any] = {
            "error": self.__class__.__name__,
            "code": self.code.value,
            "detail": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(StoreError):
    default_message = "Invalid store configuration"
    default_code = ErrorCode.CFG_INVALID


class InvalidKeyError(StoreError):
    """Raised before any I/O when a key is not a non-empty string."""

    default_message = "Invalid key"
    default_code = ErrorCode.KEY_INVALID


class UnsupportedValueError(StoreError):
    """Raised when a value's type or magnitude cannot be stored by a backend.

    Examples:
        - Binary content that is not valid UTF-8 in a JSON-backed store
        - Open file handles and sockets
        - Floats beyond the round-trip threshold of the encoding
    """

    default_message = "Unsupported value"
    default_code = ErrorCode.VAL_UNSUPPORTED

    @classmethod
    def for_type(cls, kind: str, store: object, *, reason: str | None = None) -> "UnsupportedValueError":
        backend = store.__class__.__name__
        message = f"Values of type {kind} are not supported by {backend}."
        if reason:
            message = f"{message[:-1]}: {reason}"
        return cls(message, details={"kind": kind, "backend": backend})


class SerializationFailedError(StoreError):
    """Raised when serializing a composite value throws.

    The offending value is kept on ``value``.
    """

    default_message = "Could not serialize value"
    default_code = ErrorCode.VAL_SERIALIZATION

    def __init__(self, message: str | None = None, *, value: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.value = value

    @classmethod
    def for_value(cls, value: Any, cause: BaseException | None = None) -> "SerializationFailedError":
        kind = type(value).__name__
        message = f"Could not serialize value of type {kind}."
        if cause is not None:
            message = f"{message[:-1]}: {cause}"
        return cls(message, value=value, details={"kind": kind}, cause=cause)


class ReadError(StoreError):
    default_message = "Could not read from the store"
    default_code = ErrorCode.IO_READ_FAILED


class WriteError(StoreError):
    default_message = "Could not write to the store"
    default_code = ErrorCode.IO_WRITE_FAILED
