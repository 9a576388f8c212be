"""FastAPI exception handlers for store errors.

StoreError subclasses map to HTTP status codes with a standardized body:

    {
        "error": "ErrorClassName",
        "code": "ERROR_CODE",
        "detail": "Human-readable error message",
        "details": {...}  # Optional additional context
    }
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kvstore.errors import (
    ConfigurationError,
    InvalidKeyError,
    ReadError,
    SerializationFailedError,
    StoreError,
    UnsupportedValueError,
    WriteError,
)

logger = logging.getLogger(__name__)


# Most specific classes first.
ERROR_STATUS_CODES: dict[type[StoreError], int] = {
    InvalidKeyError: 400,
    UnsupportedValueError: 422,
    SerializationFailedError: 422,
    ReadError: 503,
    WriteError: 503,
    ConfigurationError: 500,
    StoreError: 500,
}


def get_status_code_for_error(error: StoreError) -> int:
    for error_class, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_class):
            return status_code
    return 500


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    status_code = get_status_code_for_error(exc)

    if status_code >= 500:
        logger.error(
            "Server error: %s (code=%s, status=%d)",
            exc.message,
            exc.code.value,
            status_code,
            exc_info=exc.cause if exc.cause else exc,
        )
    else:
        logger.warning(
            "Client error: %s (code=%s, status=%d)",
            exc.message,
            exc.code.value,
            status_code,
        )

    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)  # type: ignore[arg-type]
