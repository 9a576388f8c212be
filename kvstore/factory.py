from __future__ import annotations

import logging

from .array_store import ArrayStore
from .errors import ConfigurationError
from .interfaces import KeyValueStore
from .json_file_store import JsonFileStore
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

BACKENDS = ("json", "memory")


def create_store(settings: Settings | None = None) -> KeyValueStore:
    settings = settings or get_settings()

    if settings.backend == "memory":
        logger.info("using in-memory store")
        return ArrayStore()

    if settings.backend == "json":
        if not settings.path:
            raise ConfigurationError("KVSTORE_PATH must not be empty", details={"config_key": "KVSTORE_PATH"})
        logger.info("using JSON file store at %s (cache=%s)", settings.path, settings.cache)
        return JsonFileStore(settings.path, settings.cache, atomic=settings.atomic_writes)

    raise ConfigurationError(
        f"Unknown store backend {settings.backend!r}; expected one of {', '.join(BACKENDS)}",
        details={"config_key": "KVSTORE_BACKEND"},
    )
