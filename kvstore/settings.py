from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Backend selection: "json" or "memory"
    backend: str

    # JSON file backend
    path: str
    cache: bool
    atomic_writes: bool

    # Logging
    log_level: str


def get_settings() -> Settings:
    backend = os.getenv("KVSTORE_BACKEND", "json").strip().lower()
    path = os.getenv("KVSTORE_PATH", "data/store.json").strip()

    cache = _env_bool("KVSTORE_CACHE", True)
    # Turning this off rewrites the file in place, as older deployments did.
    atomic_writes = _env_bool("KVSTORE_ATOMIC_WRITES", True)

    log_level = os.getenv("KVSTORE_LOG_LEVEL", "INFO").strip().upper()

    return Settings(
        backend=backend,
        path=path,
        cache=cache,
        atomic_writes=atomic_writes,
        log_level=log_level,
    )
