from __future__ import annotations

import pytest

from kvstore import ArrayStore, ConfigurationError, JsonFileStore, create_store
from kvstore.settings import Settings, get_settings


def test_defaults(sandbox_env):
    settings = get_settings()
    assert settings.backend == "json"
    assert settings.path == str(sandbox_env)
    assert settings.cache is True
    assert settings.atomic_writes is True
    assert settings.log_level == "INFO"


def test_env_overrides(sandbox_env, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("KVSTORE_BACKEND", " Memory ")
    monkeypatch.setenv("KVSTORE_CACHE", "off")
    monkeypatch.setenv("KVSTORE_ATOMIC_WRITES", "0")
    monkeypatch.setenv("KVSTORE_LOG_LEVEL", "debug")

    settings = get_settings()
    assert settings.backend == "memory"
    assert settings.cache is False
    assert settings.atomic_writes is False
    assert settings.log_level == "DEBUG"


def test_create_json_store(sandbox_env, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("KVSTORE_CACHE", "false")
    store = create_store()
    assert isinstance(store, JsonFileStore)
    assert store.path == sandbox_env
    assert store.cached is False


def test_create_memory_store():
    settings = Settings(backend="memory", path="", cache=True, atomic_writes=True, log_level="INFO")
    assert isinstance(create_store(settings), ArrayStore)


def test_unknown_backend():
    settings = Settings(backend="memcache", path="x.json", cache=True, atomic_writes=True, log_level="INFO")
    with pytest.raises(ConfigurationError) as exc_info:
        create_store(settings)
    assert exc_info.value.details == {"config_key": "KVSTORE_BACKEND"}


def test_json_backend_requires_path():
    settings = Settings(backend="json", path="", cache=True, atomic_writes=True, log_level="INFO")
    with pytest.raises(ConfigurationError):
        create_store(settings)
