from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from kvstore import ArrayStore, JsonFileStore  # noqa: E402


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "store.json"


@pytest.fixture(params=["array", "json-cached", "json-uncached"])
def store(request: pytest.FixtureRequest, store_path: Path):
    """
    Every backend that must satisfy the shared key-value contract.
    """
    if request.param == "array":
        return ArrayStore()
    return JsonFileStore(store_path, cache=request.param == "json-cached")


@pytest.fixture(params=[True, False], ids=["cached", "uncached"])
def json_store(request: pytest.FixtureRequest, store_path: Path) -> JsonFileStore:
    return JsonFileStore(store_path, cache=request.param)


@pytest.fixture
def sandbox_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point KVSTORE_* settings at a temp directory so tests never touch real ./data.
    """
    for name in ("KVSTORE_BACKEND", "KVSTORE_CACHE", "KVSTORE_ATOMIC_WRITES", "KVSTORE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "data" / "store.json"
    monkeypatch.setenv("KVSTORE_PATH", str(path))
    monkeypatch.chdir(tmp_path)
    return path
