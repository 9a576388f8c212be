from __future__ import annotations

import threading

import pytest

from kvstore import ArrayStore, InvalidKeyError


def test_accepts_any_value_as_is():
    store = ArrayStore()
    lock = threading.Lock()
    store.set("lock", lock)
    store.set("big", 1.0e300)
    store.set("bin", b"\xff\xfe")

    assert store.get("lock") is lock
    assert store.get("big") == 1.0e300
    assert store.get("bin") == b"\xff\xfe"


def test_initial_values():
    store = ArrayStore({"a": 1, "b": None})
    assert store.keys() == ["a", "b"]
    assert store.has("b") is True


def test_initial_values_validate_keys():
    with pytest.raises(InvalidKeyError):
        ArrayStore({"": 1})


def test_instances_do_not_share_state():
    a, b = ArrayStore(), ArrayStore()
    a.set("k", 1)
    assert b.has("k") is False
