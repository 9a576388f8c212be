from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class PathLockRegistry:
    """
    Hands out one lock per resolved file path, shared by every store instance
    in the process that points at the same file.

    A lock covers a single read or a single write. Nothing holds it across a
    whole read-modify-write cycle, so concurrent writers still race and the
    last complete write wins.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, path: Path) -> threading.Lock:
        key = str(path.resolve())
        with self._guard:
            return self._locks.setdefault(key, threading.Lock())

    @contextmanager
    def hold(self, path: Path) -> Iterator[None]:
        with self.lock_for(path):
            yield


GLOBAL_PATH_LOCKS = PathLockRegistry()
