from __future__ import annotations

import os
from pathlib import Path


def read_text(path: Path) -> str | None:
    """
    Read UTF-8 text from disk.

    Returns None for missing files. Other I/O and decoding errors propagate.
    """
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    """
    Overwrite path in place.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def atomic_write_text(path: Path, text: str) -> None:
    """
    Atomically write text to disk by writing to a temp file then replacing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
