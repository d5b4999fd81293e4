"""
Filesystem helpers for writing generated project files.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def _ensure_parent(target: Path) -> None:
    """Ensure the parent directory for target exists."""
    if target.parent and not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)


def _atomic_write_bytes(target: Path, content: bytes) -> None:
    """Write bytes atomically by staging a temp file and renaming."""
    _ensure_parent(target)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def write_bytes_file(path: Path | str, content: bytes) -> Path:
    """
    Write bytes verbatim to a file, creating parent directories as needed.

    Relative paths resolve against the current working directory.
    """
    target = Path(path).expanduser().resolve()
    _atomic_write_bytes(target, content)
    logger.debug("Wrote %d bytes to %s", len(content), target)
    return target
