"""
Safe file operations for d3js-report.

Writes go to a temporary sibling first and are moved into place with
``os.replace``, so a reader never observes a half-written file even when
several rules stage the shared ``lib/`` tree at once.
"""

import os
import tempfile
from pathlib import Path


def atomic_write_bytes(filepath: Path, content: bytes) -> None:
    """
    Write bytes to a file, creating parent directories as needed.

    Args:
        filepath: File to write, replaced if it exists
        content: Content to write

    Raises:
        OSError: If the file cannot be written
    """
    filepath.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, filepath)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def atomic_write_text(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file; see :func:`atomic_write_bytes`."""
    atomic_write_bytes(filepath, content.encode(encoding))
