"""Lightweight path utilities with minimal dependencies.

These are pure functions that only depend on os, tempfile and pathlib.
"""

import os
import tempfile
from pathlib import Path


def find_town_root(start: Path) -> Path | None:
    """Find the town root by walking up to the first directory holding .gastown or .beads.

    Args:
        start: Starting directory to search from

    Returns:
        Path to the town root, or None if no marker directory is found
    """
    current = start.resolve()
    while True:
        if (current / ".gastown").is_dir() or (current / ".beads").is_dir():
            return current
        if current == current.parent:
            return None
        current = current.parent


def write_temp_file(directory: Path, content: str, *, prefix: str) -> Path:
    """Write content to a new, fsynced temp file inside directory.

    The temp file lives in the same directory as its eventual destination so a
    later rename or link stays on one filesystem and is atomic.

    Returns:
        Path to the temp file. The caller owns it and must publish or remove it.
    """
    tmp_fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=prefix, suffix=".tmp")
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return Path(tmp_name)


def write_text_atomic(path: Path, content: str) -> None:
    """Replace path with content so readers see the old or the new file, never a partial one."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = write_temp_file(path.parent, content, prefix=f".{path.name}.")
    try:
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)
