"""Filesystem helpers."""

import os
from pathlib import Path


def get_file_size(path: Path) -> int:
    """Return the size of a file in bytes."""
    return os.stat(path).st_size


def remove_if_exists(path: Path) -> None:
    """Delete a file, ignoring a missing one."""
    try:
        path.unlink()
    except FileNotFoundError:
        pass
