"""Filesystem helpers: symlink resolution and atomic renames."""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def _is_symlink(path: Path) -> bool | None:
    """Return whether path is a symlink, or None if that cannot be determined."""
    try:
        return path.is_symlink()
    except OSError:
        return None


def real_path(path: PathLike) -> Path:
    """Follow a chain of symlinks to the path it finally points at.

    The final target does not need to exist. Relative link targets are
    resolved against the directory of the original path. Raises OSError
    with errno ELOOP when the chain loops.
    """
    current = Path(path)
    if not _is_symlink(current):
        return current

    base = current.parent
    seen: set[str] = set()
    while True:
        key = os.fspath(current)
        if key in seen:
            raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), key)
        seen.add(key)

        target = Path(os.readlink(current))
        current = target if target.is_absolute() else base / target
        if not _is_symlink(current):
            return current


def rename_file(source: PathLike, target: PathLike) -> None:
    """Move source to target, replacing target if it exists."""
    os.replace(source, target)