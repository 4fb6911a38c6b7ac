"""Saving a file while keeping a rotating set of backups."""

from __future__ import annotations

import os
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .paths import PathLike, real_path, rename_file


@dataclass(frozen=True)
class BackupOptions:
    """How backups are kept when a file is saved."""

    enabled: bool = True
    num_slots: int = 3

    def __post_init__(self) -> None:
        if not 0 <= self.num_slots <= 255:
            raise ValueError(f"num_slots must be between 0 and 255, got {self.num_slots}")


def save_with_backup(
    path: PathLike,
    options: BackupOptions,
    do_write: Callable[[Path], None],
) -> None:
    """Save a file through a temporary file, rotating backups on the way.

    1. ``do_write`` writes the new contents to ``<path>.tmp``.
    2. Existing backups shift one slot up (``.bkp-1`` -> ``.bkp-2`` ...).
    3. The current file moves to ``.bkp-1``.
    4. The temporary file replaces the current file.

    Symlinks at the file and backup paths are followed. Any error raised by
    ``do_write`` propagates and leaves the existing files untouched.
    """
    base = os.fspath(path)
    target = real_path(base)
    tmp = Path(base + ".tmp")
    backup = base + ".bkp"

    do_write(tmp)

    if options.enabled:
        if options.num_slots > 1:
            top = real_path(f"{backup}-{options.num_slots}")
            with suppress(OSError):
                os.remove(top)

            for slot in range(options.num_slots - 1, 0, -1):
                lower = real_path(f"{backup}-{slot}")
                upper = real_path(f"{backup}-{slot + 1}")
                with suppress(OSError):
                    rename_file(lower, upper)

        with suppress(OSError):
            rename_file(target, Path(f"{backup}-1"))

    rename_file(tmp, target)