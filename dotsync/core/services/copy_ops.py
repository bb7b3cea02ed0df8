"""
Copy engine — mirror a file or directory tree onto a target path.

Additive and overwriting: every source file replaces the file at the
corresponding target path, missing directories are created, and nothing
already at the target is ever deleted.

Directory sources are walked top-down, so each target directory exists
before anything inside it is copied.

I/O errors propagate as ``OSError``; callers decide how to isolate them.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path

from dotsync.core.models.receipt import Receipt, timing, utc_now

logger = logging.getLogger(__name__)


def copy_path(source: Path, target: Path) -> Receipt:
    """Copy ``source`` to ``target``.

    A missing source is skipped and the target is left untouched.

    Returns:
        Receipt describing what was copied (``kind`` is ``file``,
        ``directory`` or ``missing``).

    Raises:
        OSError: On any failure creating a directory or copying a file.
    """
    started = utc_now()

    if not source.exists():
        logger.debug("Source missing, nothing to copy: %s", source)
        return Receipt.skip(str(source), str(target), **timing(started))

    if source.is_dir():
        files, dirs = copy_directory(source, target)
        return Receipt.success(
            str(source),
            str(target),
            "directory",
            files_copied=files,
            dirs_created=dirs,
            **timing(started),
        )

    copy_file(source, target)
    return Receipt.success(str(source), str(target), "file", files_copied=1, **timing(started))


def copy_file(source: Path, target: Path) -> None:
    """Copy one file, creating the target's parent directories first."""
    target.parent.mkdir(parents=True, exist_ok=True)
    _copy_with_attributes(source, target)


def copy_directory(source: Path, target: Path) -> tuple[int, int]:
    """Recursively copy the tree under ``source`` into ``target``.

    Empty subdirectories are reproduced. Symlinked directories inside
    the tree are not descended.

    Returns:
        ``(files_copied, directories_visited)``.
    """
    files = 0
    dirs = 0
    for current, _subdirs, filenames in os.walk(source, onerror=_raise):
        current_path = Path(current)
        target_dir = target / current_path.relative_to(source)
        target_dir.mkdir(parents=True, exist_ok=True)
        dirs += 1
        for name in filenames:
            _copy_with_attributes(current_path / name, target_dir / name)
            files += 1
    return files, dirs


def _copy_with_attributes(source: Path, target: Path) -> None:
    """Overwrite ``target`` with ``source``; copy metadata best-effort."""
    if target.is_dir() and not target.is_symlink():
        raise IsADirectoryError(errno.EISDIR, "Target is a directory", str(target))
    shutil.copyfile(source, target)
    try:
        shutil.copystat(source, target)
    except OSError as e:
        logger.debug("Could not copy attributes %s -> %s: %s", source, target, e)
    logger.debug("Copied %s -> %s", source, target)


def _raise(error: OSError) -> None:
    raise error
