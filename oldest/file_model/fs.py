"""Filesystem scanning for one directory level."""

from __future__ import annotations

import logging
import os
import stat

from .types import DirectoryEntry

logger = logging.getLogger(__name__)


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` currently stats as a directory.

    Follows symlinks, so a link pointing at a directory counts. Any stat
    failure is reported as ``False``.
    """
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def list_directory_entries(directory: str | os.PathLike[str]) -> list[DirectoryEntry]:
    """List immediate children of ``directory`` in OS-reported order.

    Raises ``OSError`` when the directory is missing, unreadable, or not a
    directory, and also when a child vanishes between listing and stat.
    """
    entries: list[DirectoryEntry] = []
    with os.scandir(directory) as children:
        for child in children:
            is_symlink = child.is_symlink()
            is_dir = child.is_dir(follow_symlinks=False)
            child_stat = child.stat(follow_symlinks=False)
            entries.append(
                DirectoryEntry(
                    name=child.name,
                    is_dir=is_dir,
                    is_symlink=is_symlink,
                    mtime_ns=int(child_stat.st_mtime_ns),
                )
            )
    logger.debug("listed %d entries in %s", len(entries), os.fspath(directory))
    return entries


__all__ = [
    "is_directory",
    "list_directory_entries",
]
