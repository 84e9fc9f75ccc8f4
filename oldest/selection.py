"""Oldest/newest regular-file selection over a single directory listing.

One scan routine serves both modes; the mode is a ``TimeComparator`` passed
in by the caller. Comparison is strict, so among entries tied at the extreme
timestamp the first one in listing order is kept.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from enum import Enum

from .errors import NoEligibleFilesError
from .file_model import DirectoryEntry, list_directory_entries

logger = logging.getLogger(__name__)

Comparator = Callable[[int, int], bool]


def is_older(candidate_ns: int, current_ns: int) -> bool:
    """Return whether ``candidate_ns`` is strictly before ``current_ns``."""
    return candidate_ns < current_ns


def is_newer(candidate_ns: int, current_ns: int) -> bool:
    """Return whether ``candidate_ns`` is strictly after ``current_ns``."""
    return candidate_ns > current_ns


class TimeComparator(Enum):
    """Selection mode; each member is usable directly as a comparator."""

    BEFORE = "oldest"
    AFTER = "newest"

    def __call__(self, candidate_ns: int, current_ns: int) -> bool:
        if self is TimeComparator.BEFORE:
            return is_older(candidate_ns, current_ns)
        return is_newer(candidate_ns, current_ns)

    @classmethod
    def from_mode(cls, mode: str) -> "TimeComparator":
        """Map ``"oldest"``/``"newest"`` to a member, raising ``ValueError`` otherwise."""
        return cls(mode)


def select_extremum(entries: Iterable[DirectoryEntry], comparator: Comparator) -> str:
    """Return the name of the extremal regular file among ``entries``.

    Directories and symlinks are skipped. The first remaining entry seeds the
    running best; later entries replace it only when
    ``comparator(entry.mtime_ns, best.mtime_ns)`` is true.

    Raises ``NoEligibleFilesError`` when no entry survives filtering.
    """
    best: DirectoryEntry | None = None
    for entry in entries:
        if not entry.is_regular_candidate:
            continue
        if best is None or comparator(entry.mtime_ns, best.mtime_ns):
            best = entry

    if best is None:
        raise NoEligibleFilesError()
    logger.debug("selected %s (mtime_ns=%d)", best.name, best.mtime_ns)
    return best.name


def select_oldest(entries: Iterable[DirectoryEntry]) -> str:
    return select_extremum(entries, TimeComparator.BEFORE)


def select_newest(entries: Iterable[DirectoryEntry]) -> str:
    return select_extremum(entries, TimeComparator.AFTER)


def find_file(path: str | os.PathLike[str], comparator: Comparator) -> str:
    """List ``path`` and select from it; listing ``OSError`` propagates as-is."""
    return select_extremum(list_directory_entries(path), comparator)


def get_oldest(path: str | os.PathLike[str]) -> str:
    """Return the oldest regular file name directly inside ``path``."""
    return find_file(path, TimeComparator.BEFORE)


def get_newest(path: str | os.PathLike[str]) -> str:
    """Return the newest regular file name directly inside ``path``."""
    return find_file(path, TimeComparator.AFTER)


__all__ = [
    "Comparator",
    "TimeComparator",
    "is_older",
    "is_newer",
    "select_extremum",
    "select_oldest",
    "select_newest",
    "find_file",
    "get_oldest",
    "get_newest",
]
