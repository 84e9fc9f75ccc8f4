"""Domain datatypes for immediate directory entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """One directory child with the metadata the selector needs.

    ``mtime_ns`` comes from a non-following stat, so for symlinks it is the
    link's own modification time rather than its target's.
    """

    name: str
    is_dir: bool
    is_symlink: bool
    mtime_ns: int

    @property
    def is_regular_candidate(self) -> bool:
        """Return whether this entry may be reported as a result."""
        return not (self.is_dir or self.is_symlink)


__all__ = [
    "DirectoryEntry",
]
