"""Domain model for one level of directory entries.

This package contains non-CLI filesystem primitives:
- the immutable per-entry datatype
- the single-level directory lister and directory check
"""

from __future__ import annotations

from .types import DirectoryEntry
from .fs import is_directory, list_directory_entries

__all__ = [
    "DirectoryEntry",
    "is_directory",
    "list_directory_entries",
]
