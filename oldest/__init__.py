"""Public package surface for oldest.

Exports ``main`` for programmatic CLI invocation plus the selection helpers.
Most implementation lives in submodules under ``oldest``.
"""

from __future__ import annotations

from .errors import NoEligibleFilesError, NotADirectoryTargetError, OldestError
from .selection import TimeComparator, find_file, get_newest, get_oldest


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = [
    "main",
    "find_file",
    "get_oldest",
    "get_newest",
    "TimeComparator",
    "OldestError",
    "NoEligibleFilesError",
    "NotADirectoryTargetError",
]
