"""Error kinds raised by the file selector and CLI.

Listing failures are plain ``OSError`` instances and are never wrapped.
"""

from __future__ import annotations


class OldestError(Exception):
    """Base class for errors that originate in this package."""


class NoEligibleFilesError(OldestError, LookupError):
    """Directory listed fine but held no regular (non-dir, non-symlink) files."""

    def __init__(self, message: str = "no files found") -> None:
        super().__init__(message)


class NotADirectoryTargetError(OldestError):
    """Explicit target path does not refer to a directory."""

    def __init__(self, path: str, message: str = "Not a directory") -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "OldestError",
    "NoEligibleFilesError",
    "NotADirectoryTargetError",
]
