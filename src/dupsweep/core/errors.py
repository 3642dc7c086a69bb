"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy for hard failures of scanning and previewing.

Soft failures (unreadable file metadata, a file that cannot be hashed,
a path that cannot be trashed) are never raised through these classes:
they are logged and excluded from results by the component that hits them.
"""

from typing import Optional


class DupSweepError(Exception):
    """Base class for all dupsweep errors. Carries the offending path."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PathNotFoundError(DupSweepError):
    """Scan root or preview target does not exist."""


class NotADirectoryPathError(DupSweepError):
    """Scan root exists but is not a directory."""


class ReadError(DupSweepError):
    """Directory listing, file read or hash read failed."""


class DecodeError(DupSweepError):
    """Text preview target is not valid UTF-8."""
