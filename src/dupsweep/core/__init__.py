"""
Core duplicate detection engine.

This package contains the foundation of dupsweep:
- FileScannerImpl: single-level (or optional recursive) directory listing
- HasherImpl + Sha256AlgorithmImpl / XXHash128AlgorithmImpl: streaming content digests
- FileGrouperImpl: size and digest grouping with singleton filtering
- Deduplicator: staged pipeline (size → optional full hash)
- PreviewResolver: image/text/unsupported previews
- Models: File, DuplicateGroup, PreviewPayload, DeleteOutcome and configuration objects

All components are pure Python with no GUI dependencies, suitable for CLI and server usage.
"""

from .errors import DupSweepError, PathNotFoundError, NotADirectoryPathError, ReadError, DecodeError
from .models import (
    File, DuplicateGroup, ScanMode, ScanParams, ScanStats,
    PreviewKind, PreviewPayload, DeleteOutcome, DeleteFailure)
from .hasher import HasherImpl, Sha256AlgorithmImpl, XXHash128AlgorithmImpl, get_algorithm
from .grouper import FileGrouperImpl, group_by, filter_duplicates
from .scanner import FileScannerImpl
from .deduplicator import DeduplicatorImpl
from .preview import PreviewResolver, FileCategory, classify_extension

__all__ = [
    "DupSweepError",
    "PathNotFoundError",
    "NotADirectoryPathError",
    "ReadError",
    "DecodeError",
    "File",
    "DuplicateGroup",
    "ScanMode",
    "ScanParams",
    "ScanStats",
    "PreviewKind",
    "PreviewPayload",
    "DeleteOutcome",
    "DeleteFailure",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "XXHash128AlgorithmImpl",
    "get_algorithm",
    "FileGrouperImpl",
    "group_by",
    "filter_duplicates",
    "FileScannerImpl",
    "DeduplicatorImpl",
    "PreviewResolver",
    "FileCategory",
    "classify_extension",
]
