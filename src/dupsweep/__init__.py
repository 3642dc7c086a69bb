"""
dupsweep: duplicate file finder for a single directory.

Core features:
- Two scan modes: FAST (size only) and STRICT (size + full content hash)
- Previews of listed files: images as data URIs, text as the first 20 lines
- Safe deletion to system trash (via send2trash) with per-file results
- CLI interface and JSON-friendly API functions for application shells
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("dupsweep")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Public API: only what users should import directly
from dupsweep.api import scan_for_duplicates, get_preview, delete_files_to_trash
from dupsweep.commands import DuplicateScanCommand
from dupsweep.core import (
    ScanParams, ScanMode, File, DuplicateGroup, PreviewPayload, PreviewKind,
    DeleteOutcome, DupSweepError)
from dupsweep.services import DuplicateService, FileService

__all__ = [
    "scan_for_duplicates",
    "get_preview",
    "delete_files_to_trash",
    "DuplicateScanCommand",
    "ScanParams",
    "ScanMode",
    "File",
    "DuplicateGroup",
    "PreviewPayload",
    "PreviewKind",
    "DeleteOutcome",
    "DupSweepError",
    "DuplicateService",
    "FileService",
    "__version__",
]
