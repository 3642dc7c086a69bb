"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

api.py

Boundary operations consumed by an application shell (GUI, CLI, local IPC or HTTP wrapper).

All three calls are synchronous and take/return JSON-serializable values:
- scan_for_duplicates: list duplicate groups of one directory
- get_preview: image/text/unsupported preview of one file
- delete_files_to_trash: move files to the system trash, reporting each path

scan_for_duplicates and get_preview raise DupSweepError subclasses on hard
failures. delete_files_to_trash never raises for individual paths.
"""
import logging
from typing import Any, Dict, Iterable, List

from dupsweep.commands import DuplicateScanCommand
from dupsweep.core.models import ScanParams
from dupsweep.core.preview import PreviewResolver
from dupsweep.services.file_service import FileService

logger = logging.getLogger(__name__)


def scan_for_duplicates(
        path: str,
        mode: str = "strict",
        recursive: bool = False,
        algorithm: str = "sha256",
        workers: int = 1,
) -> List[Dict[str, Any]]:
    """
    Scan a directory and return duplicate groups, largest size first.

    Raises:
        ValueError: unknown mode or algorithm
        PathNotFoundError / NotADirectoryPathError / ReadError: invalid root
    """
    params = ScanParams.from_strings(
        root_dir=path, mode=mode, recursive=recursive, algorithm=algorithm, workers=workers
    )
    groups, stats = DuplicateScanCommand().execute(params)
    logger.info(f"Scan of {path} ({params.mode.value}): {len(groups)} groups, {stats.total_time:.3f}s")
    return [group.to_dict() for group in groups]


def get_preview(path: str) -> Dict[str, Any]:
    """Preview one file. Raises PathNotFoundError / ReadError / DecodeError."""
    return PreviewResolver().preview(path).to_dict()


def delete_files_to_trash(paths: Iterable[str]) -> Dict[str, Any]:
    """Move files to trash; the result lists deleted paths and per-path failures."""
    return FileService.move_multiple_to_trash(list(paths)).to_dict()
