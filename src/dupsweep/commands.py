"""
Unified command orchestrator for duplicate scanning.
This is the SINGLE source of truth for the scan workflow, used by the API layer and the CLI.
"""
from typing import Callable, List, Optional, Tuple

from dupsweep.core.deduplicator import DeduplicatorImpl
from dupsweep.core.grouper import FileGrouperImpl
from dupsweep.core.hasher import HasherImpl, get_algorithm
from dupsweep.core.models import DuplicateGroup, File, ScanParams, ScanStats
from dupsweep.core.scanner import FileScannerImpl


class DuplicateScanCommand:
    """
    Orchestrates the scan workflow:
    1. List the root directory
    2. Run the staged pipeline for the requested mode

    Usage:
        params = ScanParams.from_strings("/photos", mode="strict")
        groups, stats = DuplicateScanCommand().execute(params)
    """

    def __init__(self):
        self._files: List[File] = []

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Execute a scan with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            PathNotFoundError, NotADirectoryPathError, ReadError: invalid or unreadable root
        """
        scanner = FileScannerImpl(root_dir=params.root_dir, recursive=params.recursive)
        self._files = scanner.scan(progress_callback=progress_callback)

        hasher = HasherImpl(get_algorithm(params.algorithm))
        deduplicator = DeduplicatorImpl(FileGrouperImpl(hasher, workers=params.workers))

        return deduplicator.find_duplicates(
            self._files,
            params.mode,
            progress_callback=progress_callback,
        )

    def get_files(self) -> List[File]:
        """Get scanned files after execution."""
        return self._files.copy()
