"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the scan pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- HashState / HashAlgorithm: Incremental hash functions (SHA-256, xxHash3-128).
- Hasher: Interface for computing the full content digest of a file.
- FileScanner: Interface for listing a directory and returning file snapshots.
- FileGrouper: Interface for grouping files by size or digest.
- SizeStage / ResultStage: Interfaces for individual stages of the pipeline.
- Deduplicator: Interface for the engine coordinating all stages.
"""

from typing import Protocol, List, Dict, Tuple, Optional, Callable
from dupsweep.core.models import File, DuplicateGroup, ScanMode, ScanStats


# ===== Interfaces =====

class HashState(Protocol):
    """Running digest state fed chunk by chunk."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256 or xxHash
    without affecting the rest of the pipeline.
    """
    name: str

    def new(self) -> HashState:
        """Creates a fresh incremental hash state."""
        ...


class Hasher(Protocol):
    """Interface for hashing the whole content of a file."""
    def compute_digest(self, path: str) -> str: ...
    def compute_full_hash(self, file: File) -> str: ...


class FileScanner(Protocol):
    """
    Interface for scanning a directory and collecting file metadata.
    """
    def scan(
        self,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[File]:
        """
        Scan files from the configured directory.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            List of regular files found.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping files by size or content digest.
    Only classes with two or more members are returned.
    """
    def group_by_size(self, files: List[File]) -> Dict[int, List[File]]:
        """Group files by their size in bytes."""
        ...

    def group_by_digest(self, files: List[File]) -> Dict[str, List[File]]:
        """Group files by their full content digest."""
        ...


# =============================
# Stage Interfaces
# =============================


class SizeStage(Protocol):
    """
    Interface for the first stage: grouping files by size.
    """
    def process(
        self,
        files: List[File],
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[List[File]]:
        """
        Group files by size to find initial duplicate candidates.

        Returns:
            Candidate lists, each containing 2+ files of the same size.
        """
        ...


class ResultStage(Protocol):
    """
    Interface for a stage turning size candidates into final duplicate groups.
    """
    def get_stage_name(self) -> str:
        """Return the name of this stage (used in logging and stats)."""
        ...

    def process(
        self,
        candidates: List[List[File]],
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[DuplicateGroup]:
        ...


class Deduplicator(Protocol):
    """
    Interface for the main engine.

    Coordinates the stages (size → optional full hash) depending on mode.
    """
    def find_duplicates(
        self,
        files: List[File],
        mode: ScanMode,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Run the pipeline based on the selected mode.

        Returns:
            A tuple containing:
                - Duplicate groups sorted by descending size
                - Statistics collected during processing
        """
        ...
