"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements the staged duplicate detection pipeline using File objects.
Supports two modes:
    - fast: size
    - strict: size → full content hash
"""
import logging
import time
from typing import Callable, List, Optional, Tuple

from dupsweep.core.grouper import FileGrouperImpl
from dupsweep.core.interfaces import Deduplicator, ResultStage
from dupsweep.core.models import DuplicateGroup, File, ScanMode, ScanStats
from dupsweep.core.stages import FullHashStage, SizeOnlyStage, SizeStageImpl

logger = logging.getLogger(__name__)


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Implements staged duplicate detection.
    Respects the ScanMode enum and collects statistics.
    """
    def __init__(self, grouper: FileGrouperImpl = None):
        self.grouper = grouper or FileGrouperImpl()

    def find_duplicates(
        self,
        files: List[File],
        mode: ScanMode,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Main pipeline.
        Args:
            files: List of scanned file objects
            mode: ScanMode.FAST or ScanMode.STRICT
            progress_callback (Optional[Callable[[str, int, int], None]]): Reports progress per stage.
        Returns:
            Tuple[List[DuplicateGroup], ScanStats], groups sorted by descending size
        """
        mode = ScanMode.parse(mode)
        stats = ScanStats()
        stats.files_scanned = len(files)
        total_start_time = time.time()

        # Initial stage: group by size
        start_time = time.time()
        candidates = SizeStageImpl(self.grouper).process(files, progress_callback=progress_callback)
        stats.update_stage(
            stage_name="size",
            groups_found=len(candidates),
            files_processed=sum(len(c) for c in candidates),
            duration=time.time() - start_time,
        )
        logger.debug(f"Size stage: {len(candidates)} candidate classes from {len(files)} files")

        stage_name, stage = self._build_result_stage(mode)
        start_time = time.time()
        groups = stage.process(candidates, progress_callback=progress_callback)
        stats.update_stage(
            stage_name=stage_name,
            groups_found=len(groups),
            files_processed=sum(len(g.files) for g in groups),
            duration=time.time() - start_time,
        )

        # Sort by descending size; equal sizes keep their relative order
        groups.sort(key=lambda g: -g.size)

        stats.total_time = time.time() - total_start_time
        logger.debug(f"Found {len(groups)} duplicate groups in {stats.total_time:.3f}s")
        return groups, stats

    def _build_result_stage(self, mode: ScanMode) -> Tuple[str, ResultStage]:
        if mode == ScanMode.STRICT:
            return "full", FullHashStage(self.grouper)
        return "size_only", SizeOnlyStage()
