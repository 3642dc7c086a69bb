"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/stages.py
Pipeline stages for dupsweep's duplicate detection engine.

CLASS HIERARCHY
---------------
SizeStageImpl   : Initial size-based grouping (SizeStage interface), always applied
SizeOnlyStage   : Fast mode result stage, one group per size class, no file reads
FullHashStage   : Strict mode result stage, exact verification by content digest

STAGE CONTRACTS
---------------
SizeStageImpl.process() turns scanned files into size candidate lists.
Result stages turn candidate lists into DuplicateGroups:
  • Every returned group holds at least two files
  • Files that cannot be hashed drop out of their size class only
  • Progress is reported via callback (stage name, processed count, total count)
"""

import logging
from typing import Callable, List, Optional

from dupsweep.core.grouper import FileGrouperImpl
from dupsweep.core.interfaces import ResultStage, SizeStage
from dupsweep.core.models import DuplicateGroup, File, Stage, size_token

logger = logging.getLogger(__name__)


class SizeStageImpl(SizeStage):
    def __init__(self, grouper: FileGrouperImpl):
        self.grouper = grouper

    def process(
            self,
            files: List[File],
            progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[List[File]]:
        """
        Group by file size.
        Returns candidate lists with 2+ files of same size.
        """
        size_groups = self.grouper.group_by_size(files)

        if progress_callback:
            total_files = len(files)
            progress_callback(Stage.SIZE.value, total_files, total_files)

        return list(size_groups.values())


class SizeOnlyStage(ResultStage):
    """
    Fast mode: a size class is reported as-is. Members may differ in content.
    """

    def get_stage_name(self) -> str:
        return Stage.SIZE_ONLY.value

    def process(
            self,
            candidates: List[List[File]],
            progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[DuplicateGroup]:
        groups = []
        for files in candidates:
            size = files[0].size
            token = size_token(size)
            groups.append(DuplicateGroup(
                group_key=token,
                size=size,
                files=[f.with_digest(token) for f in files],
            ))

        if progress_callback:
            total = sum(len(files) for files in candidates)
            progress_callback(self.get_stage_name(), total, total)

        return groups


class FullHashStage(ResultStage):
    """
    Strict mode: each size class is split by full content digest.
    """

    def __init__(self, grouper: FileGrouperImpl):
        self.grouper = grouper

    def get_stage_name(self) -> str:
        return Stage.FULL.value

    def process(
            self,
            candidates: List[List[File]],
            progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[DuplicateGroup]:
        total_files = sum(len(files) for files in candidates)
        processed_files = 0
        groups = []

        for files in candidates:
            size = files[0].size
            hash_groups = self.grouper.group_by_digest(files)
            for digest, matched in hash_groups.items():
                groups.append(DuplicateGroup(group_key=digest, size=size, files=matched))

            processed_files += len(files)
            if progress_callback:
                progress_callback(self.get_stage_name(), processed_files, total_files)

        return groups
