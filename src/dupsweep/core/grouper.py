"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements file grouping strategies using File objects and Hasher.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, TypeVar

from dupsweep.core.errors import ReadError
from dupsweep.core.hasher import HasherImpl
from dupsweep.core.interfaces import FileGrouper, Hasher
from dupsweep.core.models import File

logger = logging.getLogger(__name__)

T = TypeVar("T")


def group_by(items: Iterable[T], key_func: Callable[[T], Optional[Hashable]]) -> Dict[Any, List[T]]:
    """
    Partition items by a computed key, keeping first-seen order inside each list.
    Items whose key is None are left out.
    """
    groups: Dict[Any, List[T]] = {}
    for item in items:
        key = key_func(item)
        if key is None:
            continue
        groups.setdefault(key, []).append(item)
    return groups


def filter_duplicates(groups: Dict[Any, List[T]]) -> Dict[Any, List[T]]:
    """Drop singleton classes: they carry no duplication signal."""
    return {key: members for key, members in groups.items() if len(members) >= 2}


class FileGrouperImpl(FileGrouper):
    """
    A concrete implementation of FileGrouper.
    Uses an injected Hasher instance for flexibility and testability.
    With workers > 1, digests of one batch are computed on a thread pool;
    results are collected in input order so grouping is scheduling-independent.
    """

    def __init__(self, hasher: Hasher = None, workers: int = 1):
        self.hasher = hasher or HasherImpl()
        self.workers = max(1, workers)

    def group_by_size(self, files: List[File]) -> Dict[int, List[File]]:
        """Groups files by their size."""
        return filter_duplicates(group_by(files, lambda f: f.size))

    def group_by_digest(self, files: List[File]) -> Dict[str, List[File]]:
        """
        Groups files by full content digest. Files that cannot be hashed are
        excluded; the rest of the batch is unaffected. Returned records carry
        their digest.
        """
        digests = self._compute_digests(files)
        hashed = [f.with_digest(d) for f, d in zip(files, digests) if d is not None]

        skipped = len(files) - len(hashed)
        if skipped:
            logger.warning(f"Skipped {skipped} file(s) due to hash computation errors")

        return filter_duplicates(group_by(hashed, lambda f: f.digest))

    def _compute_digests(self, files: List[File]) -> List[Optional[str]]:
        if self.workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                return list(pool.map(self._safe_digest, files))
        return [self._safe_digest(f) for f in files]

    def _safe_digest(self, file: File) -> Optional[str]:
        try:
            return self.hasher.compute_full_hash(file)
        except ReadError as e:
            logger.warning(f"Error processing {file.path}: {e}")
            return None
