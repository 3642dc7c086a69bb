"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Cross-platform reversible deletion: files are moved to the system trash
(Recycle Bin / Trash / freedesktop.org trash) via send2trash, never erased.
"""
import logging
import os
from typing import Iterable

from send2trash import send2trash

from dupsweep.core.errors import PathNotFoundError
from dupsweep.core.models import DeleteOutcome

logger = logging.getLogger(__name__)

MISSING_FILE_REASON = "does not exist"


class FileService:
    """
    Trash operations with per-file error reporting.
    """

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        # An empty string would otherwise resolve to the working directory
        if not file_path or not os.path.lexists(file_path):
            raise PathNotFoundError(f"File not found: {file_path!r}", path=file_path)

        try:
            send2trash(file_path)
        except Exception as e:
            raise RuntimeError(f"Failed to move to trash: {e}") from e

    @classmethod
    def move_multiple_to_trash(cls, file_paths: Iterable[str]) -> DeleteOutcome:
        """
        Moves files to trash in input order. Each distinct path ends up either
        in `deleted` or in `failures`; repeats are ignored and one bad path
        never stops the batch.
        """
        outcome = DeleteOutcome()
        seen = set()
        for path in file_paths:
            if path in seen:
                logger.debug(f"Ignoring repeated path {path!r}")
                continue
            seen.add(path)

            try:
                cls.move_to_trash(path)
            except PathNotFoundError:
                logger.warning(f"Cannot trash {path!r}: {MISSING_FILE_REASON}")
                outcome.record_failure(path, MISSING_FILE_REASON)
            except RuntimeError as e:
                logger.warning(f"Cannot trash {path!r}: {e}")
                outcome.record_failure(path, str(e))
            else:
                outcome.record_success(path)

        if outcome.has_failures:
            logger.warning(
                f"Moved {len(outcome.deleted)} file(s) to trash, {len(outcome.failures)} failed"
            )
        return outcome
