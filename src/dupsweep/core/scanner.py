"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements directory listing for the scan pipeline using pathlib.
Features:
- Lists the direct entries of one directory (default)
- Optionally walks subdirectories, skipping system trash folders
- Skips anything that is not a regular file, and files whose metadata cannot be read
- Returns a List of File snapshots
"""

import logging
import os
import stat
import sys
import time
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from dupsweep.core.errors import NotADirectoryPathError, PathNotFoundError, ReadError
from dupsweep.core.interfaces import FileScanner
from dupsweep.core.models import File

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Lists regular files of a directory.
    Uses `pathlib.Path` for safe and consistent cross-platform behavior.

    Attributes:
        root_dir: Directory to scan
        recursive: Descend into subdirectories when True
    """

    def __init__(self, root_dir: str, recursive: bool = False):
        self.root_dir = root_dir
        self.recursive = recursive

    def scan(self,
             progress_callback: Optional[Callable[[str, int, object], None]] = None) -> List[File]:
        """
        Returns the regular files found under the root directory.

        Raises:
            PathNotFoundError: root does not exist
            NotADirectoryPathError: root is not a directory
            ReadError: root cannot be listed
        """
        logger.debug(f"Root directory: {self.root_dir} (recursive={self.recursive})")

        root_path = Path(self.root_dir)
        self._validate_root(root_path)

        found_files = []
        start_time = time.time()

        for path in self._iter_candidates(root_path):
            file_info = self._process_file(path)
            if file_info:
                found_files.append(file_info)

        if progress_callback:
            progress_callback('scanning', len(found_files), None)

        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(found_files)} files.")
        return found_files

    def _validate_root(self, root_path: Path) -> None:
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise PathNotFoundError(error_msg, path=self.root_dir)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise NotADirectoryPathError(error_msg, path=self.root_dir)

    def _iter_candidates(self, root_path: Path) -> Iterator[Path]:
        if not self.recursive:
            try:
                with os.scandir(root_path) as entries:
                    paths = [Path(entry.path) for entry in entries]
            except OSError as e:
                error_msg = f"Failed to read directory {self.root_dir}: {e}"
                logger.error(error_msg)
                raise ReadError(error_msg, path=self.root_dir) from e
            yield from paths
            return

        # The root itself must be listable; deeper failures only lose that subtree
        def on_walk_error(err: OSError):
            if Path(err.filename or "") == root_path:
                error_msg = f"Failed to read directory {self.root_dir}: {err}"
                logger.error(error_msg)
                raise ReadError(error_msg, path=self.root_dir) from err
            logger.debug(f"Skipping unreadable directory: {err.filename}")

        for root, dirs, files in os.walk(str(root_path), onerror=on_walk_error):
            # Pre-filter subdirectories BEFORE os.walk enters them
            dirs[:] = [d for d in dirs if self._prefilter_dirs(Path(root) / d)]
            for filename in files:
                yield Path(root) / filename

    @staticmethod
    def _is_system_trash(path: Path) -> bool:
        """
        Check if path belongs to OS trash/recycle bin (cross-platform).
        Returns False on any error.
        """
        try:
            path_str = str(path.resolve(strict=False))

            if sys.platform == "win32":
                if "$Recycle.Bin" in path_str or "\\Recycler\\" in path_str:
                    return True
            elif sys.platform == "darwin":
                if "/.Trash/" in path_str or path_str.endswith("/.Trash"):
                    return True
            else:
                # Linux/BSD: freedesktop.org standard locations
                if ".local/share/Trash" in path_str or "/.Trash-" in path_str:
                    return True

            return False
        except (OSError, ValueError):
            return False

    def _prefilter_dirs(self, path: Path) -> bool:
        """Skip symlinked directories and system trash, which holds previously trashed duplicates."""
        if path.is_symlink():
            logger.debug(f"Skipping symlinked directory: {path}")
            return False
        if FileScannerImpl._is_system_trash(path):
            logger.debug(f"Skipping system trash directory: {path}")
            return False
        return True

    @staticmethod
    def _process_file(path: Path) -> Optional[File]:
        """
        Build a File snapshot for a regular file, or None if the entry must be skipped.
        Metadata failures are soft: the file is left out of the scan.
        """
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return None
            stat_result = path.stat()
        except OSError as e:
            logger.debug(f"Could not read metadata of {path}: {e}")
            return None

        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug(f"Skipping non-regular entry: {path}")
            return None

        return File(path=str(path.absolute()), size=stat_result.st_size)
