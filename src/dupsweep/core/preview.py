"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/preview.py

Preview resolver for files listed in duplicate groups.

Classifies a file by its lowercased extension and produces a bounded,
JSON-friendly representation:
- Images (PNG, JPG, GIF, BMP, WEBP, ICO, SVG) as a base64 data URI
- Text and source code as the first 20 lines
- Anything else as an "unsupported" payload naming the extension
"""

import base64
import os
import logging
from enum import Enum
from pathlib import Path
from typing import List

from dupsweep.core.errors import DecodeError, PathNotFoundError, ReadError
from dupsweep.core.models import PreviewKind, PreviewPayload

logger = logging.getLogger(__name__)

PREVIEW_MAX_LINES = 20


class FileCategory(Enum):
    IMAGE = "image"
    TEXT = "text"
    UNSUPPORTED = "unsupported"


IMAGE_EXTENSIONS = frozenset({
    "png", "jpg", "jpeg", "gif", "bmp", "webp", "ico", "svg",
})

TEXT_EXTENSIONS = frozenset({
    "txt", "md", "rs", "js", "ts", "tsx", "jsx", "css", "html", "json", "toml",
    "yaml", "yml", "xml", "csv", "log", "py", "java", "c", "cpp", "h", "go",
    "rb", "php", "sh", "bat", "ps1",
})


def classify_extension(extension: str) -> FileCategory:
    """Map an extension (with or without the dot, any case) to its category."""
    ext = (extension or "").lstrip(".").lower()
    if ext in IMAGE_EXTENSIONS:
        return FileCategory.IMAGE
    if ext in TEXT_EXTENSIONS:
        return FileCategory.TEXT
    return FileCategory.UNSUPPORTED


def split_lines(text: str) -> List[str]:
    """Split on LF, dropping a trailing CR per line and the empty tail after a final newline."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class PreviewResolver:
    """
    Builds PreviewPayloads. Read or decode failures are hard errors for the
    single call; unknown types are a normal "unsupported" result.
    """

    def __init__(self, max_lines: int = PREVIEW_MAX_LINES):
        self.max_lines = max_lines

    def preview(self, file_path: str) -> PreviewPayload:
        # Checked on the raw string: Path("") means the working directory
        if not file_path or not os.path.exists(file_path):
            raise PathNotFoundError(f"File does not exist: {file_path!r}", path=file_path)

        path = Path(file_path)

        extension = path.suffix.lstrip(".").lower()
        category = classify_extension(extension)

        if category == FileCategory.IMAGE:
            return self._image_preview(path, file_path, extension)
        if category == FileCategory.TEXT:
            return self._text_preview(path, file_path)

        logger.debug(f"No preview for {file_path} (extension '{extension}')")
        return PreviewPayload(
            kind=PreviewKind.UNSUPPORTED,
            content=f"Preview not supported for file type: .{extension}",
            source_path=file_path,
        )

    @staticmethod
    def _image_preview(path: Path, file_path: str, extension: str) -> PreviewPayload:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ReadError(f"Failed to read image {file_path}: {e}", path=file_path) from e

        encoded = base64.b64encode(data).decode("ascii")
        return PreviewPayload(
            kind=PreviewKind.IMAGE,
            content=f"data:image/{extension};base64,{encoded}",
            source_path=file_path,
        )

    def _text_preview(self, path: Path, file_path: str) -> PreviewPayload:
        try:
            text = path.read_bytes().decode("utf-8")
        except OSError as e:
            raise ReadError(f"Failed to read text {file_path}: {e}", path=file_path) from e
        except UnicodeDecodeError as e:
            raise DecodeError(f"File is not valid UTF-8: {file_path}", path=file_path) from e

        lines = split_lines(text)[:self.max_lines]
        return PreviewPayload(
            kind=PreviewKind.TEXT,
            content="\n".join(lines),
            source_path=file_path,
        )
