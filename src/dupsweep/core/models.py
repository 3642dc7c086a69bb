"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for duplicate scanning, previews and trash operations.
"""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Union


# =============================
# Enums
# =============================

class ScanMode(Enum):
    """
    Scan mode controlling the depth of duplicate detection.
    """
    FAST = "fast"
    STRICT = "strict"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            ScanMode.FAST: "Fast",
            ScanMode.STRICT: "Strict",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            ScanMode.FAST:
                "Size only (no file reads, may report same-size files with different content)",
            ScanMode.STRICT:
                "Size → Full content hash (exact, reads every candidate)",
        }
        return mapping.get(self, self.value)

    @classmethod
    def parse(cls, value: Union[str, "ScanMode"]) -> "ScanMode":
        """
        Resolve a mode string. Unknown strings are rejected rather than
        silently mapped to a default.
        """
        if isinstance(value, ScanMode):
            return value
        key = (value or "").strip().lower()
        mode = MODE_ALIASES.get(key)
        if mode is None:
            raise ValueError(
                f"Invalid scan mode: '{value}'. Valid options: {', '.join(MODE_ALIASES)}"
            )
        return mode

    def __repr__(self) -> str:
        return self.value


MODE_ALIASES = {
    "fast": ScanMode.FAST,
    "size": ScanMode.FAST,
    "size_only": ScanMode.FAST,
    "strict": ScanMode.STRICT,
    "exact": ScanMode.STRICT,
    "full": ScanMode.STRICT,
}


class PreviewKind(Enum):
    IMAGE = "image"
    TEXT = "text"
    UNSUPPORTED = "unsupported"


class Stage(str, Enum):
    SIZE = "Size grouping"
    SIZE_ONLY = "Size-only result"
    FULL = "Full Hash"


# ======================
#  Core Data Models
# ======================

def size_token(size: int) -> str:
    """Synthetic group key used when content was not verified."""
    return f"size_{size}"


@dataclass(frozen=True)
class File:
    """
    Snapshot of a single regular file taken during a scan.
    `digest` is the content hash in strict mode and a size token otherwise.
    """
    path: str
    size: int  # in bytes
    name: Optional[str] = None
    extension: Optional[str] = None
    digest: Optional[str] = None

    def __post_init__(self):
        """Derive basename and extension from path if not provided."""
        if self.name is None:
            object.__setattr__(self, "name", os.path.basename(self.path))

        if self.extension is None:
            _, ext = os.path.splitext(self.name)
            object.__setattr__(self, "extension", ext.lstrip(".").lower())  # ".JPG" → "jpg"

    def with_digest(self, digest: str) -> "File":
        return replace(self, digest=digest)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "size_bytes": self.size,
            "extension": self.extension,
            "content_digest": self.digest,
        }

    def __repr__(self):
        return f"<File path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    A group of two or more files sharing a size (fast mode) or a content
    digest (strict mode). `group_key` identifies content only in strict mode.
    """
    group_key: str
    size: int
    files: List[File]

    def __post_init__(self):
        if len(self.files) < 2:
            raise ValueError("A duplicate group needs at least two files")

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def reclaimable_bytes(self) -> int:
        """Bytes freed by keeping a single copy."""
        return self.size * (len(self.files) - 1)

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group_key": self.group_key,
            "size_bytes": self.size,
            "members": [f.to_dict() for f in self.files],
        }

    def __repr__(self):
        return f"<DuplicateGroup key={self.group_key}, size={self.size}, count={len(self.files)}>"


@dataclass(frozen=True)
class PreviewPayload:
    kind: PreviewKind
    content: str
    source_path: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "content": self.content,
            "source_path": self.source_path,
        }


@dataclass(frozen=True)
class DeleteFailure:
    path: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "reason": self.reason}


@dataclass
class DeleteOutcome:
    """
    Per-path result of a batch trash operation.
    Every input path lands in exactly one of `deleted` or `failures`.
    """
    deleted: List[str] = field(default_factory=list)
    failures: List[DeleteFailure] = field(default_factory=list)

    def record_success(self, path: str) -> "DeleteOutcome":
        self.deleted.append(path)
        return self

    def record_failure(self, path: str, reason: str) -> "DeleteOutcome":
        self.failures.append(DeleteFailure(path=path, reason=reason))
        return self

    @property
    def failed_paths(self) -> List[str]:
        return [f.path for f in self.failures]

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "deleted": list(self.deleted),
            "failures": [f.to_dict() for f in self.failures],
        }


class ScanStats:
    """
    Statistics collected during the scan pipeline.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.files_scanned: int = 0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}

    def update_stage(
            self,
            stage_name: str,
            groups_found: int,
            files_processed: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "groups": 0,
                "files": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["groups"] += groups_found
        self.stage_stats[stage_name]["files"] += files_processed
        self.stage_stats[stage_name]["time"] += duration


    def print_summary(self) -> str:
        labels = {
            "size": "📁 Size Groups",
            "size_only": "📏 Size-only Groups",
            "full": "🔍 Full Content Hash Groups",
        }

        lines = [
            "📊 Scan Statistics:",
            f"Files scanned: {self.files_scanned}",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Stage: GROUPS / FILES / TIME"
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage.lower(), stage.title())
            lines.append(f"{label}: {data['groups']} / {data['files']} / {data['time']:.3f}s")

        return "\n".join(lines)


# ======================
#  Scan parameters DTO
#  Interface-agnostic, used by the API layer and the CLI.
# ======================

@dataclass
class ScanParams:
    """Parameters for a scan with validation."""
    root_dir: str
    mode: ScanMode = ScanMode.STRICT
    recursive: bool = False
    algorithm: str = "sha256"
    workers: int = 1

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        self.mode = ScanMode.parse(self.mode)

        if self.workers < 1:
            raise ValueError("Worker count must be at least 1")

        # Imported lazily: hasher depends on this module
        from dupsweep.core.hasher import ALGORITHMS
        self.algorithm = self.algorithm.strip().lower()
        if self.algorithm not in ALGORITHMS:
            raise ValueError(
                f"Unknown hash algorithm: '{self.algorithm}'. "
                f"Valid options: {', '.join(sorted(ALGORITHMS))}"
            )

    @staticmethod
    def from_strings(
            root_dir: str,
            mode: str = "strict",
            recursive: bool = False,
            algorithm: str = "sha256",
            workers: int = 1,
    ) -> 'ScanParams':
        """
        Factory method to create params from raw string inputs.
        Useful for CLI argument parsing or RPC request conversion.
        """
        return ScanParams(
            root_dir=root_dir,
            mode=ScanMode.parse(mode),
            recursive=bool(recursive),
            algorithm=algorithm,
            workers=int(workers),
        )
