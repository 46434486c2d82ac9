"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and configuration for checksum-based duplicate image detection.
"""

import os
from dataclasses import dataclass, field
from typing import List, Dict, Optional
from enum import Enum


# Digest is a 64-bit unsigned xxHash value, ChecksumMap maps it to paths in discovery order
Digest = int
ChecksumMap = Dict[Digest, List[str]]


def display_path(path) -> str:
    """
    Printable form of a path. Undecodable bytes in file names become U+FFFD,
    so the result is always valid UTF-8. Never use it to open or move files.
    """
    return os.fsencode(path).decode("utf-8", "replace")


# =============================
# Config
# =============================

class ScanConfig:
    CHUNK_SIZE = 8 * 1024  # Read buffer for streaming hashing
    DEFAULT_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp")
    DEFAULT_OUTPUT_FILE = "identical_files.json"
    PROGRESS_BAR_FORMAT = "[{elapsed}] {bar:40} {n_fmt}/{total_fmt} {desc}"
    PROGRESS_CHARS = "-#"  # tqdm ascii charset: padding first, fill last


# =============================
# Enums
# =============================

class ExecutionMode(Enum):
    """
    How the traversal driver schedules per-entry work.
    """
    PARALLEL = "parallel"
    SEQUENTIAL = "sequential"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            ExecutionMode.PARALLEL: "Parallel",
            ExecutionMode.SEQUENTIAL: "Sequential",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass
class DuplicateGroup:
    """
    Files sharing one content checksum.
    The first file is the one kept in place by relocation.
    """
    checksum: Digest
    files: List[str]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def original(self) -> str:
        return self.files[0]

    @property
    def redundant(self) -> List[str]:
        return self.files[1:]

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def to_dict(self) -> Dict[str, object]:
        return {"checksum": self.checksum, "files": [display_path(path) for path in self.files]}

    def __repr__(self):
        return f"<DuplicateGroup checksum={self.checksum:016x}, count={len(self.files)}>"


@dataclass
class ScanStats:
    """
    Counters collected during a single scan.
    """
    total_entries: int = 0
    processed_entries: int = 0
    hashed_files: int = 0
    skipped_files: int = 0
    duration: float = 0.0

    def print_summary(self) -> str:
        lines = [
            "📊 Scan Statistics:",
            f"Total Execution Time: {self.duration:.3f}s\n",
            f"📁 Entries discovered: {self.total_entries}",
            f"📄 Entries processed: {self.processed_entries}",
            f"🔍 Files hashed: {self.hashed_files}",
        ]
        if self.skipped_files:
            lines.append(f"⚠️ Unreadable files skipped: {self.skipped_files}")
        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
Interface-agnostic. Used by the CLI and by library callers.
"""

@dataclass
class ScanParams:
    """Parameters for a duplicate scan with validation."""
    root_dir: str
    target_dir: Optional[str] = None
    output_file: Optional[str] = ScanConfig.DEFAULT_OUTPUT_FILE
    extensions: List[str] = field(default_factory=lambda: list(ScanConfig.DEFAULT_IMAGE_EXTENSIONS))
    mode: ExecutionMode = ExecutionMode.PARALLEL
    workers: Optional[int] = None
    use_trash: bool = False
    show_progress: bool = True

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.workers is not None and self.workers < 1:
            raise ValueError("Worker count must be at least 1")

        if self.use_trash and self.target_dir:
            raise ValueError("Cannot both relocate duplicates and move them to trash")

        # Normalize extensions: ensure they start with dot and are lowercase
        normalized = []
        for ext in self.extensions:
            ext = ext.strip().lower()
            if ext and not ext.startswith('.'):
                ext = f".{ext}"
            if ext:
                normalized.append(ext)
        if not normalized:
            raise ValueError("At least one file extension is required")
        self.extensions = normalized
