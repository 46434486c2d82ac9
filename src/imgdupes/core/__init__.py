"""
Core scan engine: extension filter, hasher, grouper, and traversal driver.

This package contains the performance-critical foundation of imgdupes:
- ExtensionFilter: case-insensitive image extension allow-list
- HasherImpl + XXHashAlgorithmImpl: streaming xxHash64 content digests
- ChecksumGrouper: thread-safe digest -> paths accumulation
- DirectoryScanner: recursive traversal with parallel or sequential hashing
- Models: DuplicateGroup, ScanParams, ScanStats and configuration constants

All components are pure Python with no UI dependencies beyond tqdm progress bars.
"""

from .filters import ExtensionFilter
from .hasher import HasherImpl, XXHashAlgorithmImpl, ChecksumReadError
from .grouper import ChecksumGrouper
from .progress import ProgressIndicator
from .scanner import DirectoryScanner, SequentialStrategy, ThreadPoolStrategy, create_strategy
from .models import (
    ChecksumMap, Digest, DuplicateGroup, ExecutionMode, ScanConfig, ScanParams, ScanStats)

__all__ = [
    "ExtensionFilter",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "ChecksumReadError",
    "ChecksumGrouper",
    "ProgressIndicator",
    "DirectoryScanner",
    "SequentialStrategy",
    "ThreadPoolStrategy",
    "create_strategy",
    "ChecksumMap",
    "Digest",
    "DuplicateGroup",
    "ExecutionMode",
    "ScanConfig",
    "ScanParams",
    "ScanStats",
]
