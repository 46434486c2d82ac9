"""
imgdupes finds identical images in a directory tree by content checksum.

Core features:
- Streaming xxHash64 digests, computed on a thread pool or sequentially
- Console report and JSON report of identical file groups
- Optional relocation of redundant copies into a target directory
- Optional move of redundant copies to the system trash (via send2trash)
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("imgdupes")
except PackageNotFoundError:
    import tomllib
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from imgdupes.commands import ScanCommand
from imgdupes.core import (
    DirectoryScanner, DuplicateGroup, ExecutionMode, ExtensionFilter, ScanParams, ScanStats)
from imgdupes.services import FileService, ReportService, RelocationError

__all__ = [
    "ScanCommand",
    "DirectoryScanner",
    "DuplicateGroup",
    "ExecutionMode",
    "ExtensionFilter",
    "ScanParams",
    "ScanStats",
    "FileService",
    "ReportService",
    "RelocationError",
    "__version__",
]
