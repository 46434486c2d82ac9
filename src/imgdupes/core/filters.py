"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/filters.py
Extension allow-list used to decide which files get hashed.
"""

from pathlib import Path
from typing import Iterable, Optional

from imgdupes.core.interfaces import FileFilter, PathLike
from imgdupes.core.models import ScanConfig


class ExtensionFilter(FileFilter):
    """
    Case-insensitive match of a path's final suffix against a fixed set.

    Attributes:
        extensions: Allowed suffixes, lowercase with a leading dot (e.g. ".jpg")
    """

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        if extensions is None:
            extensions = ScanConfig.DEFAULT_IMAGE_EXTENSIONS
        normalized = set()
        for ext in extensions:
            ext = ext.strip().lower()
            if ext and not ext.startswith('.'):
                ext = f".{ext}"
            if ext:
                normalized.add(ext)
        self.extensions = frozenset(normalized)

    def is_eligible(self, path: PathLike) -> bool:
        """
        Check if the path ends with one of the allowed extensions.
        Paths without a suffix ("README", ".jpg") are never eligible.
        """
        ext = Path(path).suffix.lower()
        if not ext:
            return False
        return ext in self.extensions

    def __repr__(self):
        return f"<ExtensionFilter {sorted(self.extensions)}>"
