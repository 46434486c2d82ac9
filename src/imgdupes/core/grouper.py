"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Thread-safe accumulation of file paths into checksum-keyed groups.
"""

import threading
from typing import List, Dict
from collections import defaultdict

from imgdupes.core.models import ChecksumMap, Digest, DuplicateGroup


class ChecksumGrouper:
    """
    Collects (path, digest) pairs from any number of worker threads.

    Only the dict mutation runs under the lock; callers hash outside of it.
    Once finalize() has handed the map out, the grouper refuses further writes.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._groups: Dict[Digest, List[str]] = defaultdict(list)
        self._recorded = 0
        self._finalized = False

    def record(self, path: str, digest: Digest) -> None:
        """Appends path to the group for digest, creating the group if absent."""
        with self._lock:
            if self._finalized:
                raise RuntimeError("Cannot record into a finalized checksum map")
            self._groups[digest].append(path)
            self._recorded += 1

    @property
    def recorded_count(self) -> int:
        with self._lock:
            return self._recorded

    def finalize(self) -> ChecksumMap:
        """
        Closes the grouper and returns the completed mapping.
        Must be called only after every writer has finished.
        """
        with self._lock:
            if self._finalized:
                raise RuntimeError("Checksum map has already been finalized")
            self._finalized = True
            return dict(self._groups)

    @staticmethod
    def duplicate_groups(checksum_map: ChecksumMap) -> List[DuplicateGroup]:
        """
        Builds DuplicateGroups for every digest shared by two or more files.
        Groups are ordered by digest; files keep their discovery order.
        """
        return [
            DuplicateGroup(checksum=digest, files=list(files))
            for digest, files in sorted(checksum_map.items())
            if len(files) >= 2  # Unique files are not duplicates
        ]
