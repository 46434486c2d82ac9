"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements the directory traversal driver of the checksum scan.
Features:
- Walks the tree with os.walk, never descending into symlinked directories
- Counts every entry in a pre-pass so progress ends at exactly 100%
- Hashes eligible files on a thread pool or on the calling thread
- Records digests into a shared ChecksumGrouper
"""

import os
import time
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, FIRST_COMPLETED, wait
from pathlib import Path
from typing import Iterable, Iterator, Callable, Optional

logger = logging.getLogger(__name__)

# Local imports
from imgdupes.core.models import ChecksumMap, ExecutionMode, ScanStats, display_path
from imgdupes.core.interfaces import EntryStrategy, FileFilter, Hasher, Progress
from imgdupes.core.filters import ExtensionFilter
from imgdupes.core.hasher import HasherImpl, ChecksumReadError
from imgdupes.core.grouper import ChecksumGrouper
from imgdupes.core.progress import ProgressIndicator


# =============================
# Execution strategies
# =============================

class SequentialStrategy(EntryStrategy):
    """Processes entries one at a time on the calling thread."""

    def run(self, entries: Iterable[Path], process_entry: Callable[[Path], None]) -> None:
        for entry in entries:
            process_entry(entry)


class ThreadPoolStrategy(EntryStrategy):
    """
    Distributes entries over a bounded thread pool.
    The enumerator stays on the calling thread and is the only producer.
    At most `window` entries are in flight; the producer waits for a free slot.
    """

    QUEUE_FACTOR = 4

    def __init__(self, workers: Optional[int] = None):
        if workers is not None and workers < 1:
            raise ValueError("Worker count must be at least 1")
        self.workers = workers or os.cpu_count() or 1
        self.window = self.workers * self.QUEUE_FACTOR

    def run(self, entries: Iterable[Path], process_entry: Callable[[Path], None]) -> None:
        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="imgdupes") as executor:
            pending = set()
            for entry in entries:
                if len(pending) >= self.window:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    self._collect(done)
                pending.add(executor.submit(process_entry, entry))
            done, _ = wait(pending)
            self._collect(done)

    @staticmethod
    def _collect(done) -> None:
        for future in done:
            future.result()  # Re-raise unexpected worker errors


def create_strategy(mode: ExecutionMode, workers: Optional[int] = None) -> EntryStrategy:
    if mode == ExecutionMode.SEQUENTIAL:
        return SequentialStrategy()
    return ThreadPoolStrategy(workers)


# =============================
# Traversal driver
# =============================

class DirectoryScanner:
    """
    Walks a directory tree and groups eligible files by content checksum.

    Attributes:
        root_dir: Root directory to scan
        extension_filter: Predicate deciding which files are hashed
        hasher: Computes the digest of a file
        strategy: Where per-entry work runs (see ExecutionMode)
        progress: Advances by one for every entry, eligible or not
    """

    def __init__(
        self,
        root_dir: str,
        extension_filter: Optional[FileFilter] = None,
        hasher: Optional[Hasher] = None,
        mode: ExecutionMode = ExecutionMode.PARALLEL,
        workers: Optional[int] = None,
        progress: Optional[Progress] = None,
    ):
        self.root_dir = root_dir
        self.extension_filter = extension_filter or ExtensionFilter()
        self.hasher = hasher or HasherImpl()
        self.mode = mode
        self.strategy = create_strategy(mode, workers)
        self.progress = progress or ProgressIndicator(enabled=False)
        self.stats = ScanStats()
        self._grouper: Optional[ChecksumGrouper] = None
        self._stats_lock = threading.Lock()

    def scan(self) -> ChecksumMap:
        """
        Runs the pre-pass count and the hashing pass, then finalizes the map.
        Returns:
            ChecksumMap: digest -> paths, including single-file groups
        """
        root_path = Path(self.root_dir)
        logger.debug(f"Starting scan of {self.root_dir} ({self.mode.display_name})")

        # Validate root directory exists and is accessible
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        start_time = time.time()
        self.stats = ScanStats()
        self._grouper = ChecksumGrouper()

        total = self.count_entries()
        self.stats.total_entries = total
        self.progress.set_total(total)
        logger.debug(f"Discovered {total} entries")

        try:
            self.strategy.run(self.iter_entries(), self.process_entry)
        finally:
            self.progress.finish("Scan complete")

        checksum_map = self._grouper.finalize()
        self.stats.duration = time.time() - start_time
        logger.debug(
            f"Scan completed in {self.stats.duration:.2f}s: "
            f"{self.stats.hashed_files} hashed, {self.stats.skipped_files} skipped"
        )
        return checksum_map

    def iter_entries(self) -> Iterator[Path]:
        """
        Yields every directory and file below the root, excluding the root itself.
        Names are sorted per directory; symlinked directories are yielded but not entered.
        """
        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_walk_error, followlinks=False):
            dirs.sort()
            for name in dirs:
                yield Path(root) / name
            for name in sorted(files):
                yield Path(root) / name

    def count_entries(self) -> int:
        return sum(1 for _ in self.iter_entries())

    def process_entry(self, path: Path) -> None:
        """
        Filter → hash → record for a single entry, then advance progress.
        Unreadable files are skipped without interrupting the scan.
        """
        if self._grouper is None:
            raise RuntimeError("process_entry() called outside of scan()")

        if self._is_regular_file(path) and self.extension_filter.is_eligible(path):
            try:
                digest = self.hasher.compute_checksum(path)
            except ChecksumReadError as e:
                logger.debug(f"Skipping unreadable file {path}: {e}")
                with self._stats_lock:
                    self.stats.skipped_files += 1
            else:
                self._grouper.record(str(path), digest)
                with self._stats_lock:
                    self.stats.hashed_files += 1

        with self._stats_lock:
            self.stats.processed_entries += 1
        self.progress.advance(f"Scanning: {display_path(path)}")

    @staticmethod
    def _is_regular_file(path: Path) -> bool:
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return False
            return path.is_file()
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return False

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Cannot list directory {error.filename}: {error.strerror}")
