"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/progress.py
Thread-safe progress counter rendered as a tqdm bar on stderr.
"""

import sys
import threading
from typing import Optional

from tqdm import tqdm

from imgdupes.core.interfaces import Progress
from imgdupes.core.models import ScanConfig


class ProgressIndicator(Progress):
    """
    Counts processed units from any thread and mirrors the count to a tqdm bar.

    The counter is the source of truth; tqdm only samples it for rendering and
    throttles redraws on its own (mininterval). A disabled indicator still
    counts, which keeps quiet runs and tests observable.
    """

    def __init__(self, total: int = 0, enabled: bool = True, file=None):
        self._lock = threading.Lock()
        self._count = 0
        self._total = total
        self._enabled = enabled
        self._file = file
        self._bar: Optional[tqdm] = None

    def _ensure_bar(self) -> tqdm:
        # Created on first use so no frame is drawn before the real total is known
        if self._bar is None:
            self._bar = tqdm(
                total=self._total,
                initial=self._count,
                file=self._file or sys.stderr,
                disable=not self._enabled,
                bar_format=ScanConfig.PROGRESS_BAR_FORMAT,
                ascii=ScanConfig.PROGRESS_CHARS,
                dynamic_ncols=True,
                leave=True,
            )
        return self._bar

    @property
    def position(self) -> int:
        with self._lock:
            return self._count

    @property
    def total(self) -> int:
        with self._lock:
            return self._total

    def set_total(self, total: int) -> None:
        with self._lock:
            self._total = total
            if self._bar is None:
                self._ensure_bar()
            else:
                self._bar.reset(total=total)
                self._bar.n = self._count

    def advance(self, message: Optional[str] = None) -> None:
        """Increments by exactly one unit and optionally replaces the status message."""
        with self._lock:
            bar = self._ensure_bar()
            self._count += 1
            bar.update(1)
            if message is not None:
                bar.set_description_str(message, refresh=False)

    def finish(self, message: Optional[str] = None) -> None:
        with self._lock:
            bar = self._ensure_bar()
            if message is not None:
                bar.set_description_str(message, refresh=False)
            bar.refresh()
            bar.close()
