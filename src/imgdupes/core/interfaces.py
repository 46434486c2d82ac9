"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/interfaces.py

Defines core interfaces (Protocols) used throughout the scan pipeline.
These protocols keep the traversal driver independent of concrete hashing,
filtering, scheduling and progress implementations.

Key Components:
---------------
- HashAlgorithm: Streaming hash accumulator factory (xxHash64 by default).
- Hasher: Computes a 64-bit content digest for a file.
- FileFilter: Decides whether a path is eligible for hashing.
- EntryStrategy: Schedules "process one entry" calls (thread pool or sequential).
- Progress: Counter that advances once per processed entry.
"""

from pathlib import Path
from typing import Protocol, Iterable, Callable, Optional, Union

from imgdupes.core.models import Digest


PathLike = Union[str, Path]


class HashAccumulator(Protocol):
    def update(self, data: bytes) -> None: ...
    def intdigest(self) -> int: ...


class HashAlgorithm(Protocol):
    """
    Interface for streaming hash algorithms.

    Allows plugging in a different 64-bit hash without affecting the
    traversal or grouping logic.
    """

    def new(self) -> HashAccumulator:
        """Returns a fresh accumulator in its default (seeded) state."""
        ...


class Hasher(Protocol):
    """Interface for hashing a whole file."""
    def compute_checksum(self, path: PathLike) -> Digest: ...


class FileFilter(Protocol):
    def is_eligible(self, path: PathLike) -> bool: ...


class EntryStrategy(Protocol):
    """
    Runs process_entry once for every entry produced by the enumerator.

    Implementations decide where the calls run (calling thread or worker pool)
    and must return only after every call has completed.
    """
    def run(self, entries: Iterable[Path], process_entry: Callable[[Path], None]) -> None:
        ...


class Progress(Protocol):
    def set_total(self, total: int) -> None: ...
    def advance(self, message: Optional[str] = None) -> None: ...
    def finish(self, message: Optional[str] = None) -> None: ...
