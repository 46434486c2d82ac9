"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/hasher.py
Implements streaming file hashing with pluggable hash algorithms.

HasherImpl reads a file in fixed-size chunks and feeds them to an accumulator,
so memory use stays constant regardless of file size.
"""

import logging
import xxhash

from imgdupes.core.interfaces import Hasher, HashAlgorithm, HashAccumulator, PathLike
from imgdupes.core.models import Digest, ScanConfig

logger = logging.getLogger(__name__)


class ChecksumReadError(OSError):
    """A file could not be opened or read to the end."""


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    def __init__(self, seed: int = 0):
        self.seed = seed

    def new(self) -> HashAccumulator:
        return xxhash.xxh64(seed=self.seed)


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Produces a 64-bit integer digest of the full file content.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = ScanConfig.CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_checksum(self, path: PathLike) -> Digest:
        """
        Streams the file through the accumulator and returns its digest.
        Raises:
            ChecksumReadError: file could not be opened or a read failed mid-stream
        """
        accumulator = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    accumulator.update(chunk)
        except OSError as e:
            raise ChecksumReadError(f"Cannot read {path}: {e}") from e
        return accumulator.intdigest()
