"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements content hashing using the File class and pluggable hash algorithms.

Files are streamed in fixed-size chunks so peak memory stays bounded
regardless of file size. A digest is returned only when the whole file was
read; any I/O error aborts the computation with ReadError.
"""

import hashlib
import logging
from typing import Dict

import xxhash

from dupsweep.core.errors import ReadError
from dupsweep.core.interfaces import Hasher, HashAlgorithm, HashState
from dupsweep.core.models import File

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8 * 1024


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"

    def new(self) -> HashState:
        return hashlib.sha256()


class XXHash128AlgorithmImpl(HashAlgorithm):
    """Non-cryptographic, much faster on large files."""
    name = "xxh128"

    def new(self) -> HashState:
        return xxhash.xxh3_128()


ALGORITHMS: Dict[str, HashAlgorithm] = {
    Sha256AlgorithmImpl.name: Sha256AlgorithmImpl(),
    XXHash128AlgorithmImpl.name: XXHash128AlgorithmImpl(),
}


def get_algorithm(name: str) -> HashAlgorithm:
    try:
        return ALGORITHMS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown hash algorithm: '{name}'. Valid options: {', '.join(sorted(ALGORITHMS))}"
        ) from None


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_digest(self, path: str) -> str:
        """
        Streams the file through the algorithm and returns a lowercase hex digest.

        Raises:
            ReadError: If the file cannot be opened or a read fails mid-stream.
        """
        state = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                for chunk in iter(lambda: f.read(self.chunk_size), b''):
                    state.update(chunk)
        except OSError as e:
            raise ReadError(f"Failed to hash {path}: {e}", path=path) from e
        return state.hexdigest().lower()

    def compute_full_hash(self, file: File) -> str:
        """Digest of a scanned file; reuses a digest already stored on the record."""
        if file.digest is not None and not file.digest.startswith("size_"):
            return file.digest
        return self.compute_digest(file.path)
