"""
Digest calculation service.

Computes the actual digest of received content so it can be checked
against an expected digest obtained out-of-band (manifest, config, etc.).
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import BinaryIO

from ..core.exceptions import DigestFileError, DigestVerificationError
from ..core.interfaces.logger import ILogger
from ..core.models.config import DEFAULT_CHUNK_SIZE
from ..core.models.digest import Digest, DigestAlgorithm, new_digest
from ..hashing import HashAlgorithmRegistry
from .logging import get_logger


class DigestCalculator:
    """
    Computes Digests with hash objects from the algorithm registry.

    One hash object is created per calculation, so a calculator may be
    shared, but each call must finish before its result is used.
    """

    def __init__(
        self,
        registry: HashAlgorithmRegistry | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: ILogger | None = None,
    ):
        """
        Initialize the calculator.

        Args:
            registry: Hash algorithm registry (defaults to standard registry)
            chunk_size: Bytes read per call when hashing streams and files
            logger: Diagnostic logger (defaults to the configured logger)
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._registry = registry or HashAlgorithmRegistry()
        self._chunk_size = chunk_size
        self._logger = logger or get_logger()

    def calculate(self, algorithm: DigestAlgorithm | str, data: bytes) -> Digest:
        """Compute the digest of an in-memory byte string."""
        return self.calculate_chunks(algorithm, (data,))

    def calculate_chunks(self, algorithm: DigestAlgorithm | str, chunks: Iterable[bytes]) -> Digest:
        """
        Compute the digest of a sequence of byte chunks, absorbed in order.

        Raises:
            UnsupportedAlgorithmError: If the algorithm is not supported
        """
        hasher = self._registry.create_hasher(algorithm)
        for chunk in chunks:
            hasher.update(chunk)
        return new_digest(algorithm, hasher.hexdigest())

    def calculate_stream(self, algorithm: DigestAlgorithm | str, stream: BinaryIO) -> Digest:
        """Compute the digest of a binary stream, reading until EOF."""
        return self.calculate_chunks(
            algorithm, iter(lambda: stream.read(self._chunk_size), b"")
        )

    def calculate_file(self, algorithm: DigestAlgorithm | str, path: str | os.PathLike) -> Digest:
        """
        Compute the digest of a file's contents.

        Raises:
            UnsupportedAlgorithmError: If the algorithm is not supported
            DigestFileError: If the file cannot be read
        """
        # Fail on a bad algorithm before touching the filesystem
        self._registry.create_hasher(algorithm)
        try:
            with open(path, "rb") as f:
                digest = self.calculate_stream(algorithm, f)
        except OSError as e:
            self._logger.debug("Failed to read %s: %s", path, e)
            raise DigestFileError(
                f"Failed to read file for digest: {e.strerror or e}",
                file_path=str(path),
                cause=e,
            ) from e

        self._logger.debug("Computed %s digest for %s", digest.algorithm, path)
        return digest

    def verify_file(self, expected: Digest, path: str | os.PathLike) -> Digest:
        """
        Verify a file against an expected digest.

        The actual digest is computed with the expected digest's algorithm.

        Returns:
            The actual digest of the file

        Raises:
            DigestFileError: If the file cannot be read
            ValueMismatchError: If the file content does not match
        """
        actual = self.calculate_file(expected.algorithm, path)
        try:
            expected.verify(actual)
        except DigestVerificationError as e:
            self._logger.warning("Digest verification failed for %s: %s", path, e)
            raise
        self._logger.info("Verified %s against %s", path, expected)
        return actual
