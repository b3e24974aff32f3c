"""
Hash algorithm strategy implementations.

Each strategy binds one DigestAlgorithm member to the hashlib constructor
that computes it.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Protocol

from ..core.models.digest import DigestAlgorithm


class HashObject(Protocol):
    """
    Incremental hash computation, as returned by hashlib constructors.

    Not safe for concurrent updates. Reading hexdigest() does not end the
    computation: more data may be absorbed afterwards.
    """

    @property
    def name(self) -> str: ...

    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...

    def hexdigest(self) -> str: ...

    def copy(self) -> "HashObject": ...


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm: The DigestAlgorithm member they compute
    - create_hasher(): Factory method for fresh hasher instances
    """

    @property
    @abstractmethod
    def algorithm(self) -> DigestAlgorithm:
        """Return the algorithm this strategy computes."""
        pass

    @property
    def algorithm_name(self) -> str:
        """Return the canonical algorithm name (e.g., 'sha256')."""
        return self.algorithm.value

    @abstractmethod
    def create_hasher(self) -> HashObject:
        """Create a new hasher instance."""
        pass

    def update(self, hasher: HashObject, data: bytes) -> None:
        """Update hasher with data."""
        hasher.update(data)

    def hexdigest(self, hasher: HashObject) -> str:
        """Get hex digest from hasher."""
        return hasher.hexdigest()


class SHA1Strategy(HashStrategy):
    """SHA-1 hashing strategy - legacy default for bare digest strings."""

    @property
    def algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.SHA1

    def create_hasher(self) -> HashObject:
        return hashlib.sha1()


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - widely compatible."""

    @property
    def algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.SHA256

    def create_hasher(self) -> HashObject:
        return hashlib.sha256()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    @property
    def algorithm(self) -> DigestAlgorithm:
        return DigestAlgorithm.SHA512

    def create_hasher(self) -> HashObject:
        return hashlib.sha512()
