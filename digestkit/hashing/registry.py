"""
Hash algorithm registry.

Maps algorithm names to the strategy that computes them. The set of
algorithms is the DigestAlgorithm enum: supporting a new algorithm means
adding an enum member and a strategy to STRATEGIES, not registering one at
runtime.
"""

from ..core.exceptions import UnrecognizedAlgorithmError, UnsupportedAlgorithmError
from ..core.models.digest import DigestAlgorithm
from .strategies import HashObject, HashStrategy, SHA1Strategy, SHA256Strategy, SHA512Strategy

STRATEGIES: tuple[HashStrategy, ...] = (
    SHA1Strategy(),
    SHA256Strategy(),
    SHA512Strategy(),
)


class HashAlgorithmRegistry:
    """
    Lookup from algorithm name to hash strategy.

    Example:
        registry = HashAlgorithmRegistry()
        hasher = registry.create_hasher("sha256")
        hasher.update(b"data")
        hasher.hexdigest()
    """

    def __init__(self) -> None:
        self._strategies: dict[DigestAlgorithm, HashStrategy] = {
            strategy.algorithm: strategy for strategy in STRATEGIES
        }

    @staticmethod
    def _resolve(algorithm: DigestAlgorithm | str) -> DigestAlgorithm | None:
        if isinstance(algorithm, DigestAlgorithm):
            return algorithm
        try:
            return DigestAlgorithm.from_name(algorithm)
        except UnrecognizedAlgorithmError:
            return None

    def get(self, algorithm: DigestAlgorithm | str) -> HashStrategy | None:
        """
        Get strategy by algorithm.

        Args:
            algorithm: DigestAlgorithm member or canonical name (e.g., 'sha256')

        Returns:
            HashStrategy or None if not found
        """
        resolved = self._resolve(algorithm)
        if resolved is None:
            return None
        return self._strategies.get(resolved)

    def _require(self, algorithm: DigestAlgorithm | str) -> HashStrategy:
        strategy = self.get(algorithm)
        if strategy is None:
            raise UnsupportedAlgorithmError(str(algorithm))
        return strategy

    def create_hasher(self, algorithm: DigestAlgorithm | str) -> HashObject:
        """
        Create a fresh hasher for the given algorithm.

        Raises:
            UnsupportedAlgorithmError: If the algorithm is not supported
        """
        return self._require(algorithm).create_hasher()

    def compute_hash(self, algorithm: DigestAlgorithm | str, data: bytes) -> str:
        """
        Compute the hex digest of data using the specified algorithm.

        Raises:
            UnsupportedAlgorithmError: If the algorithm is not supported
        """
        strategy = self._require(algorithm)
        hasher = strategy.create_hasher()
        strategy.update(hasher, data)
        return strategy.hexdigest(hasher)

    @property
    def available_algorithms(self) -> list[str]:
        """List available algorithm names."""
        return [algorithm.value for algorithm in self._strategies]

    def __contains__(self, algorithm: object) -> bool:
        """Check if algorithm is supported."""
        if not isinstance(algorithm, str):
            return False
        return self.get(algorithm) is not None


_default_registry = HashAlgorithmRegistry()


def create_hash_from_algorithm(algorithm: DigestAlgorithm | str) -> HashObject:
    """
    Create a fresh incremental hash object for the named algorithm.

    Args:
        algorithm: Canonical algorithm name ('sha1', 'sha256', 'sha512')

    Returns:
        Hash object supporting update() and hexdigest()

    Raises:
        UnsupportedAlgorithmError: If the algorithm is not supported
    """
    return _default_registry.create_hasher(algorithm)
