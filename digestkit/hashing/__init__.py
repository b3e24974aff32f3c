"""
Hash algorithm strategies and registry.

One strategy per DigestAlgorithm member; the registry resolves names to
strategies and hands out fresh hash objects.
"""

from .registry import HashAlgorithmRegistry, create_hash_from_algorithm
from .strategies import (
    HashObject,
    HashStrategy,
    SHA1Strategy,
    SHA256Strategy,
    SHA512Strategy,
)

__all__ = [
    "HashAlgorithmRegistry",
    "HashObject",
    "HashStrategy",
    "SHA1Strategy",
    "SHA256Strategy",
    "SHA512Strategy",
    "create_hash_from_algorithm",
]
