"""
digestkit - typed content digests.

A Digest pairs an algorithm with a hex checksum. Digests render to and
parse from a canonical string, verify against each other, and can be
computed with the hash objects from the algorithm registry.

Example:
    from digestkit import create_hash_from_algorithm, new_digest, parse_digest_string

    expected = parse_digest_string("sha256:b1e66f50...")
    hasher = create_hash_from_algorithm("sha256")
    hasher.update(data)
    expected.verify(new_digest("sha256", hasher.hexdigest()))
"""

from .core.exceptions import (
    AlgorithmMismatchError,
    DigestAlgorithmError,
    DigestFileError,
    DigestKitException,
    DigestVerificationError,
    UnrecognizedAlgorithmError,
    UnsupportedAlgorithmError,
    ValueMismatchError,
)
from .core.models.digest import (
    DEFAULT_ALGORITHM,
    Digest,
    DigestAlgorithm,
    new_digest,
    parse_digest_string,
    verify,
)
from .hashing import HashAlgorithmRegistry, HashObject, create_hash_from_algorithm
from .services.calculator import DigestCalculator

__all__ = [
    "DEFAULT_ALGORITHM",
    "AlgorithmMismatchError",
    "Digest",
    "DigestAlgorithm",
    "DigestAlgorithmError",
    "DigestCalculator",
    "DigestFileError",
    "DigestKitException",
    "DigestVerificationError",
    "HashAlgorithmRegistry",
    "HashObject",
    "UnrecognizedAlgorithmError",
    "UnsupportedAlgorithmError",
    "ValueMismatchError",
    "create_hash_from_algorithm",
    "new_digest",
    "parse_digest_string",
    "verify",
]
