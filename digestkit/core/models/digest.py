"""
Digest domain models.

A Digest pairs an algorithm with the hex value that algorithm produced for
some content. Digests are immutable values: they render to a canonical
string, parse back from one, and verify against each other.

SHA-1 digests render as the bare hex value. Every other algorithm renders
as ``<algorithm>:<value>``. Strings without a colon therefore parse as
SHA-1, which keeps older SHA-1-only manifests readable.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import ConfigDict, field_validator

from ..exceptions import AlgorithmMismatchError, UnrecognizedAlgorithmError, ValueMismatchError
from .base import ImmutableModel

ALGORITHM_SEPARATOR = ":"


class DigestAlgorithm(str, Enum):
    """Closed set of supported digest algorithms, valued by canonical name."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> DigestAlgorithm:
        """
        Resolve a canonical algorithm name.

        Names are case-sensitive: only the lowercase canonical form matches.

        Raises:
            UnrecognizedAlgorithmError: If no algorithm has this name
        """
        for algorithm in cls:
            if algorithm.value == name:
                return algorithm
        raise UnrecognizedAlgorithmError(name)


DEFAULT_ALGORITHM = DigestAlgorithm.SHA1


class Digest(ImmutableModel):
    """Checksum of some content: an algorithm and the hex value it produced.

    The value is kept exactly as given. It is neither lowercased nor checked
    for hex characters or length, so comparisons are exact string matches.

    Build digests with new_digest() or Digest.parse(), which raise
    UnrecognizedAlgorithmError for unknown names. Calling the model directly
    with an unknown name raises pydantic's ValidationError instead.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        revalidate_instances="never",
    )

    algorithm: DigestAlgorithm
    value: str

    @field_validator("algorithm", mode="before")
    @classmethod
    def resolve_algorithm(cls, v: Any) -> Any:
        """Accept canonical names as well as enum members."""
        if isinstance(v, str) and not isinstance(v, DigestAlgorithm):
            return DigestAlgorithm.from_name(v)
        return v

    @classmethod
    def parse(cls, text: str) -> Digest:
        """
        Parse a digest from its canonical string form.

        Args:
            text: Either a bare SHA-1 value or ``<algorithm>:<value>``

        Returns:
            The parsed Digest

        Raises:
            UnrecognizedAlgorithmError: If the text has a colon and the part
                before the first colon is not an algorithm name
        """
        prefix, sep, value = text.partition(ALGORITHM_SEPARATOR)
        if not sep:
            return cls(algorithm=DEFAULT_ALGORITHM, value=text)
        return cls(algorithm=DigestAlgorithm.from_name(prefix), value=value)

    def verify(self, actual: Digest) -> None:
        """
        Check that ``actual`` matches this (expected) digest.

        The algorithm is compared before the value, so a digest that differs
        in both reports an algorithm mismatch.

        Raises:
            AlgorithmMismatchError: If the algorithms differ
            ValueMismatchError: If the algorithms match but the values differ
        """
        if self.algorithm != actual.algorithm:
            raise AlgorithmMismatchError(self, actual)
        if self.value != actual.value:
            raise ValueMismatchError(self, actual)

    def __str__(self) -> str:
        if self.algorithm is DigestAlgorithm.SHA1:
            return self.value
        return f"{self.algorithm}{ALGORITHM_SEPARATOR}{self.value}"


def new_digest(algorithm: DigestAlgorithm | str, value: str) -> Digest:
    """
    Create a digest without validating the value.

    Raises:
        UnrecognizedAlgorithmError: If ``algorithm`` is a string naming no algorithm
    """
    if not isinstance(algorithm, DigestAlgorithm):
        algorithm = DigestAlgorithm.from_name(algorithm)
    return Digest(algorithm=algorithm, value=value)


def parse_digest_string(text: str) -> Digest:
    """Parse a digest from its canonical string form. See Digest.parse."""
    return Digest.parse(text)


def verify(expected: Digest, actual: Digest) -> None:
    """Verify ``actual`` against ``expected``. See Digest.verify."""
    expected.verify(actual)
