"""
Pydantic models for digestkit.

Provides the Digest value type and configuration sections.
"""

from .base import DigestKitBaseModel, ImmutableModel
from .config import HashConfig, LoggingConfig
from .digest import (
    DEFAULT_ALGORITHM,
    Digest,
    DigestAlgorithm,
    new_digest,
    parse_digest_string,
    verify,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "Digest",
    "DigestAlgorithm",
    "DigestKitBaseModel",
    "HashConfig",
    "ImmutableModel",
    "LoggingConfig",
    "new_digest",
    "parse_digest_string",
    "verify",
]
