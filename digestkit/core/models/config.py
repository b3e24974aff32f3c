"""
Configuration models.

Provides Pydantic models for digestkit configuration with validation.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import DigestKitBaseModel

# Type aliases
HashAlgorithm = Literal["sha1", "sha256", "sha512"]
LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_CHUNK_SIZE = 8 * 1024 * 1024  # 8MB


class ConfigBaseModel(DigestKitBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class HashConfig(ConfigBaseModel):
    """Hash algorithm configuration section."""

    algorithm: HashAlgorithm = "sha256"
    chunk_size: Annotated[int, Field(gt=0, description="Read size in bytes")] = DEFAULT_CHUNK_SIZE

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v: Any) -> Any:
        """Strip whitespace around algorithm names from env vars."""
        if isinstance(v, str):
            return v.strip()
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def lowercase_level(cls, v: Any) -> Any:
        """Accept WARNING, Info, etc."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

