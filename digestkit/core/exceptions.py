"""
Custom exception hierarchy for digestkit.

Every failure the library can report is a typed exception. The algorithm
and verification errors render fixed messages that callers may match on,
so they never carry a context suffix.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.digest import Digest


class DigestKitException(Exception):
    """
    Base exception for all digestkit errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Algorithm Errors
# =============================================================================


class DigestAlgorithmError(DigestKitException, ValueError):
    """
    Base class for unknown algorithm names.

    Inherits from ValueError so callers validating user input can catch
    the builtin.
    """

    recoverable: bool = False


class UnrecognizedAlgorithmError(DigestAlgorithmError):
    """Raised when a digest string carries a prefix that names no algorithm."""

    def __init__(self, prefix: str) -> None:
        super().__init__(f"Unrecognized digest algorithm: {prefix}")
        self.prefix = prefix


class UnsupportedAlgorithmError(DigestAlgorithmError):
    """Raised when a hash object is requested for an unknown algorithm."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Unsupported digest algorithm: {algorithm}")
        self.algorithm = algorithm


# =============================================================================
# Verification Errors
# =============================================================================


class DigestVerificationError(DigestKitException):
    """
    Base class for integrity failures.

    The expected and actual digests are kept on the exception so callers
    can report or persist them.
    """

    recoverable: bool = False

    def __init__(self, message: str, *, expected: Digest, actual: Digest) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class AlgorithmMismatchError(DigestVerificationError):
    """Expected and actual digests were computed with different algorithms."""

    def __init__(self, expected: Digest, actual: Digest) -> None:
        super().__init__(
            f"Expected {expected.algorithm} algorithm but received {actual.algorithm}",
            expected=expected,
            actual=actual,
        )


class ValueMismatchError(DigestVerificationError):
    """Expected and actual digests share an algorithm but differ in value."""

    def __init__(self, expected: Digest, actual: Digest) -> None:
        super().__init__(
            f'Expected {expected.algorithm} digest "{expected.value}" '
            f'but received "{actual.value}"',
            expected=expected,
            actual=actual,
        )


# =============================================================================
# I/O Errors
# =============================================================================


class DigestFileError(DigestKitException):
    """
    Error reading a file while calculating its digest.

    Raised for missing files, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)
        self.file_path = file_path


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(DigestKitException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(ConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(ConfigError, ValueError):
    """
    A config value from TOML or the environment failed validation.

    Inherits from ValueError so callers validating input can catch the builtin.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        config_file: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if config_file:
            ctx["file_path"] = config_file
        super().__init__(message, context=ctx, cause=cause)
        self.key = key
