"""Services built on the digest core: calculation and logging."""

from .calculator import DigestCalculator
from .logging import DigestLogger, NullLogger, configure_logging, get_logger, set_logger

__all__ = [
    "DigestCalculator",
    "DigestLogger",
    "NullLogger",
    "configure_logging",
    "get_logger",
    "set_logger",
]
