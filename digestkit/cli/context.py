"""
Click context extension for the digestkit CLI.

Provides DigestKitContext, created once per invocation and passed to
commands via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.interfaces.logger import ILogger
from ..core.settings import DigestKitSettings, load_settings
from ..services.calculator import DigestCalculator
from ..services.logging import configure_logging


@dataclass
class DigestKitContext:
    """Extended context passed through the Click command chain.

    Attributes:
        settings: Merged configuration
        logger: Logger configured from settings.logging
        calculator: Digest calculator using settings.hash.chunk_size
    """

    settings: DigestKitSettings
    logger: ILogger
    calculator: DigestCalculator

    @classmethod
    def create(cls, config_path: Path | None = None, cwd: Path | None = None) -> DigestKitContext:
        """Load settings, configure logging, and build the calculator."""
        settings = load_settings(config_path=config_path, start_dir=cwd)
        logger = configure_logging(settings.logging)
        if settings.config_error:
            logger.warning("Using defaults: %s", settings.config_error)
        elif settings.config_file:
            logger.debug("Loaded config from %s", settings.config_file)
        calculator = DigestCalculator(chunk_size=settings.hash.chunk_size, logger=logger)
        return cls(settings=settings, logger=logger, calculator=calculator)
