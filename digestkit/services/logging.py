"""
Diagnostic logging for digestkit.

DigestLogger is built from the [logging] config section. The calculator
reports file reads and verification outcomes through it; the pure digest
core never logs.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

LOG_FILE_PATH = Path.home() / ".digestkit" / "digestkit.log"
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 3

_FORMATTER = logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.WARNING)


class DigestLogger(ILogger):
    """
    stdlib logger with handlers chosen by a LoggingConfig.

    The named stdlib logger is owned by one DigestLogger at a time: building
    a new one closes the handlers the previous one attached.
    """

    def __init__(
        self,
        config: LoggingConfig | None = None,
        name: str = "digestkit",
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            config: Level and enabled outputs (defaults to LoggingConfig())
            name: stdlib logger name
            log_file: Override for the rotating log file location
        """
        config = config or LoggingConfig()
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)  # handlers filter
        self._logger.propagate = False
        self._handlers: list[logging.Handler] = []
        for stale in list(self._logger.handlers):
            self._logger.removeHandler(stale)
            stale.close()

        level = _level(config.level)
        if config.console:
            self._add_handler(logging.StreamHandler(sys.stderr), level)
        if config.file:
            path = log_file or LOG_FILE_PATH
            path.parent.mkdir(parents=True, exist_ok=True)
            self._add_handler(
                RotatingFileHandler(path, maxBytes=MAX_FILE_SIZE, backupCount=BACKUP_COUNT),
                level,
            )

    def _add_handler(self, handler: logging.Handler, level: int) -> None:
        handler.setLevel(level)
        handler.setFormatter(_FORMATTER)
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._handlers)

    def close(self) -> None:
        """Detach and close the handlers this logger attached."""
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Set log level for all handlers."""
        for handler in self._handlers:
            handler.setLevel(_level(level))


class NullLogger(ILogger):
    """No-op logger used until logging is configured."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass


_logger: ILogger | None = None


def get_logger() -> ILogger:
    """Return the configured logger, or a NullLogger before configuration."""
    return _logger if _logger is not None else NullLogger()


def set_logger(logger: ILogger | None) -> None:
    """
    Install ``logger`` as the process-wide logger. None resets it.

    A previously installed DigestLogger is closed unless it is being reinstalled.
    """
    global _logger
    if isinstance(_logger, DigestLogger) and _logger is not logger:
        _logger.close()
    _logger = logger


def configure_logging(config: LoggingConfig, log_file: Path | None = None) -> DigestLogger:
    """Build a DigestLogger from the [logging] section and install it."""
    logger = DigestLogger(config, log_file=log_file)
    set_logger(logger)
    return logger
