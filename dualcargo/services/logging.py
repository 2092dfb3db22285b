"""
Diagnostic logging for dualcargo.

DualCargoLogger wraps a stdlib logger. Both handlers are off by default so
that cargo's own output is all the user sees; `[logging] console = true`
sends diagnostics to stderr and `[logging] file = true` appends them to a
rotating file under ~/.dualcargo.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

DEFAULT_LOG_FILE = Path.home() / ".dualcargo" / "dualcargo.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class DualCargoLogger(ILogger):
    """ILogger backed by ``logging.getLogger(name)``."""

    def __init__(
        self,
        name: str = "dualcargo",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            name: stdlib logger name
            level: Threshold for both handlers (debug, info, warning, error)
            console_enabled: Write to stderr
            file_enabled: Write to a rotating log file
            log_file: Log file location (default ~/.dualcargo/dualcargo.log)
        """
        self.log_file = log_file or DEFAULT_LOG_FILE
        self._logger = logging.getLogger(name)
        # Handlers filter; the logger itself passes everything through.
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        threshold = logging.getLevelName(level.upper())
        if not isinstance(threshold, int):
            threshold = logging.WARNING

        if console_enabled:
            self._add_handler(logging.StreamHandler(sys.stderr), threshold)
        if file_enabled:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._add_handler(
                RotatingFileHandler(self.log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS),
                threshold,
            )

    @classmethod
    def from_config(cls, config: LoggingConfig, log_file: Path | None = None) -> DualCargoLogger:
        """Build a logger from the `[logging]` configuration section."""
        return cls(
            level=config.level,
            console_enabled=config.console,
            file_enabled=config.file,
            log_file=log_file,
        )

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._logger.handlers)

    def _add_handler(self, handler: logging.Handler, threshold: int) -> None:
        handler.setLevel(threshold)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        self._logger.addHandler(handler)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)


class NullLogger(ILogger):
    """Discards everything. Default when no logger is registered."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass
