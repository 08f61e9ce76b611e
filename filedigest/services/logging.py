"""
Diagnostic logging for filedigest.

FiledigestLogger wraps one stdlib logger whose outputs, stderr and a rotating
file, are chosen by the [logging] config section. Every record names its
thread, so the session worker and the per-algorithm hashing units can be
told apart in a parallel run.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..core.models.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(threadName)s): %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_level(level: str) -> int:
    """Map a config level name to a logging level; unknown names mean WARNING."""
    return LEVELS.get(level.lower(), logging.WARNING)


class FiledigestLogger(ILogger):
    """
    ILogger backed by the stdlib logging module.

    With neither output enabled, records are dropped quietly rather than
    reaching logging's last-resort stderr handler.
    """

    LOG_FILE_PATH = Path.home() / ".filedigest" / "filedigest.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024
    BACKUP_COUNT = 3

    def __init__(
        self,
        name: str = "filedigest",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            name: Logger name
            level: Threshold for every output (debug, info, warning, error)
            console_enabled: Write records to stderr
            file_enabled: Write records to log_file, rotated at MAX_FILE_SIZE
            log_file: Log file location (default: LOG_FILE_PATH)
        """
        self.log_file = Path(log_file) if log_file else self.LOG_FILE_PATH
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        self._detach_all()

        self._outputs: list[logging.Handler] = []
        if console_enabled:
            self._outputs.append(logging.StreamHandler(sys.stderr))
        if file_enabled:
            self._outputs.append(self._open_log_file())

        self._level = parse_level(level)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        for handler in self._outputs or [logging.NullHandler()]:
            handler.setLevel(self._level)
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    @classmethod
    def from_config(
        cls, config: LoggingConfig, name: str = "filedigest", log_file: Path | None = None
    ) -> FiledigestLogger:
        """Build a logger from a [logging] config section."""
        return cls(
            name=name,
            level=config.level,
            console_enabled=config.console,
            file_enabled=config.file,
            log_file=log_file,
        )

    def _open_log_file(self) -> RotatingFileHandler:
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            self.log_file,
            maxBytes=self.MAX_FILE_SIZE,
            backupCount=self.BACKUP_COUNT,
            encoding="utf-8",
        )

    def _detach_all(self) -> None:
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

    @property
    def level(self) -> str:
        """Current threshold as a config level name."""
        return logging.getLevelName(self._level).lower()

    @property
    def has_outputs(self) -> bool:
        return bool(self._outputs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        self._level = parse_level(level)
        for handler in self._outputs:
            handler.setLevel(self._level)

    def close(self) -> None:
        """Flush and detach every output."""
        self._detach_all()
        self._outputs = []


class NullLogger(ILogger):
    """Logger that discards everything; the default when nothing is bootstrapped."""

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
