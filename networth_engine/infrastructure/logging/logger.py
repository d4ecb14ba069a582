"""Application logging helpers.

Loggers are built once per name, write a daily file under
``<project root>/logs/<subdir>/`` (or ``$NETWORTH_LOG_DIR/<subdir>/``) and
optionally echo to the console. When the log directory cannot be created,
files go under ``./logs/`` in the working directory.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable

from networth_engine.utils.utils import get_project_root


DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DIR_ENV = "NETWORTH_LOG_DIR"


class LoggerBuilder:
    """Fluent builder for file and console backed loggers."""

    def __init__(self) -> None:
        self._name = "app"
        self._subdir = "app"
        self._prefix = "app"
        self._console = True
        self._level = logging.INFO
        self._formatter_factory: Callable[[], logging.Formatter] = (
            self._default_formatter
        )
        self._file_handler_factory = self._default_file_handler
        self._console_handler_factory = self._default_console_handler

    def name(self, value: str) -> "LoggerBuilder":
        self._name = value
        return self

    def subdir(self, value: str) -> "LoggerBuilder":
        self._subdir = value
        return self

    def prefix(self, value: str) -> "LoggerBuilder":
        self._prefix = value
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, value: int) -> "LoggerBuilder":
        self._level = value
        return self

    def formatter(
        self,
        factory: Callable[[], logging.Formatter],
    ) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(self, factory) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(self, factory) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Build the logger, reusing it if it was already configured.

        Returns:
            logging.Logger: Configured logger instance.
        """
        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        if logger.handlers:
            return logger

        fmt = self._formatter_factory()
        try:
            file_handler = self._file_handler_factory(
                self._log_path(self._log_root()),
                fmt,
            )
        except OSError:
            file_handler = self._file_handler_factory(
                self._log_path(Path.cwd() / "logs"),
                fmt,
            )
        logger.addHandler(file_handler)
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        logger.propagate = False
        return logger

    def _log_path(self, root: Path) -> Path:
        log_dir = root / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir / f"{self._today_stamp()}_{self._prefix}.log"

    @staticmethod
    def _log_root() -> Path:
        override = os.getenv(LOG_DIR_ENV)
        if override and override.strip():
            return Path(override.strip()).expanduser()
        return get_project_root() / "logs"

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.Handler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper delegating to a built logging.Logger."""

    _instance = None

    def __new__(cls, name: str = "app"):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = cls._builder(name).build()
            cls._instance = instance
        return cls._instance

    @staticmethod
    def _builder(name: str) -> LoggerBuilder:
        return LoggerBuilder().name(name).subdir(name).prefix(name)

    def info(self, msg: str, *args) -> None:
        self.logger.info(msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.logger.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        self.logger.error(msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.logger.debug(msg, *args)

    def critical(self, msg: str, *args) -> None:
        self.logger.critical(msg, *args)


class AppLogger(Logger):
    """Logger for the engine's use cases and adapters."""

    _instance = None


class JobLogger(Logger):
    """Logger for scheduled snapshot jobs."""

    _instance = None

    @staticmethod
    def _builder(name: str) -> LoggerBuilder:
        return LoggerBuilder().name(name).subdir("jobs").prefix(name)


def get_app_logger() -> AppLogger:
    """Return the shared application logger."""
    return AppLogger("networth_engine")


def get_job_logger() -> JobLogger:
    """Return the shared logger for batch snapshot jobs."""
    return JobLogger("networth_jobs")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "JobLogger",
    "get_app_logger",
    "get_job_logger",
]
