"""Logging utility for tmpmail"""

import json
import logging
from datetime import datetime, timezone
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .paths import LOGS_DIR

ROOT_LOGGER_NAME = "tmpmail"


## Custom JSON Formatter


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for log records."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "context"):
            log_entry["context"] = record.context

        return json.dumps(log_entry, default=str)


## Main Log Manager


class LogManager:
    """Configures the tmpmail logger hierarchy.

    Console output goes through rich on stderr, everything from DEBUG up is
    written as JSON lines to a rotating file in the log directory.
    """

    def __init__(self, log_level: str = "WARNING", log_dir: Optional[Path] = None):
        try:
            self.log_level = getattr(logging, log_level.upper())
        except AttributeError as e:
            raise ValueError(f"Invalid logging level: {log_level}") from e

        self.log_dir = Path(log_dir) if log_dir else LOGS_DIR
        self.root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        self.root_logger.setLevel(logging.DEBUG)
        self.root_logger.propagate = False
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup console and file handlers."""

        from .errors import FileSystemError

        self.root_logger.handlers.clear()

        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            app_handler = RotatingFileHandler(
                self.log_dir / "app.log",
                maxBytes=5_242_880,
                backupCount=5,
                encoding="utf-8",
            )
        except OSError as e:
            raise FileSystemError(
                f"Failed to create log file in {self.log_dir}: {str(e)}"
            ) from e

        app_handler.setLevel(logging.DEBUG)
        app_handler.setFormatter(JSONFormatter())

        self.root_logger.addHandler(console_handler)
        self.root_logger.addHandler(app_handler)

    def set_level(self, level: str) -> None:
        """Set console logging level at runtime"""
        try:
            self.log_level = getattr(logging, level.upper())
        except AttributeError as e:
            raise ValueError(f"Invalid logging level: {level}") from e

        for handler in self.root_logger.handlers:
            if isinstance(handler, RichHandler):
                handler.setLevel(self.log_level)


## Decorators for Logging


def log_call(func):
    """Decorator to log function calls with their duration."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        func_name = f"{func.__module__}.{func.__qualname__}"
        logger.debug(f"-> Entering {func_name}")
        start_time = datetime.now()

        try:
            result = func(*args, **kwargs)
            duration = (datetime.now() - start_time).total_seconds()
            logger.debug(f"<- Exiting {func_name} (Duration: {duration:.3f}s)")
            return result

        except Exception as e:
            duration = (datetime.now() - start_time).total_seconds()
            logger.debug(f"<- Error in {func_name} after {duration:.3f}s: {e}")
            raise

    return wrapper


## Module-level LogManager Instance and Helper Functions

_log_manager: Optional[LogManager] = None


def init_logging(log_level: str = "WARNING", log_dir: Optional[Path] = None) -> LogManager:
    """Initialize logging system and return LogManager instance."""

    global _log_manager

    if _log_manager is None:
        _log_manager = LogManager(log_level, log_dir)
    else:
        _log_manager.set_level(log_level)

    return _log_manager


def reset_logging() -> None:
    """Drop the configured handlers (for testing purposes)"""

    global _log_manager

    if _log_manager is not None:
        for handler in _log_manager.root_logger.handlers:
            handler.close()
        _log_manager.root_logger.handlers.clear()
    _log_manager = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the tmpmail hierarchy.

    Handlers are attached by init_logging(); until then records only reach
    whatever the host application configured.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
