"""Logging utility for stepmodal"""

import json
import logging
from datetime import datetime, timezone
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, MutableMapping, Optional

from rich.logging import RichHandler
from textual.logging import TextualHandler

ROOT_LOGGER_NAME = "stepmodal"

# Silent until a host app or init_logging configures handlers.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


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

        if hasattr(record, "event_type"):
            log_entry["event_type"] = record.event_type

        if hasattr(record, "context"):
            log_entry["context"] = record.context

        return json.dumps(log_entry, default=str)


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that attaches a fixed context to every record."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = kwargs.setdefault("extra", {})
        extra["context"] = {**self.extra, **extra.get("context", {})}
        return msg, kwargs


## Main Log Manager


class LogManager:
    """Manages logging configuration and provides logger instances.

    Console output goes through rich when running as a plain command and
    through Textual's devtools handler while a TUI owns the terminal. File
    logs are only written when a log directory is given.
    """

    def __init__(
        self,
        log_level: str = "INFO",
        log_dir: Optional[Path] = None,
        tui: bool = False,
    ):
        self.log_level = _level_from_name(log_level)
        self.log_dir = log_dir
        self.tui = tui
        self.root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        self.root_logger.setLevel(logging.DEBUG)
        self.root_logger.propagate = False
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup console and file handlers."""

        from .errors import FileSystemError

        for handler in list(self.root_logger.handlers):
            self.root_logger.removeHandler(handler)
            handler.close()

        if self.tui:
            console_handler: logging.Handler = TextualHandler()
        else:
            console_handler = RichHandler(
                show_time=True,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
            console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

        console_handler.setLevel(self.log_level)
        self.root_logger.addHandler(console_handler)

        if self.log_dir is None:
            return

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            app_handler = RotatingFileHandler(
                self.log_dir / "app.log",
                maxBytes=5_242_880,
                backupCount=5,
                encoding="utf-8",
            )
            event_handler = RotatingFileHandler(
                self.log_dir / "events.log",
                maxBytes=2_048_000,
                backupCount=3,
                encoding="utf-8",
            )
        except OSError as e:
            raise FileSystemError(
                f"Failed to create log files in {self.log_dir}: {str(e)}"
            ) from e

        app_handler.setLevel(logging.DEBUG)
        app_handler.setFormatter(JSONFormatter())

        event_handler.setLevel(logging.INFO)
        event_handler.setFormatter(JSONFormatter())
        event_handler.addFilter(lambda record: hasattr(record, "event_type"))

        self.root_logger.addHandler(app_handler)
        self.root_logger.addHandler(event_handler)

    def get_logger(
        self, name: Optional[str] = None, **context
    ) -> logging.Logger | ContextAdapter:
        """Get a logger with optional context.

        Returns:
            logging.Logger or ContextAdapter: Logger instance, possibly wrapped with context.
        """

        return _named_logger(name, **context)

    def set_level(self, level: str) -> None:
        """Set console logging level at runtime."""

        self.log_level = _level_from_name(level)

        for handler in self.root_logger.handlers:
            if not isinstance(handler, RotatingFileHandler):
                handler.setLevel(self.log_level)

    def log_event(self, event_type: str, message: str, level: str = "INFO", **extra):
        """Log an event with specific type and extra context."""

        _emit_event(self.root_logger, event_type, message, level, extra)


def _named_logger(name: Optional[str] = None, **context) -> logging.Logger | ContextAdapter:
    if name and name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = name[len(ROOT_LOGGER_NAME) + 1 :]

    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME)

    if context:
        return ContextAdapter(logger, context)

    return logger


def _emit_event(
    logger: logging.Logger, event_type: str, message: str, level: str, extra: dict
) -> None:
    extra_dict: dict[str, Any] = {"event_type": event_type}
    if extra:
        extra_dict["context"] = extra

    logger.log(_level_from_name(level), message, extra=extra_dict)


def _level_from_name(level: str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""

    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Invalid logging level: {level}")
    return value


## Decorators for Logging


def log_call(func):
    """Decorator to log function calls and their duration."""

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
            logger.exception(f"<- Error in {func_name} after {duration:.3f}s: {e}")
            raise

    return wrapper


## Module-level LogManager Instance and Helper Functions

_log_manager: Optional[LogManager] = None


def init_logging(
    log_level: str = "INFO",
    log_dir: Optional[Path] = None,
    tui: bool = False,
    force: bool = False,
) -> LogManager:
    """Initialize logging system and return LogManager instance.

    The first call wins unless ``force`` is set, which rebuilds the handlers
    (the CLI does this once it has read the configuration).
    """

    global _log_manager

    if _log_manager is None or force:
        _log_manager = LogManager(log_level, log_dir=log_dir, tui=tui)

    return _log_manager


def reset_logging() -> None:
    """Drop handlers installed by ``init_logging`` and hand the logger back to the host."""

    global _log_manager

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(logging.NullHandler())
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    _log_manager = None


def get_logger(
    name: Optional[str] = None, **context
) -> logging.Logger | ContextAdapter:
    """Get a logger instance with optional context.

    Handlers are not set up here; records go wherever the host application
    routes the ``stepmodal`` logger until ``init_logging`` is called.
    """

    return _named_logger(name, **context)


def log_event(event_type: str, message, **extra):
    """Log an event with specific type and extra context (module-level wrapper)."""

    if isinstance(message, dict):
        extra.update(message)
        message = f"Event: {event_type}"

    level = extra.pop("level", "INFO")
    _emit_event(logging.getLogger(ROOT_LOGGER_NAME), event_type, message, level, extra)
