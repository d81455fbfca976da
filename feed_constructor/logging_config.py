"""Structured logging configuration for Feed Constructor."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from .config import Config, LoggingConfig

LOGGER_PREFIX = "feed_constructor"
COMPONENTS = ("constructor", "feed_setters", "item_setters")


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    CONTEXT_KEYS = ("component", "operation", "field", "feed_kind", "item_kind")

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key in self.CONTEXT_KEYS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


class ContextLogger:
    """Logger that attaches the component name and feed context to every record."""

    def __init__(self, component: str):
        """Initialize context logger.

        Args:
            component: Component name (e.g., 'constructor', 'item_setters')
        """
        self.component = component
        self.logger = logging.getLogger(f"{LOGGER_PREFIX}.{component}")

    def _log_with_context(self, level: int, message: str, **kwargs) -> None:
        """Log message with component context."""
        if not self.logger.isEnabledFor(level):
            return
        extra = {"component": self.component, **kwargs}
        self.logger.log(level, message, extra=extra)

    def info(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.DEBUG, message, **kwargs)

    def log_dropped_field(self, operation: str, field: str, kind: Any) -> None:
        """Log a value that the target format has nowhere to store."""
        self.debug(
            f"{operation}: {kind} has no slot for {field}, value dropped",
            operation=operation,
            field=field,
            item_kind=str(kind),
        )

    def log_kind_mismatch(self, operation: str, feed_kind: Any, item_kind: Any) -> None:
        self.error(
            f"{operation}: {item_kind} item does not belong in a {feed_kind} feed",
            operation=operation,
            feed_kind=str(feed_kind),
            item_kind=str(item_kind),
        )


def setup_structured_logging(log_level: str = "INFO", structured: bool = True) -> None:
    """Attach a stdout handler to the library's logger namespace.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        structured: Emit JSON records instead of plain text
    """
    level = getattr(logging, log_level.upper())
    package_logger = logging.getLogger(LOGGER_PREFIX)
    package_logger.setLevel(level)

    # Remove existing handlers
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    if structured:
        console_handler.setFormatter(StructuredFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    package_logger.addHandler(console_handler)

    for component in COMPONENTS:
        logger = logging.getLogger(f"{LOGGER_PREFIX}.{component}")
        logger.setLevel(level)
        logger.propagate = True


def configure_logging(config: Config | LoggingConfig | None = None) -> LoggingConfig:
    """Apply a logging configuration, reading the environment when none is given."""
    if config is None:
        config = Config()
    if isinstance(config, Config):
        config = config.get_logging_config()
    setup_structured_logging(config.level, structured=config.structured)
    return config


def create_component_logger(component: str) -> ContextLogger:
    """Create a context logger for a component.

    Args:
        component: Component name

    Returns:
        ContextLogger instance
    """
    return ContextLogger(component)
