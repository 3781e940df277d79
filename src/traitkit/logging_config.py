"""Structured logging for traitkit.

Level and format come from TraitSettings (TRAITKIT_LOG_LEVEL, TRAITKIT_LOG_FORMAT)
unless passed explicitly.

Usage:
    from traitkit.logging_config import configure_logging
    configure_logging()  # once, at application startup
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, ClassVar

from traitkit.config import LogFormat, get_trait_settings

NAMESPACE = "traitkit"

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
    "taskName",
}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Fields attached to a record through ``extra=``."""
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}


class JSONFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, extra."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON string with log data and any extra fields.
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.levelno in (logging.DEBUG, logging.ERROR, logging.CRITICAL):
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = _extra_fields(record)
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Format: TIMESTAMP LEVEL [LOGGER] MESSAGE key=value...

    The ``traitkit.`` prefix is dropped from logger names.
    """

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize formatter.

        Args:
            use_colors: Whether to use ANSI colors in output.
        """
        super().__init__()
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as text.

        Args:
            record: Log record to format.

        Returns:
            Formatted line, followed by the traceback if there is one.
        """
        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        level = record.levelname
        if self.use_colors:
            level_str = f"{self.LEVEL_COLORS.get(level, '')}{level:8s}{self.RESET}"
        else:
            level_str = f"{level:8s}"

        logger_name = record.name.removeprefix(f"{NAMESPACE}.")
        line = f"{timestamp} {level_str} [{logger_name}] {record.getMessage()}"

        extra = _extra_fields(record)
        if extra:
            line += " " + " ".join(f"{k}={v}" for k, v in sorted(extra.items()))
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(
    level: int | None = None,
    format_type: str | None = None,
    use_colors: bool = True,
) -> logging.Logger:
    """Install a single stderr handler on the traitkit logger namespace.

    Library code never calls this; applications do, once.

    Args:
        level: Log level. If None, taken from TraitSettings.
        format_type: 'text' or 'json'. If None, taken from TraitSettings.
        use_colors: Colorize text output when stderr is a TTY.

    Returns:
        The configured namespace logger.
    """
    settings = get_trait_settings()
    if level is None:
        level = settings.level
    if format_type is None:
        format_type = settings.log_format

    handler = logging.StreamHandler(sys.stderr)
    if format_type == LogFormat.JSON:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter(use_colors=use_colors))

    root_logger = logging.getLogger(NAMESPACE)
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.propagate = False

    root_logger.debug(
        "Logging configured: level=%s, format=%s",
        logging.getLevelName(level),
        format_type,
    )
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger kept under the traitkit namespace.

    Args:
        name: Module name (typically __name__).

    Returns:
        Logger instance.
    """
    if name != NAMESPACE and not name.startswith(f"{NAMESPACE}."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)
