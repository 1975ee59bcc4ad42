"""Logging configuration utilities for utilicurve.

Records go to stdout or a file, either as plain text or as one JSON object
per line. Loggers obtained through ``get_logger`` can carry curve context
(the CLI command, the curve line being handled) that lands in every record.
"""

from __future__ import annotations

from datetime import UTC, datetime
import json
import logging
import sys
from typing import Any

from utilicurve import __version__
from utilicurve.core.config.models import LoggingConfig

APP_NAME = "utilicurve"

# Attributes every LogRecord carries; anything else came from ``extra`` or an adapter.
_STANDARD_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

DEFAULT_FORMAT = LoggingConfig.model_fields["format"].default


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as one JSON line.

    Example output (wrapped here for reading)::

        {"timestamp": "2026-01-29T12:00:00+00:00", "level": "DEBUG",
         "logger": "utilicurve.core.curves.codec",
         "message": "Rejected curve line: unknown_shape (...)",
         "app": {"name": "utilicurve", "version": "0.1.0"},
         "source": {"module": "codec", "function": "failure_result", "line": 138},
         "context": {"error_kind": "unknown_shape", "token": "Xyz"}}

    ``context`` holds whatever the caller attached through ``extra`` or a
    ``get_logger`` adapter and is omitted when empty. ``error`` is present
    only for records logged with exception info.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "app": {"name": APP_NAME, "version": __version__},
            "source": {
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
            },
        }

        context = record_context(record)
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[0] is not None:
            entry["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "stack_trace": record.exc_text or self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the caller-supplied fields of a record."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
    }


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Configure application-wide logging.

    Can be called repeatedly; each call replaces the previous root handlers.

    Args:
        level: Logging level name, case-insensitive.
        format_string: Format for text records. Ignored if structured=True.
        filename: Path to log file. If None, logs to stdout.
        structured: If True, emit JSON records.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler(sys.stdout)

    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logging.basicConfig(level=_resolve_level(level), handlers=[handler], force=True)


def configure_from_config(config: LoggingConfig, level: str | None = None) -> None:
    """Configure logging from the ``logging`` section of the app config.

    Args:
        config: Logging section of AppConfig.
        level: Overrides ``config.level`` when given (e.g. from ``--log-level``).
    """
    configure_logging(
        level=level or config.level,
        format_string=config.format,
        filename=config.filename,
        structured=config.structured,
    )


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Get a logger, wrapped in a LoggerAdapter when context is given.

    Example:
        >>> log = get_logger(__name__, command="sample", curve="Logit 0 0 1 1")
        >>> log.info("Sampling")  # record context carries command and curve
    """
    logger = logging.getLogger(name)
    if context:
        return logging.LoggerAdapter(logger, context)
    return logger
