"""Logging Setup.

One-call configuration for structured logging across the ESG tracker.
JSON lines for deployed runs, a colored single-line format for local work.
"""

import json
import logging
import sys
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Optional

from src.logging_config.config import DEFAULT_LOGGING_CONFIG, LogFormat, LoggingConfig, LogLevel
from src.logging_config.context import get_context_dict
from src.settings import get_settings

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def _record_extras(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}


class StructuredFormatter(logging.Formatter):
    """One JSON object per line.

    Fields: timestamp, level, logger, message, service, the bound log
    context (request/user/project ids) and any ``extra=`` values such as
    ``duration_ms`` from the performance helpers.
    """

    def __init__(self, service_name: str = "esg-tracker", include_caller: bool = True):
        super().__init__()
        self.service_name = service_name
        self.include_caller = include_caller

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }
        if self.include_caller:
            entry.update(module=record.module, function=record.funcName, line=record.lineno)

        entry.update(get_context_dict())
        entry.update(_record_extras(record))

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc, _ = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc),
                "traceback": self.formatException(record.exc_info),
            }
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Readable single-line output with the log context appended."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        ctx = {**get_context_dict(), **_record_extras(record)}
        if ctx:
            line += " [" + ", ".join(f"{k}={v}" for k, v in ctx.items()) + "]"
        if self.use_color and record.levelname in self.COLORS:
            line = f"{self.COLORS[record.levelname]}{line}{self.RESET}"
        return line


def logging_config_from_settings(settings) -> LoggingConfig:
    """Build a LoggingConfig from application Settings.

    Unrecognized level or format values fall back to the defaults.
    """
    level = settings.log_level.upper()
    fmt = settings.log_format.lower()
    return replace(
        DEFAULT_LOGGING_CONFIG,
        level=LogLevel(level) if level in LogLevel.__members__ else DEFAULT_LOGGING_CONFIG.level,
        format=LogFormat(fmt) if fmt in {f.value for f in LogFormat} else DEFAULT_LOGGING_CONFIG.format,
    )


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Install the tracker's log handler on the root logger.

    Call once at startup. Without an explicit config the level and format
    come from Settings (``ESGTRACK_LOG_LEVEL`` / ``ESGTRACK_LOG_FORMAT``).
    """
    if config is None:
        config = logging_config_from_settings(get_settings())

    if config.format == LogFormat.JSON:
        formatter: logging.Formatter = StructuredFormatter(
            service_name=config.service_name,
            include_caller=config.include_caller,
        )
    else:
        formatter = ConsoleFormatter(use_color=config.use_color)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(config.level.value)

    for name in config.quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance, typically for ``__name__``."""
    return logging.getLogger(name)
