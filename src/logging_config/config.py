"""Logging Configuration."""

from dataclasses import dataclass
from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


@dataclass
class LoggingConfig:
    """Structured logging configuration.

    ``slow_threshold_ms`` is the duration above which timed storage and
    gallery operations log at WARNING.
    """

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    include_caller: bool = True
    use_color: bool = True
    slow_threshold_ms: float = 250.0
    service_name: str = "esg-tracker"
    quiet_loggers: tuple[str, ...] = ("sqlalchemy.engine", "alembic")


DEFAULT_LOGGING_CONFIG = LoggingConfig()
