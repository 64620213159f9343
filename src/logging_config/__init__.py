"""Structured Logging.

Provides structured JSON logging, request/project context
propagation, and performance timing for the ESG tracker.
"""

from src.logging_config.config import LogFormat, LoggingConfig, LogLevel
from src.logging_config.context import RequestContext, generate_request_id
from src.logging_config.performance import PerformanceTimer, log_performance
from src.logging_config.setup import configure_logging, get_logger, logging_config_from_settings

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PerformanceTimer",
    "RequestContext",
    "configure_logging",
    "generate_request_id",
    "get_logger",
    "log_performance",
    "logging_config_from_settings",
]
