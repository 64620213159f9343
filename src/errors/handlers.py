"""Error Reporting.

Turns tracker exceptions into a response envelope a web layer can
return unchanged. Errors raised by form input also carry per-field
messages so the assessment form can mark the offending inputs.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from src.errors.config import (
    DEFAULT_ERROR_CONFIG,
    ERROR_SEVERITY_MAP,
    ERROR_STATUS_MAP,
    ERROR_TITLES,
    ErrorCode,
    ErrorConfig,
    ErrorSeverity,
)
from src.errors.exceptions import ESGTrackerError
from src.logging_config.context import get_request_id

logger = logging.getLogger(__name__)

_SEVERITY_LEVELS = {
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.MEDIUM: logging.WARNING,
    ErrorSeverity.HIGH: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


@dataclass
class ErrorResponse:
    """Error envelope: ``{"error": {...}}``."""

    code: str
    title: str
    message: str
    status_code: int = 500
    fields: Dict[str, str] = field(default_factory=dict)
    request_id: Optional[str] = None
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "code": self.code,
            "title": self.title,
            "message": self.message,
            "timestamp": self.timestamp,
        }
        if self.fields:
            body["fields"] = dict(self.fields)
        if self.request_id:
            body["request_id"] = self.request_id
        return {"error": body}


def field_messages(exc: ESGTrackerError) -> Dict[str, str]:
    """Field or category id -> message, from the error's details."""
    return {
        str(detail["field"]): str(detail.get("issue", exc.message))
        for detail in exc.details
        if detail.get("field")
    }


def create_error_response(
    error_code: ErrorCode,
    message: str,
    fields: Optional[Dict[str, str]] = None,
    request_id: Optional[str] = None,
) -> ErrorResponse:
    return ErrorResponse(
        code=error_code.value,
        title=ERROR_TITLES.get(error_code, ERROR_TITLES[ErrorCode.INTERNAL_ERROR]),
        message=message,
        status_code=ERROR_STATUS_MAP.get(error_code, 500),
        fields=fields or {},
        request_id=request_id or None,
    )


def _log_error(error_code: ErrorCode, message: str, config: ErrorConfig) -> None:
    if not config.log_all_errors:
        return
    severity = ERROR_SEVERITY_MAP.get(error_code, ErrorSeverity.MEDIUM)
    logger.log(_SEVERITY_LEVELS[severity], f"[{error_code.value}] {message}")


def handle_tracker_error(
    exc: ESGTrackerError,
    config: Optional[ErrorConfig] = None,
) -> ErrorResponse:
    """Build the response for a tracker error, logging it by severity."""
    config = config or DEFAULT_ERROR_CONFIG
    _log_error(exc.error_code, exc.message, config)
    return create_error_response(
        exc.error_code,
        exc.message,
        fields=field_messages(exc),
        request_id=get_request_id() if config.include_request_id else None,
    )


def handle_unhandled_error(
    exc: Exception,
    config: Optional[ErrorConfig] = None,
) -> ErrorResponse:
    """Build a 500 response for an unexpected exception.

    The exception text is withheld unless ``suppress_internal_details``
    is off.
    """
    config = config or DEFAULT_ERROR_CONFIG
    logger.exception(f"Unhandled exception: {type(exc).__name__}: {exc}")

    message = "There was a problem creating your assessment. Please try again."
    if not config.suppress_internal_details:
        message = f"{type(exc).__name__}: {exc}"

    return create_error_response(
        ErrorCode.INTERNAL_ERROR,
        message,
        request_id=get_request_id() if config.include_request_id else None,
    )
