"""Error Configuration.

Defines error codes, severity levels, and configuration for
structured error reporting across the ESG tracker.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ErrorCode(Enum):
    """Standardized error codes."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    INCOMPLETE_ASSESSMENT = "INCOMPLETE_ASSESSMENT"
    INVALID_GRADE = "INVALID_GRADE"
    UNKNOWN_CATEGORY = "UNKNOWN_CATEGORY"

    # Not found errors (404)
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"

    # Conflict errors (409)
    RESOURCE_CONFLICT = "RESOURCE_CONFLICT"
    DUPLICATE_BOOKMARK = "DUPLICATE_BOOKMARK"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class ErrorSeverity(Enum):
    """Severity levels for error logging."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# Status code a caller should surface for each error code
ERROR_STATUS_MAP: Dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.MISSING_REQUIRED_FIELD: 400,
    ErrorCode.INVALID_PAGINATION: 400,
    ErrorCode.INCOMPLETE_ASSESSMENT: 400,
    ErrorCode.INVALID_GRADE: 400,
    ErrorCode.UNKNOWN_CATEGORY: 400,
    ErrorCode.RESOURCE_NOT_FOUND: 404,
    ErrorCode.PROJECT_NOT_FOUND: 404,
    ErrorCode.RESOURCE_CONFLICT: 409,
    ErrorCode.DUPLICATE_BOOKMARK: 409,
    ErrorCode.INTERNAL_ERROR: 500,
    ErrorCode.DATABASE_ERROR: 500,
}

ERROR_SEVERITY_MAP: Dict[ErrorCode, ErrorSeverity] = {
    ErrorCode.VALIDATION_ERROR: ErrorSeverity.LOW,
    ErrorCode.MISSING_REQUIRED_FIELD: ErrorSeverity.LOW,
    ErrorCode.INVALID_PAGINATION: ErrorSeverity.LOW,
    ErrorCode.INCOMPLETE_ASSESSMENT: ErrorSeverity.LOW,
    ErrorCode.INVALID_GRADE: ErrorSeverity.LOW,
    ErrorCode.UNKNOWN_CATEGORY: ErrorSeverity.LOW,
    ErrorCode.RESOURCE_NOT_FOUND: ErrorSeverity.LOW,
    ErrorCode.PROJECT_NOT_FOUND: ErrorSeverity.LOW,
    ErrorCode.RESOURCE_CONFLICT: ErrorSeverity.MEDIUM,
    ErrorCode.DUPLICATE_BOOKMARK: ErrorSeverity.LOW,
    ErrorCode.INTERNAL_ERROR: ErrorSeverity.CRITICAL,
    ErrorCode.DATABASE_ERROR: ErrorSeverity.CRITICAL,
}


@dataclass
class ErrorConfig:
    """Configuration for error reporting."""

    include_request_id: bool = True
    log_all_errors: bool = True
    suppress_internal_details: bool = True


DEFAULT_ERROR_CONFIG = ErrorConfig()


# Short user-facing title per error code
ERROR_TITLES: Dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "Invalid input",
    ErrorCode.MISSING_REQUIRED_FIELD: "Invalid project data",
    ErrorCode.INVALID_PAGINATION: "Invalid page",
    ErrorCode.INCOMPLETE_ASSESSMENT: "Assessment incomplete",
    ErrorCode.INVALID_GRADE: "Invalid grade",
    ErrorCode.UNKNOWN_CATEGORY: "Unknown ESG category",
    ErrorCode.RESOURCE_NOT_FOUND: "Not found",
    ErrorCode.PROJECT_NOT_FOUND: "Project not found",
    ErrorCode.RESOURCE_CONFLICT: "Conflict",
    ErrorCode.DUPLICATE_BOOKMARK: "Project already bookmarked",
    ErrorCode.INTERNAL_ERROR: "Error creating assessment",
    ErrorCode.DATABASE_ERROR: "Error creating assessment",
}
