"""Error Handling & Validation.

Typed exceptions with error codes, a structured response builder,
and input validators shared by the scoring core, storage and gallery.
"""

from src.errors.config import (
    ErrorCode,
    ErrorConfig,
    ErrorSeverity,
)
from src.errors.exceptions import (
    ConflictError,
    ESGTrackerError,
    IncompleteAssessmentError,
    InvalidGradeError,
    NotFoundError,
    StorageError,
    UnknownCategoryError,
    ValidationError,
)
from src.errors.handlers import (
    ErrorResponse,
    create_error_response,
    field_messages,
    handle_tracker_error,
    handle_unhandled_error,
)
from src.errors.validators import (
    validate_pagination,
    validate_project_fields,
)

__all__ = [
    # Config
    "ErrorCode",
    "ErrorConfig",
    "ErrorSeverity",
    # Exceptions
    "ConflictError",
    "ESGTrackerError",
    "IncompleteAssessmentError",
    "InvalidGradeError",
    "NotFoundError",
    "StorageError",
    "UnknownCategoryError",
    "ValidationError",
    # Handlers
    "ErrorResponse",
    "create_error_response",
    "field_messages",
    "handle_tracker_error",
    "handle_unhandled_error",
    # Validators
    "validate_pagination",
    "validate_project_fields",
]
