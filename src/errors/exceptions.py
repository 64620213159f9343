"""Custom Exception Hierarchy.

Typed exceptions carrying an error code and structured details so a
caller can turn any failure into a form-validation message or an
HTTP response without parsing strings.
"""

from typing import Any, Dict, List, Optional, Sequence

from src.errors.config import ERROR_STATUS_MAP, ErrorCode


class ESGTrackerError(Exception):
    """Base exception for all ESG tracker errors.

    All custom exceptions inherit from this, allowing a single
    handler to catch the entire hierarchy.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = ERROR_STATUS_MAP.get(error_code, 500)
        self.details = details or []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.error_code.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ESGTrackerError):
    """Raised when input fails validation."""

    def __init__(
        self,
        message: str = "Validation failed",
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[List[Dict[str, Any]]] = None,
        field: Optional[str] = None,
    ):
        if field and not details:
            details = [{"field": field, "issue": message}]
        super().__init__(message, error_code, details)


class IncompleteAssessmentError(ValidationError):
    """Raised when scoring is attempted before every category has a grade."""

    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(
            message=f"Assessment incomplete, missing grades for: {', '.join(self.missing)}",
            error_code=ErrorCode.INCOMPLETE_ASSESSMENT,
            details=[{"field": cid, "issue": "Grade not assigned"} for cid in self.missing],
        )


class InvalidGradeError(ValidationError):
    """Raised when a category value is not one of A, B, C, D or unassigned."""

    def __init__(self, category_id: Optional[str], value: Any):
        self.category_id = category_id
        self.value = value
        where = f" for '{category_id}'" if category_id else ""
        super().__init__(
            message=f"Invalid grade {value!r}{where}. Expected one of 'A', 'B', 'C', 'D'",
            error_code=ErrorCode.INVALID_GRADE,
            details=[{"field": category_id, "issue": "Invalid grade", "value": repr(value)}],
        )


class UnknownCategoryError(ValidationError):
    """Raised when a grade map names categories outside the fixed set."""

    def __init__(self, category_ids: Sequence[Any]):
        self.category_ids = [str(cid) for cid in category_ids]
        super().__init__(
            message=f"Unknown ESG categories: {', '.join(self.category_ids)}",
            error_code=ErrorCode.UNKNOWN_CATEGORY,
            details=[{"field": cid, "issue": "Unknown category"} for cid in self.category_ids],
        )


class NotFoundError(ESGTrackerError):
    """Raised when a requested resource does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        error_code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
    ):
        details = []
        if resource_type or resource_id is not None:
            details = [{"resource_type": resource_type, "resource_id": resource_id}]
        super().__init__(message, error_code, details)


class ConflictError(ESGTrackerError):
    """Raised when an action conflicts with existing state."""

    def __init__(
        self,
        message: str = "Resource conflict",
        error_code: ErrorCode = ErrorCode.RESOURCE_CONFLICT,
    ):
        super().__init__(message, error_code)


class StorageError(ESGTrackerError):
    """Raised when the storage backend fails."""

    def __init__(
        self,
        message: str = "Storage operation failed",
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
    ):
        super().__init__(message, error_code)
