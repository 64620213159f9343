"""Input Validation Utilities.

Project-detail rules from the first step of the assessment form, and
gallery paging checks.
"""

from typing import Any, Mapping, NamedTuple, Tuple

from src.errors.config import ErrorCode
from src.errors.exceptions import ValidationError


class FieldRule(NamedTuple):
    min_length: int
    message: str


PROJECT_FIELD_RULES = {
    "name": FieldRule(3, "Project name is required"),
    "description": FieldRule(10, "Please provide a description (min 10 characters)"),
    "country": FieldRule(1, "Country is required"),
    "category": FieldRule(1, "Category is required"),
    "size": FieldRule(1, "Project size is required"),
}

REQUIRED_PROJECT_FIELDS = tuple(PROJECT_FIELD_RULES)

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 6


def validate_project_fields(data: Mapping[str, Any]) -> None:
    """Check the required project details.

    Values must be strings whose stripped length meets the field's
    minimum.

    Raises:
        ValidationError: With one detail per failing field, in form order.
    """
    failures = []
    for name, rule in PROJECT_FIELD_RULES.items():
        value = data.get(name)
        if not isinstance(value, str) or len(value.strip()) < rule.min_length:
            failures.append({"field": name, "issue": rule.message})

    if failures:
        missing = ", ".join(f["field"] for f in failures)
        raise ValidationError(
            message=f"Invalid project details: {missing}",
            error_code=ErrorCode.MISSING_REQUIRED_FIELD,
            details=failures,
        )


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def validate_pagination(
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = MAX_PAGE_SIZE,
) -> Tuple[int, int]:
    """Validate gallery paging parameters.

    Returns:
        Tuple of (page, page_size).

    Raises:
        ValidationError: If either value is not a positive integer or
            page_size exceeds max_page_size.
    """
    if not _positive_int(page):
        raise ValidationError(
            message="Page must be a positive integer",
            error_code=ErrorCode.INVALID_PAGINATION,
            field="page",
        )
    if not _positive_int(page_size):
        raise ValidationError(
            message="Page size must be a positive integer",
            error_code=ErrorCode.INVALID_PAGINATION,
            field="page_size",
        )
    if page_size > max_page_size:
        raise ValidationError(
            message=f"Page size {page_size} exceeds maximum of {max_page_size}",
            error_code=ErrorCode.INVALID_PAGINATION,
            field="page_size",
        )
    return page, page_size
