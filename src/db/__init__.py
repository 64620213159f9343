"""Database package for the ESG tracker."""

from src.db.base import Base
from src.db.engine import build_engine, get_engine, get_session_factory, reset_engine
from src.db.models import (
    UserRecord,
    ProjectRecord,
    RiskAssessmentRecord,
    BookmarkRecord,
)

__all__ = [
    "Base",
    "build_engine",
    "get_engine",
    "get_session_factory",
    "reset_engine",
    "UserRecord",
    "ProjectRecord",
    "RiskAssessmentRecord",
    "BookmarkRecord",
]
