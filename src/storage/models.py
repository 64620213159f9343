"""Storage Data Models.

Plain records exchanged with the storage backends. The scoring core
never sees these; the assessment service translates between them.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Optional

from src.esg.config import RiskLevel
from src.esg.models import CATEGORY_IDS, ESGAssessment


@dataclass
class User:
    username: str
    email: Optional[str] = None
    name: Optional[str] = None
    organization: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "name": self.name,
            "organization": self.organization,
        }


@dataclass
class Project:
    """A tracked project as shown in the gallery."""
    name: str
    description: str
    country: str
    category: str
    size: str
    region: Optional[str] = None
    funding: Optional[str] = None
    environment_grade: Optional[str] = None
    social_grade: Optional[str] = None
    governance_grade: Optional[str] = None
    risk_score: Optional[int] = None
    risk_level: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)
    image_url: Optional[str] = None
    contact_info: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def is_assessed(self) -> bool:
        return self.risk_score is not None and bool(self.risk_level)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Project fields a caller may change through update_project
PROJECT_MUTABLE_FIELDS = frozenset(
    f.name for f in fields(Project) if f.name not in ("id", "created_at")
)


@dataclass
class RiskAssessment:
    """Persisted assessment of one project."""
    project_id: int
    grades: dict[str, str]
    overall_score: int
    overall_grade: str
    environment_grade: str
    social_grade: str
    governance_grade: str
    risk_level: str
    overall_notes: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_assessment(cls, project_id: int, assessment: ESGAssessment) -> "RiskAssessment":
        return cls(
            project_id=project_id,
            grades={cid: assessment.grades[cid].value for cid in CATEGORY_IDS},
            overall_score=assessment.overall_score,
            overall_grade=assessment.overall_grade.value,
            environment_grade=assessment.environment_grade.value,
            social_grade=assessment.social_grade.value,
            governance_grade=assessment.governance_grade.value,
            risk_level=assessment.risk_level.value,
            overall_notes=assessment.overall_notes,
        )

    def project_updates(self) -> dict[str, Any]:
        """Fields copied onto the owning project."""
        return {
            "environment_grade": self.environment_grade,
            "social_grade": self.social_grade,
            "governance_grade": self.governance_grade,
            "risk_score": self.overall_score,
            "risk_level": self.risk_level,
        }

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "grades": dict(self.grades),
            "overall_score": self.overall_score,
            "overall_grade": self.overall_grade,
            "environment_grade": self.environment_grade,
            "social_grade": self.social_grade,
            "governance_grade": self.governance_grade,
            "risk_level": self.risk_level,
            "overall_notes": self.overall_notes,
        }


@dataclass
class Bookmark:
    user_id: int
    project_id: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass
class FilterOptions:
    """Gallery filters. Empty or "all" disables a filter."""
    country: Optional[str] = None
    category: Optional[str] = None
    risk_level: Optional[str] = None
    search: Optional[str] = None

    @staticmethod
    def _active(value: Optional[str]) -> Optional[str]:
        if not value or value == "all":
            return None
        return value

    @property
    def active(self) -> dict[str, str]:
        """Only the filters that restrict results."""
        values = {
            "country": self._active(self.country),
            "category": self._active(self.category),
            "risk_level": self._active(self.risk_level),
            "search": (self.search or "").strip() or None,
        }
        return {k: v for k, v in values.items() if v is not None}


RISK_LEVEL_ORDER = [level.value for level in RiskLevel]
