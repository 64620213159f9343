"""ESG Grading & Scoring Module."""

from src.esg.config import (
    Grade,
    Pillar,
    RiskLevel,
    GRADE_VALUES,
    NO_CONCERNS_MESSAGE,
    REMEDIATION_TEXT,
)
from src.esg.models import (
    Category,
    CATEGORIES,
    CATEGORIES_BY_ID,
    CATEGORY_IDS,
    PILLAR_CATEGORIES,
    ESGAssessment,
)
from src.esg.grades import GradeScale
from src.esg.grader import CategoryGrader
from src.esg.scoring import Aggregator
from src.esg.suggestions import SuggestionGenerator

__all__ = [
    "Grade",
    "Pillar",
    "RiskLevel",
    "GRADE_VALUES",
    "NO_CONCERNS_MESSAGE",
    "REMEDIATION_TEXT",
    "Category",
    "CATEGORIES",
    "CATEGORIES_BY_ID",
    "CATEGORY_IDS",
    "PILLAR_CATEGORIES",
    "ESGAssessment",
    "GradeScale",
    "CategoryGrader",
    "Aggregator",
    "SuggestionGenerator",
]
