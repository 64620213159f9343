"""ESG Scoring Engine."""

import logging
import math
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from src.esg.config import (
    GRADE_RISK_LEVELS,
    MAX_GRADE_VALUE,
    Grade,
    Pillar,
    RiskLevel,
)
from src.esg.grader import CategoryGrader, RawGrades
from src.esg.grades import GradeScale
from src.esg.models import CATEGORY_IDS, PILLAR_CATEGORIES, ESGAssessment
from src.esg.suggestions import SuggestionGenerator

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class Aggregator:
    """Turns a complete category grade map into assessment results.

    Features:
    - Overall 0-100 score from the mean numeric grade, normalized by 4
    - Overall letter grade and risk level from that score
    - Per-pillar grades from each pillar's own mean (separate thresholds)
    - Improvement notes for categories graded C or D

    The overall and pillar paths are deliberately independent: pillar
    grades threshold a 1-4 average, the overall grade a 0-100 score.
    """

    def __init__(
        self,
        grader: Optional[CategoryGrader] = None,
        suggestions: Optional[SuggestionGenerator] = None,
    ):
        self.grader = grader or CategoryGrader()
        self.suggestions = suggestions or SuggestionGenerator(grader=self.grader)

    def overall_score(self, grades: RawGrades) -> int:
        """Mean category value over the maximum value of 4, scaled to 100.

        Raises:
            IncompleteAssessmentError: If any category is ungraded.
        """
        return self._score(self.grader.validate(grades))

    def overall_grade(self, grades: RawGrades) -> Grade:
        return GradeScale.grade_of(self.overall_score(grades), all_assigned=True)

    @staticmethod
    def risk_level(overall_grade: Grade) -> RiskLevel:
        """Risk label for an assigned overall grade."""
        return GRADE_RISK_LEVELS[overall_grade]

    def pillar_grade(self, grades: RawGrades, pillar: Pillar) -> Grade:
        """Grade one pillar from the mean of its own categories only."""
        return self._pillar_grade(self.grader.validate(grades), pillar)

    def pillar_grades(self, grades: RawGrades) -> dict[Pillar, Grade]:
        return self._pillar_grades(self.grader.validate(grades))

    def assess(self, grades: RawGrades) -> ESGAssessment:
        """Compute every derived field of an assessment.

        Args:
            grades: Category id -> grade for all eleven categories.

        Returns:
            Frozen ESGAssessment.

        Raises:
            IncompleteAssessmentError: If any category is missing or unassigned.
            InvalidGradeError: If any value is not a valid grade.
        """
        validated = self.grader.validate(grades)

        score = self._score(validated)
        overall = GradeScale.grade_of(score, all_assigned=True)
        pillars = self._pillar_grades(validated)

        assessment = ESGAssessment(
            grades=MappingProxyType(validated),
            overall_score=score,
            overall_grade=overall,
            risk_level=self.risk_level(overall),
            environment_grade=pillars[Pillar.ENVIRONMENTAL],
            social_grade=pillars[Pillar.SOCIAL],
            governance_grade=pillars[Pillar.GOVERNANCE],
            overall_notes=self.suggestions.notes(validated),
        )

        logger.debug(
            "Assessed grades: score=%d grade=%s risk=%s E/S/G=%s/%s/%s",
            score,
            overall.value,
            assessment.risk_level.value,
            assessment.environment_grade.value,
            assessment.social_grade.value,
            assessment.governance_grade.value,
        )
        return assessment

    @staticmethod
    def _score(validated: Mapping[str, Grade]) -> int:
        total = sum(GradeScale.value_of(validated[cid]) for cid in CATEGORY_IDS)
        return _round_half_up(total * 100 / (len(CATEGORY_IDS) * MAX_GRADE_VALUE))

    def _pillar_grade(self, validated: Mapping[str, Grade], pillar: Pillar) -> Grade:
        return GradeScale.pillar_grade_of(
            self._mean(validated[c.id] for c in PILLAR_CATEGORIES[pillar])
        )

    def _pillar_grades(self, validated: Mapping[str, Grade]) -> dict[Pillar, Grade]:
        return {pillar: self._pillar_grade(validated, pillar) for pillar in Pillar}

    @staticmethod
    def _mean(grades: Iterable[Grade]) -> float:
        values = [GradeScale.value_of(g) for g in grades]
        return sum(values) / len(values)
