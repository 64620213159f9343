"""Improvement suggestions derived from low category grades."""

from typing import Mapping, Optional

from src.esg.config import (
    CONCERNS_SUMMARY_TEMPLATE,
    GOOD_PRACTICE_SUMMARY,
    LOW_GRADES,
    NO_CONCERNS_MESSAGE,
    REMEDIATION_TEXT,
    Grade,
)
from src.esg.grader import CategoryGrader, RawGrades
from src.esg.models import CATEGORIES, CATEGORIES_BY_ID, Category
from src.errors.exceptions import UnknownCategoryError


class SuggestionGenerator:
    """Deterministic remediation text keyed by categories graded C or D.

    Output depends only on the grade map: the same input always yields
    the same string. Presentation (bullets, markup) is left to callers.

    ``remediation_text`` overrides the default sentence for the ids it
    names; every other category keeps its default.
    """

    def __init__(
        self,
        remediation_text: Optional[Mapping[str, str]] = None,
        grader: Optional[CategoryGrader] = None,
    ):
        overrides = dict(remediation_text) if remediation_text is not None else {}
        unknown = sorted(str(cid) for cid in overrides if cid not in CATEGORIES_BY_ID)
        if unknown:
            raise UnknownCategoryError(unknown)
        self.remediation_text = {**REMEDIATION_TEXT, **overrides}
        self.grader = grader or CategoryGrader()

    def low_categories(self, grades: RawGrades) -> list[Category]:
        """Categories graded C or D, in canonical order."""
        return self._low(self.grader.validate(grades))

    def generate(self, grades: RawGrades) -> str:
        """One "<Title>: <sentence>" line per low category, newline-joined."""
        return self.notes(self.grader.validate(grades))

    def notes(self, validated: Mapping[str, Grade]) -> str:
        """Same text as ``generate`` for a map already passed through the grader."""
        low = self._low(validated)
        if not low:
            return NO_CONCERNS_MESSAGE
        return "\n".join(f"{c.title}: {self.remediation_text[c.id]}" for c in low)

    def summary(self, grades: RawGrades) -> str:
        """Single-paragraph note naming the areas of concern."""
        low = self.low_categories(grades)
        if not low:
            return GOOD_PRACTICE_SUMMARY
        return CONCERNS_SUMMARY_TEMPLATE.format(areas=", ".join(c.title for c in low))

    @staticmethod
    def _low(validated: Mapping[str, Grade]) -> list[Category]:
        return [c for c in CATEGORIES if validated[c.id] in LOW_GRADES]
