"""Grade scale: letter grades to numbers and back."""

from typing import Any, Optional, Union

from src.esg.config import (
    GRADE_VALUES,
    PILLAR_THRESHOLDS,
    SCORE_THRESHOLDS,
    Grade,
)
from src.errors.exceptions import InvalidGradeError

_GRADES_BY_LETTER = {g.value: g for g in Grade}


class GradeScale:
    """Ordinal mapping between letter grades and numeric values.

    Two distinct thresholdings exist: ``grade_of`` works on the 0-100
    overall score, ``pillar_grade_of`` on a 1-4 pillar average.
    """

    @staticmethod
    def value_of(grade: Grade) -> int:
        """Numeric value of a grade (A=4 ... D=1, unassigned=0)."""
        return GRADE_VALUES[grade]

    @staticmethod
    def grade_of(score: float, all_assigned: bool) -> Grade:
        """Letter grade for an already-rounded 0-100 score.

        Returns UNASSIGNED when not every category was graded.
        """
        if not all_assigned:
            return Grade.UNASSIGNED
        for grade, threshold in SCORE_THRESHOLDS.items():
            if score >= threshold:
                return grade
        return Grade.D

    @staticmethod
    def pillar_grade_of(average: float) -> Grade:
        """Letter grade for the mean numeric grade of a pillar."""
        for grade, threshold in PILLAR_THRESHOLDS.items():
            if average >= threshold:
                return grade
        return Grade.D

    @staticmethod
    def parse(value: Union[Grade, str, None], category_id: Optional[str] = None) -> Grade:
        """Convert raw input to a Grade.

        Accepts a Grade, one of the exact strings "A", "B", "C", "D",
        or "" / None for unassigned. Nothing else is coerced.

        Raises:
            InvalidGradeError: For any other value.
        """
        if isinstance(value, Grade):
            return value
        if value is None:
            return Grade.UNASSIGNED
        if isinstance(value, str) and value in _GRADES_BY_LETTER:
            return _GRADES_BY_LETTER[value]
        raise InvalidGradeError(category_id, value)


def is_assigned(grade: Any) -> bool:
    return isinstance(grade, Grade) and grade is not Grade.UNASSIGNED
