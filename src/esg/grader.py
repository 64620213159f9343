"""Category completeness gate run before any aggregation."""

import logging
from typing import Mapping, Union

from src.esg.config import Grade
from src.esg.grades import GradeScale, is_assigned
from src.esg.models import CATEGORIES_BY_ID, CATEGORY_IDS
from src.errors.exceptions import IncompleteAssessmentError, UnknownCategoryError

logger = logging.getLogger(__name__)

RawGrades = Mapping[str, Union[Grade, str, None]]


class CategoryGrader:
    """Validates a category -> grade map against the eleven fixed categories."""

    def normalize(self, grades: RawGrades) -> dict[str, Grade]:
        """Parse every supplied value into a Grade.

        Raises:
            UnknownCategoryError: If an id is not one of the fixed categories.
            InvalidGradeError: If a value is not a valid grade.
        """
        unknown = sorted(str(cid) for cid in grades if cid not in CATEGORIES_BY_ID)
        if unknown:
            raise UnknownCategoryError(unknown)
        return {cid: GradeScale.parse(value, cid) for cid, value in grades.items()}

    def missing(self, grades: RawGrades) -> list[str]:
        """Category ids absent or unassigned, in canonical order."""
        normalized = self.normalize(grades)
        return [cid for cid in CATEGORY_IDS if not is_assigned(normalized.get(cid))]

    def is_complete(self, grades: RawGrades) -> bool:
        return not self.missing(grades)

    def validate(self, grades: RawGrades) -> dict[str, Grade]:
        """Return the normalized grade map in canonical order.

        Raises:
            IncompleteAssessmentError: Naming every missing category id.
        """
        normalized = self.normalize(grades)
        missing = [cid for cid in CATEGORY_IDS if not is_assigned(normalized.get(cid))]
        if missing:
            logger.debug("Rejected incomplete assessment, missing %s", missing)
            raise IncompleteAssessmentError(missing)
        return {cid: normalized[cid] for cid in CATEGORY_IDS}
