"""Assessment Service.

Runs the questionnaire flow: validate grades, score them, and persist
the result together with the owning project's denormalized fields.
"""

import logging
from typing import Optional

from src.errors.config import ErrorCode
from src.errors.exceptions import NotFoundError
from src.errors.validators import validate_project_fields
from src.esg.grader import RawGrades
from src.esg.models import ESGAssessment
from src.esg.scoring import Aggregator
from src.logging_config.context import RequestContext
from src.storage.base import Storage
from src.storage.models import Project, RiskAssessment

logger = logging.getLogger(__name__)


class AssessmentService:
    """Grades projects and stores the outcome.

    Scoring errors (IncompleteAssessmentError, InvalidGradeError) are
    raised before anything is written.
    """

    def __init__(self, storage: Storage, aggregator: Optional[Aggregator] = None):
        self.storage = storage
        self.aggregator = aggregator or Aggregator()

    def preview(self, grades: RawGrades) -> ESGAssessment:
        """Score grades without persisting anything."""
        return self.aggregator.assess(grades)

    def assess_project(
        self,
        project_id: int,
        grades: RawGrades,
    ) -> tuple[Project, RiskAssessment]:
        """Assess an existing project.

        Args:
            project_id: Project to grade.
            grades: Category id -> grade for all eleven categories.

        Returns:
            The updated project and the stored assessment.

        Raises:
            NotFoundError: If the project does not exist.
            IncompleteAssessmentError: If any category is ungraded.
            InvalidGradeError: If any value is not a valid grade.
        """
        with RequestContext(project_id=str(project_id)):
            if self.storage.get_project_by_id(project_id) is None:
                raise NotFoundError(
                    f"Project {project_id} not found",
                    error_code=ErrorCode.PROJECT_NOT_FOUND,
                    resource_type="project",
                    resource_id=project_id,
                )

            result = self.aggregator.assess(grades)
            project, record = self.storage.record_assessment(
                RiskAssessment.from_assessment(project_id, result)
            )
            logger.info(
                f"Project {project_id} assessed: score={record.overall_score} "
                f"grade={record.overall_grade} risk={record.risk_level}"
            )
            return project, record

    def create_and_assess(
        self,
        project: Project,
        grades: RawGrades,
    ) -> tuple[Project, RiskAssessment]:
        """Create a project from its details and assess it in one step.

        Project details and grades are both validated before the project
        is created, so a rejected questionnaire leaves no orphan project.
        """
        validate_project_fields(project.to_dict())
        result = self.aggregator.assess(grades)

        created = self.storage.create_project(project)
        with RequestContext(project_id=str(created.id)):
            updated, record = self.storage.record_assessment(
                RiskAssessment.from_assessment(created.id, result)
            )
            logger.info(f"Created and assessed project {created.id}: {record.overall_grade}")
            return updated, record

    def latest(self, project_id: int) -> Optional[RiskAssessment]:
        return self.storage.get_risk_assessment_by_project_id(project_id)
