"""Project assessment workflow."""

from src.assessments.service import AssessmentService

__all__ = ["AssessmentService"]
