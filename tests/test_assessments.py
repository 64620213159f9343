"""Tests for the assessment service."""

from unittest.mock import patch

import pytest

from src.assessments.service import AssessmentService
from src.errors.config import ErrorCode
from src.errors.exceptions import (
    IncompleteAssessmentError,
    InvalidGradeError,
    NotFoundError,
    ValidationError,
)
from src.esg.config import Grade, RiskLevel
from src.logging_config.context import get_project_id
from src.storage.memory import MemStorage


class TestAssessProject:
    def setup_method(self):
        self.storage = MemStorage()
        self.service = AssessmentService(self.storage)

    def test_assess_existing_project(self, sample_project, all_grades):
        created = self.storage.create_project(sample_project)
        project, record = self.service.assess_project(created.id, all_grades("A"))

        assert record.project_id == created.id
        assert record.overall_score == 100
        assert record.risk_level == "Low"
        assert project.risk_score == 100
        assert project.environment_grade == "A"
        assert self.service.latest(created.id) == record

    def test_risk_score_is_overall_score(self, sample_project, all_grades):
        created = self.storage.create_project(sample_project)
        project, record = self.service.assess_project(created.id, all_grades("D"))
        assert project.risk_score == record.overall_score == 25
        assert project.risk_level == "High"

    def test_unknown_project(self, all_grades):
        with pytest.raises(NotFoundError) as exc_info:
            self.service.assess_project(404, all_grades("A"))
        assert exc_info.value.error_code == ErrorCode.PROJECT_NOT_FOUND
        assert exc_info.value.status_code == 404

    def test_incomplete_grades_not_written(self, sample_project, all_grades):
        created = self.storage.create_project(sample_project)
        grades = all_grades("A")
        del grades["project_type"]
        with pytest.raises(IncompleteAssessmentError) as exc_info:
            self.service.assess_project(created.id, grades)
        assert exc_info.value.missing == ["project_type"]
        assert self.service.latest(created.id) is None
        assert not self.storage.get_project_by_id(created.id).is_assessed

    def test_regrading_creates_new_assessment(self, sample_project, all_grades):
        created = self.storage.create_project(sample_project)
        _, first = self.service.assess_project(created.id, all_grades("A"))
        _, second = self.service.assess_project(created.id, all_grades("C"))
        assert second.id != first.id
        assert self.service.latest(created.id).overall_score == 50

    def test_project_id_bound_in_context(self, sample_project, all_grades):
        created = self.storage.create_project(sample_project)
        seen = []
        original = self.storage.record_assessment

        def spy(assessment):
            seen.append(get_project_id())
            return original(assessment)

        with patch.object(self.storage, "record_assessment", side_effect=spy):
            self.service.assess_project(created.id, all_grades("B"))

        assert seen == [str(created.id)]
        assert get_project_id() == ""


class TestCreateAndAssess:
    def setup_method(self):
        self.storage = MemStorage()
        self.service = AssessmentService(self.storage)

    def test_creates_and_assesses(self, sample_project, all_grades):
        project, record = self.service.create_and_assess(
            sample_project, all_grades("A", labor_practices="D")
        )
        assert project.id == 1
        assert project.is_assessed
        assert record.grades["labor_practices"] == "D"
        assert record.overall_notes.startswith("Labor Practices: ")

    def test_invalid_grade_leaves_no_project(self, sample_project, all_grades):
        with pytest.raises(InvalidGradeError):
            self.service.create_and_assess(sample_project, all_grades("A", energy_use="F"))
        assert self.storage.get_projects() == []

    def test_missing_details_leaves_no_project(self, sample_project, all_grades):
        sample_project.name = ""
        with pytest.raises(ValidationError) as exc_info:
            self.service.create_and_assess(sample_project, all_grades("A"))
        assert exc_info.value.error_code == ErrorCode.MISSING_REQUIRED_FIELD
        assert self.storage.get_projects() == []

    def test_incomplete_leaves_no_project(self, sample_project, all_grades):
        with pytest.raises(IncompleteAssessmentError):
            self.service.create_and_assess(sample_project, all_grades("A", climate_risk=""))
        assert self.storage.get_projects() == []


class TestPreview:
    def test_preview_does_not_persist(self, all_grades):
        storage = MemStorage()
        service = AssessmentService(storage)
        result = service.preview(all_grades("C"))
        assert result.overall_grade == Grade.B
        assert result.risk_level == RiskLevel.MODERATE
        assert storage.get_projects() == []
