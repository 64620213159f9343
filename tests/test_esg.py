"""Tests for ESG Grading & Scoring."""

import dataclasses

import pytest

from src.esg.config import (
    GRADE_RISK_LEVELS,
    GRADE_VALUES,
    NO_CONCERNS_MESSAGE,
    REMEDIATION_TEXT,
    Grade,
    Pillar,
    RiskLevel,
)
from src.esg.grader import CategoryGrader
from src.esg.grades import GradeScale
from src.esg.models import (
    CATEGORIES,
    CATEGORIES_BY_ID,
    CATEGORY_IDS,
    PILLAR_CATEGORIES,
    ESGAssessment,
)
from src.esg.scoring import Aggregator, _round_half_up
from src.esg.suggestions import SuggestionGenerator
from src.errors.config import ErrorCode
from src.errors.exceptions import (
    IncompleteAssessmentError,
    InvalidGradeError,
    UnknownCategoryError,
    ValidationError,
)


# ── Config & Model Tests ──


class TestEnums:
    def test_grade_values(self):
        assert Grade.A.value == "A"
        assert Grade.D.value == "D"
        assert Grade.UNASSIGNED.value == ""

    def test_pillar_values(self):
        assert Pillar.ENVIRONMENTAL.value == "environmental"
        assert Pillar.SOCIAL.value == "social"
        assert Pillar.GOVERNANCE.value == "governance"

    def test_risk_levels(self):
        assert [r.value for r in RiskLevel] == ["Low", "Moderate", "High", "Very High"]

    def test_grade_risk_mapping(self):
        assert GRADE_RISK_LEVELS[Grade.A] == RiskLevel.LOW
        assert GRADE_RISK_LEVELS[Grade.B] == RiskLevel.MODERATE
        assert GRADE_RISK_LEVELS[Grade.C] == RiskLevel.HIGH
        assert GRADE_RISK_LEVELS[Grade.D] == RiskLevel.VERY_HIGH

    def test_remediation_table_covers_every_category(self):
        assert set(REMEDIATION_TEXT) == set(CATEGORY_IDS)


class TestCategories:
    def test_eleven_categories_in_canonical_order(self):
        assert CATEGORY_IDS == (
            "project_type",
            "energy_use",
            "resource_use",
            "pollution_waste",
            "biodiversity_impact",
            "climate_risk",
            "labor_practices",
            "community_impact",
            "human_rights",
            "responsible_operation",
            "corruption_ethics",
        )

    def test_pillar_partition(self):
        assert len(PILLAR_CATEGORIES[Pillar.ENVIRONMENTAL]) == 6
        assert len(PILLAR_CATEGORIES[Pillar.SOCIAL]) == 3
        assert len(PILLAR_CATEGORIES[Pillar.GOVERNANCE]) == 2
        assert sum(len(v) for v in PILLAR_CATEGORIES.values()) == len(CATEGORIES)

    def test_titles(self):
        assert CATEGORIES_BY_ID["pollution_waste"].title == "Pollution & Waste"
        assert CATEGORIES_BY_ID["corruption_ethics"].title == "Corruption & Ethics"

    def test_category_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CATEGORIES[0].title = "Changed"

    def test_category_to_dict(self):
        d = CATEGORIES_BY_ID["climate_risk"].to_dict()
        assert d["id"] == "climate_risk"
        assert d["pillar"] == "environmental"
        assert d["title"] == "Climate Risk"


# ── GradeScale Tests ──


class TestGradeScale:
    def test_value_of(self):
        assert GradeScale.value_of(Grade.A) == 4
        assert GradeScale.value_of(Grade.B) == 3
        assert GradeScale.value_of(Grade.C) == 2
        assert GradeScale.value_of(Grade.D) == 1
        assert GradeScale.value_of(Grade.UNASSIGNED) == 0

    def test_grade_values_table(self):
        assert GRADE_VALUES[Grade.A] == 4

    @pytest.mark.parametrize("score,expected", [
        (100, Grade.A),
        (75, Grade.A),
        (74, Grade.B),
        (50, Grade.B),
        (49, Grade.C),
        (25, Grade.C),
        (24, Grade.D),
        (0, Grade.D),
    ])
    def test_grade_of_thresholds(self, score, expected):
        assert GradeScale.grade_of(score, all_assigned=True) == expected

    def test_grade_of_unassigned_when_incomplete(self):
        assert GradeScale.grade_of(100, all_assigned=False) == Grade.UNASSIGNED

    def test_grade_of_does_not_round(self):
        assert GradeScale.grade_of(74.9, all_assigned=True) == Grade.B

    @pytest.mark.parametrize("average,expected", [
        (4.0, Grade.A),
        (3.5, Grade.A),
        (3.49, Grade.B),
        (2.5, Grade.B),
        (2.49, Grade.C),
        (1.5, Grade.C),
        (1.49, Grade.D),
        (1.0, Grade.D),
    ])
    def test_pillar_grade_of_thresholds(self, average, expected):
        assert GradeScale.pillar_grade_of(average) == expected

    def test_parse_letters(self):
        assert GradeScale.parse("A") == Grade.A
        assert GradeScale.parse("D") == Grade.D
        assert GradeScale.parse(Grade.B) == Grade.B

    def test_parse_unassigned(self):
        assert GradeScale.parse("") == Grade.UNASSIGNED
        assert GradeScale.parse(None) == Grade.UNASSIGNED

    @pytest.mark.parametrize("value", ["E", "a", " A", "AA", 4, 3.0, "A+"])
    def test_parse_rejects_other_values(self, value):
        with pytest.raises(InvalidGradeError) as exc_info:
            GradeScale.parse(value, "energy_use")
        assert exc_info.value.category_id == "energy_use"
        assert exc_info.value.value == value
        assert exc_info.value.error_code == ErrorCode.INVALID_GRADE


# ── CategoryGrader Tests ──


class TestCategoryGrader:
    def setup_method(self):
        self.grader = CategoryGrader()

    def test_complete(self, all_grades):
        assert self.grader.is_complete(all_grades("B"))

    def test_incomplete_when_missing(self, all_grades):
        grades = all_grades("A")
        del grades["climate_risk"]
        assert not self.grader.is_complete(grades)

    def test_incomplete_when_unassigned(self, all_grades):
        assert not self.grader.is_complete(all_grades("A", human_rights=""))

    def test_empty_map(self):
        assert not self.grader.is_complete({})
        assert self.grader.missing({}) == list(CATEGORY_IDS)

    def test_missing_in_canonical_order(self, all_grades):
        grades = all_grades("A")
        del grades["corruption_ethics"]
        del grades["project_type"]
        assert self.grader.missing(grades) == ["project_type", "corruption_ethics"]

    def test_validate_returns_grades(self, all_grades):
        validated = self.grader.validate(all_grades("C"))
        assert list(validated) == list(CATEGORY_IDS)
        assert all(g == Grade.C for g in validated.values())

    def test_validate_names_missing(self, all_grades):
        grades = all_grades("A")
        del grades["project_type"]
        with pytest.raises(IncompleteAssessmentError) as exc_info:
            self.grader.validate(grades)
        err = exc_info.value
        assert err.missing == ["project_type"]
        assert "project_type" in err.message
        assert err.details == [{"field": "project_type", "issue": "Grade not assigned"}]
        assert err.status_code == 400

    def test_incomplete_is_validation_error(self, all_grades):
        with pytest.raises(ValidationError):
            self.grader.validate(all_grades("A", energy_use=None))

    def test_invalid_grade_beats_missing(self, all_grades):
        grades = all_grades("A", energy_use="Z")
        del grades["project_type"]
        with pytest.raises(InvalidGradeError):
            self.grader.validate(grades)

    def test_unknown_category(self, all_grades):
        with pytest.raises(UnknownCategoryError) as exc_info:
            self.grader.validate(all_grades("A", legal_compliance="B"))
        assert exc_info.value.category_ids == ["legal_compliance"]

    def test_non_string_category_key(self, all_grades):
        with pytest.raises(UnknownCategoryError) as exc_info:
            self.grader.validate({**all_grades("A"), 7: "A"})
        assert exc_info.value.category_ids == ["7"]
        assert exc_info.value.details == [{"field": "7", "issue": "Unknown category"}]

    def test_mixed_unknown_keys(self, all_grades):
        with pytest.raises(ValidationError) as exc_info:
            Aggregator().assess({**all_grades("A"), 7: "A", "bogus": "A"})
        assert exc_info.value.category_ids == ["7", "bogus"]
        assert "7, bogus" in exc_info.value.message


# ── Aggregator Tests ──


class TestAggregator:
    def setup_method(self):
        self.aggregator = Aggregator()

    def test_all_a(self, all_grades):
        result = self.aggregator.assess(all_grades("A"))
        assert result.overall_score == 100
        assert result.overall_grade == Grade.A
        assert result.risk_level == RiskLevel.LOW
        assert result.environment_grade == Grade.A
        assert result.social_grade == Grade.A
        assert result.governance_grade == Grade.A
        assert result.overall_notes == NO_CONCERNS_MESSAGE

    def test_all_d_lands_on_c_boundary(self, all_grades):
        result = self.aggregator.assess(all_grades("D"))
        assert result.overall_score == 25
        assert result.overall_grade == Grade.C
        assert result.risk_level == RiskLevel.HIGH
        assert result.environment_grade == Grade.D

    def test_all_b_reaches_a_boundary(self, all_grades):
        result = self.aggregator.assess(all_grades("B"))
        assert result.overall_score == 75
        assert result.overall_grade == Grade.A
        assert result.environment_grade == Grade.B

    def test_all_c(self, all_grades):
        result = self.aggregator.assess(all_grades("C"))
        assert result.overall_score == 50
        assert result.overall_grade == Grade.B
        assert result.risk_level == RiskLevel.MODERATE

    def test_mixed_pillars(self, all_grades):
        grades = all_grades(
            "A",
            labor_practices="D",
            community_impact="D",
            human_rights="D",
            responsible_operation="B",
            corruption_ethics="B",
        )
        result = self.aggregator.assess(grades)
        assert result.environment_grade == Grade.A
        assert result.social_grade == Grade.D
        assert result.governance_grade == Grade.B
        assert result.overall_score == 75
        assert result.overall_grade == Grade.A

    def test_score_rounds(self, all_grades):
        # (10 * 4 + 3) / 44 * 100 = 97.7
        assert self.aggregator.overall_score(all_grades("A", climate_risk="B")) == 98

    def test_round_half_up(self):
        assert _round_half_up(62.5) == 63
        assert _round_half_up(62.4999) == 62

    def test_governance_average_on_boundary(self, all_grades):
        grades = all_grades("A", corruption_ethics="B")
        assert self.aggregator.pillar_grade(grades, Pillar.GOVERNANCE) == Grade.A

    def test_social_average(self, all_grades):
        grades = all_grades("A", community_impact="B", human_rights="C")
        assert self.aggregator.pillar_grade(grades, Pillar.SOCIAL) == Grade.B

    def test_pillars_independent(self, all_grades):
        base = all_grades("A", labor_practices="C", community_impact="C")
        changed = dict(base, project_type="D", corruption_ethics="D")
        assert (
            self.aggregator.pillar_grade(base, Pillar.SOCIAL)
            == self.aggregator.pillar_grade(changed, Pillar.SOCIAL)
        )

    def test_pillar_grades_keys(self, all_grades):
        pillars = self.aggregator.pillar_grades(all_grades("B"))
        assert set(pillars) == set(Pillar)

    def test_score_and_grade_consistent(self, all_grades):
        for letters in ("ABCD", "DDCA", "BBBC", "CCCD"):
            grades = {cid: letters[i % 4] for i, cid in enumerate(CATEGORY_IDS)}
            result = self.aggregator.assess(grades)
            assert result.overall_grade == GradeScale.grade_of(result.overall_score, True)
            assert result.risk_level == GRADE_RISK_LEVELS[result.overall_grade]

    def test_risk_level_for_d(self):
        assert Aggregator.risk_level(Grade.D) == RiskLevel.VERY_HIGH

    def test_accepts_grade_enums(self, all_grades):
        grades = {cid: Grade.B for cid in CATEGORY_IDS}
        assert self.aggregator.assess(grades).overall_score == 75

    def test_missing_category_rejected(self, all_grades):
        grades = all_grades("A")
        del grades["project_type"]
        with pytest.raises(IncompleteAssessmentError) as exc_info:
            self.aggregator.assess(grades)
        assert exc_info.value.missing == ["project_type"]

    def test_nine_supplied(self, all_grades):
        grades = all_grades("B")
        del grades["project_type"]
        del grades["energy_use"]
        with pytest.raises(IncompleteAssessmentError) as exc_info:
            self.aggregator.overall_score(grades)
        assert exc_info.value.missing == ["project_type", "energy_use"]

    def test_every_entry_point_rejects_incomplete(self, all_grades):
        grades = all_grades("A", human_rights="")
        for call in (
            lambda: self.aggregator.overall_score(grades),
            lambda: self.aggregator.overall_grade(grades),
            lambda: self.aggregator.pillar_grades(grades),
            lambda: self.aggregator.assess(grades),
        ):
            with pytest.raises(IncompleteAssessmentError) as exc_info:
                call()
            assert exc_info.value.missing == ["human_rights"]

    def test_assess_validates_once(self, all_grades):
        class CountingGrader(CategoryGrader):
            calls = 0

            def validate(self, grades):
                CountingGrader.calls += 1
                return super().validate(grades)

        aggregator = Aggregator(grader=CountingGrader())
        result = aggregator.assess(all_grades("A", human_rights="D"))
        assert CountingGrader.calls == 1
        assert result.overall_score == 93
        assert result.social_grade == Grade.B


class TestESGAssessment:
    def setup_method(self):
        self.aggregator = Aggregator()

    def test_frozen(self, all_grades):
        result = self.aggregator.assess(all_grades("A"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.overall_score = 10

    def test_grades_read_only(self, all_grades):
        result = self.aggregator.assess(all_grades("A"))
        with pytest.raises(TypeError):
            result.grades["energy_use"] = Grade.D

    def test_input_mutation_does_not_leak(self, all_grades):
        grades = all_grades("A")
        result = self.aggregator.assess(grades)
        grades["energy_use"] = "D"
        assert result.grades["energy_use"] == Grade.A

    def test_pillar_metrics(self, all_grades):
        result = self.aggregator.assess(all_grades("A", corruption_ethics="C"))
        assert result.pillar_metrics(Pillar.GOVERNANCE) == {
            "responsible_operation": Grade.A,
            "corruption_ethics": Grade.C,
        }

    def test_pillar_grades_property(self, all_grades):
        result = self.aggregator.assess(all_grades("C"))
        assert result.pillar_grades[Pillar.SOCIAL] == Grade.C

    def test_to_dict(self, all_grades):
        d = self.aggregator.assess(all_grades("D")).to_dict()
        assert d["overall_score"] == 25
        assert d["overall_grade"] == "C"
        assert d["risk_level"] == "High"
        assert d["environment_grade"] == "D"
        assert d["grades"]["project_type"] == "D"
        assert list(d["grades"]) == list(CATEGORY_IDS)

    def test_equal_inputs_equal_results(self, all_grades):
        first = self.aggregator.assess(all_grades("B", energy_use="C"))
        second = self.aggregator.assess(all_grades("B", energy_use="C"))
        assert first == second


# ── SuggestionGenerator Tests ──


class TestSuggestionGenerator:
    def setup_method(self):
        self.generator = SuggestionGenerator()

    def test_no_concerns(self, all_grades):
        assert self.generator.generate(all_grades("A")) == NO_CONCERNS_MESSAGE
        assert self.generator.generate(all_grades("B")) == NO_CONCERNS_MESSAGE

    def test_two_social_concerns_in_canonical_order(self, all_grades):
        grades = {"human_rights": "D", "community_impact": "D"}
        grades.update({cid: "A" for cid in CATEGORY_IDS if cid not in grades})
        text = self.generator.generate(grades)
        assert text.split("\n") == [
            "Community Impact: Strengthen community engagement processes "
            "and develop local benefit-sharing initiatives.",
            "Human Rights: Implement human rights due diligence processes "
            "throughout operations and supply chain.",
        ]

    def test_c_grades_included(self, all_grades):
        text = self.generator.generate(all_grades("A", energy_use="C"))
        assert text == (
            "Energy Use: Implement energy efficiency measures and increase "
            "renewable energy sourcing."
        )

    def test_all_low(self, all_grades):
        lines = self.generator.generate(all_grades("D")).split("\n")
        assert len(lines) == 11
        assert lines[0].startswith("Project Type: ")
        assert lines[-1].startswith("Corruption & Ethics: ")

    def test_no_trailing_separator(self, all_grades):
        text = self.generator.generate(all_grades("C"))
        assert not text.endswith("\n")
        assert not text.startswith("-")

    def test_idempotent(self, all_grades):
        grades = all_grades("B", pollution_waste="D", climate_risk="C")
        assert self.generator.generate(grades) == self.generator.generate(dict(grades))

    def test_low_categories(self, all_grades):
        low = self.generator.low_categories(all_grades("A", labor_practices="C"))
        assert [c.id for c in low] == ["labor_practices"]

    def test_summary_with_concerns(self, all_grades):
        text = self.generator.summary(all_grades("A", energy_use="D", human_rights="C"))
        assert text == (
            "This project has significant ESG concerns in the following areas: "
            "Energy Use, Human Rights. Consider implementing mitigation "
            "strategies in these categories."
        )

    def test_summary_without_concerns(self, all_grades):
        assert self.generator.summary(all_grades("A")).startswith(
            "This project demonstrates good ESG practices overall."
        )

    def test_custom_text(self, all_grades):
        custom = dict(REMEDIATION_TEXT, energy_use="Switch to solar.")
        generator = SuggestionGenerator(remediation_text=custom)
        assert generator.generate(all_grades("A", energy_use="D")) == "Energy Use: Switch to solar."

    def test_partial_text_keeps_defaults(self, all_grades):
        generator = SuggestionGenerator(remediation_text={"energy_use": "Switch to solar."})
        text = generator.generate(all_grades("A", energy_use="D", human_rights="D"))
        assert text.split("\n") == [
            "Energy Use: Switch to solar.",
            f"Human Rights: {REMEDIATION_TEXT['human_rights']}",
        ]

    def test_empty_text_uses_defaults(self, all_grades):
        generator = SuggestionGenerator(remediation_text={})
        assert generator.remediation_text == REMEDIATION_TEXT

    def test_text_for_unknown_category_rejected(self):
        with pytest.raises(UnknownCategoryError):
            SuggestionGenerator(remediation_text={"legal_compliance": "Hire counsel."})

    def test_notes_matches_generate(self, all_grades):
        grades = all_grades("B", pollution_waste="D")
        validated = CategoryGrader().validate(grades)
        assert self.generator.notes(validated) == self.generator.generate(grades)

    def test_incomplete_rejected(self, all_grades):
        grades = all_grades("D")
        del grades["resource_use"]
        with pytest.raises(IncompleteAssessmentError) as exc_info:
            self.generator.generate(grades)
        assert exc_info.value.missing == ["resource_use"]
