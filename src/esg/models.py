"""ESG Data Models."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

from src.esg.config import Grade, Pillar, RiskLevel


@dataclass(frozen=True)
class Category:
    """A fixed, independently graded ESG sub-topic."""
    id: str
    pillar: Pillar
    title: str
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pillar": self.pillar.value,
            "title": self.title,
            "description": self.description,
        }


# Canonical category order. Pillar slices are 6 / 3 / 2.
CATEGORIES: tuple[Category, ...] = (
    Category(
        "project_type", Pillar.ENVIRONMENTAL, "Project Type",
        "Assess the inherent environmental impact of the project's primary activities.",
    ),
    Category(
        "energy_use", Pillar.ENVIRONMENTAL, "Energy Use",
        "Evaluate energy consumption patterns and sources (renewable vs. non-renewable).",
    ),
    Category(
        "resource_use", Pillar.ENVIRONMENTAL, "Resource Use",
        "Assess consumption of natural resources, recycling practices, and waste reduction.",
    ),
    Category(
        "pollution_waste", Pillar.ENVIRONMENTAL, "Pollution & Waste",
        "Evaluate emissions, waste management practices, and pollution prevention.",
    ),
    Category(
        "biodiversity_impact", Pillar.ENVIRONMENTAL, "Biodiversity Impact",
        "Assess potential impacts on local ecosystems, habitat preservation efforts.",
    ),
    Category(
        "climate_risk", Pillar.ENVIRONMENTAL, "Climate Risk",
        "Evaluate risks related to climate change and adaptation/mitigation strategies.",
    ),
    Category(
        "labor_practices", Pillar.SOCIAL, "Labor Practices",
        "Evaluate working conditions, fair wages, and employee health and safety measures.",
    ),
    Category(
        "community_impact", Pillar.SOCIAL, "Community Impact",
        "Assess engagement with local communities and benefit-sharing initiatives.",
    ),
    Category(
        "human_rights", Pillar.SOCIAL, "Human Rights",
        "Evaluate potential human rights risks and due diligence measures.",
    ),
    Category(
        "responsible_operation", Pillar.GOVERNANCE, "Responsible Operation",
        "Assess project governance structure, accountability, and management quality.",
    ),
    Category(
        "corruption_ethics", Pillar.GOVERNANCE, "Corruption & Ethics",
        "Evaluate anti-corruption measures and ethical business practices.",
    ),
)

CATEGORY_IDS: tuple[str, ...] = tuple(c.id for c in CATEGORIES)

CATEGORIES_BY_ID: Mapping[str, Category] = MappingProxyType(
    {c.id: c for c in CATEGORIES}
)

PILLAR_CATEGORIES: Mapping[Pillar, tuple[Category, ...]] = MappingProxyType({
    pillar: tuple(c for c in CATEGORIES if c.pillar == pillar)
    for pillar in Pillar
})


@dataclass(frozen=True)
class ESGAssessment:
    """Derived result of grading all eleven categories.

    Computed once from a complete grade map and never mutated; re-grading
    a project produces a new assessment.
    """
    grades: Mapping[str, Grade]
    overall_score: int
    overall_grade: Grade
    risk_level: RiskLevel
    environment_grade: Grade
    social_grade: Grade
    governance_grade: Grade
    overall_notes: str
    computed_at: datetime = field(default_factory=datetime.now, compare=False)

    @property
    def pillar_grades(self) -> dict[Pillar, Grade]:
        return {
            Pillar.ENVIRONMENTAL: self.environment_grade,
            Pillar.SOCIAL: self.social_grade,
            Pillar.GOVERNANCE: self.governance_grade,
        }

    def pillar_metrics(self, pillar: Pillar) -> dict[str, Grade]:
        """Grades of one pillar's categories, keyed by category id."""
        return {c.id: self.grades[c.id] for c in PILLAR_CATEGORIES[pillar]}

    def to_dict(self) -> dict:
        return {
            "grades": {cid: self.grades[cid].value for cid in CATEGORY_IDS},
            "overall_score": self.overall_score,
            "overall_grade": self.overall_grade.value,
            "risk_level": self.risk_level.value,
            "environment_grade": self.environment_grade.value,
            "social_grade": self.social_grade.value,
            "governance_grade": self.governance_grade.value,
            "overall_notes": self.overall_notes,
        }
