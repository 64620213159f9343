"""Narrative insight providers.

The hosted text-generation call is not part of this package; this module
fixes its request/response contract and ships an offline provider that
answers from the built-in remediation text.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from src.esg.config import LOW_GRADES, REMEDIATION_TEXT, Grade, Pillar
from src.esg.models import CATEGORIES_BY_ID
from src.storage.models import Project, RiskAssessment

logger = logging.getLogger(__name__)


class InsightPillar(Enum):
    """Pillar names used by the insight contract."""
    ENVIRONMENT = "environment"
    SOCIAL = "social"
    GOVERNANCE = "governance"


PILLAR_FOR_INSIGHT = {
    InsightPillar.ENVIRONMENT: Pillar.ENVIRONMENTAL,
    InsightPillar.SOCIAL: Pillar.SOCIAL,
    InsightPillar.GOVERNANCE: Pillar.GOVERNANCE,
}


@dataclass
class InsightRequest:
    """Input to an insight provider for one pillar of one project."""
    pillar: InsightPillar
    metrics: dict[str, Grade] = field(default_factory=dict)
    project_name: str = ""
    country: str = ""
    project_category: str = ""

    def to_dict(self) -> dict:
        return {
            "category": self.pillar.value,
            "metrics": {cid: grade.value for cid, grade in self.metrics.items()},
            "projectName": self.project_name,
            "country": self.country,
            "projectCategory": self.project_category,
        }


def build_insight_request(
    project: Project,
    assessment: RiskAssessment,
    pillar: InsightPillar,
) -> InsightRequest:
    """Collect one pillar's category grades for an insight request."""
    esg_pillar = PILLAR_FOR_INSIGHT[pillar]
    metrics = {
        cid: Grade(letter)
        for cid, letter in assessment.grades.items()
        if CATEGORIES_BY_ID[cid].pillar == esg_pillar
    }
    return InsightRequest(
        pillar=pillar,
        metrics=metrics,
        project_name=project.name,
        country=project.country,
        project_category=project.category,
    )


class InsightProvider(ABC):
    """Produces free-text bullet insights for one pillar."""

    @abstractmethod
    def generate(self, request: InsightRequest) -> str:
        ...


class OfflineInsightProvider(InsightProvider):
    """Insights assembled from the remediation table, no network access.

    Emits one "- " bullet per category graded C or D; when none are,
    a single bullet noting the pillar's strengths.
    """

    def generate(self, request: InsightRequest) -> str:
        bullets = [
            f"- {CATEGORIES_BY_ID[cid].title}: {REMEDIATION_TEXT[cid]}"
            for cid, grade in request.metrics.items()
            if grade in LOW_GRADES
        ]
        if not bullets:
            location = f" in {request.country}" if request.country else ""
            bullets = [
                f"- {request.project_name or 'This project'} shows no significant "
                f"{request.pillar.value} concerns{location}. Maintain current practices."
            ]
        logger.debug(f"Generated {len(bullets)} offline {request.pillar.value} insights")
        return "\n".join(bullets)
