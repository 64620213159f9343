"""Sample projects used to populate an empty store."""

import logging
from typing import Optional

from src.esg.models import CATEGORY_IDS, PILLAR_CATEGORIES
from src.esg.config import Pillar
from src.esg.scoring import Aggregator
from src.storage.base import Storage
from src.storage.models import Project, RiskAssessment

logger = logging.getLogger(__name__)


def _grades(environmental: str, social: str, governance: str, **overrides: str) -> dict[str, str]:
    """Uniform grade per pillar with per-category overrides."""
    per_pillar = {
        Pillar.ENVIRONMENTAL: environmental,
        Pillar.SOCIAL: social,
        Pillar.GOVERNANCE: governance,
    }
    grades = {
        c.id: per_pillar[pillar]
        for pillar, categories in PILLAR_CATEGORIES.items()
        for c in categories
    }
    grades.update(overrides)
    return {cid: grades[cid] for cid in CATEGORY_IDS}


SAMPLE_PROJECTS: list[tuple[Project, dict[str, str]]] = [
    (
        Project(
            name="Grootvlei Solar Power Project",
            description="A 75MW solar PV installation providing clean energy to over 45,000 households in Western Cape.",
            country="South Africa",
            region="Western Cape",
            category="Renewable Energy",
            size="Large ($10M - $50M)",
            funding="$18.5M",
            contact_info="contact@grootvleiproject.co.za",
            details={
                "impact": "Reduces CO2 emissions by 120,000 tons annually",
                "timeline": "2022-2025",
                "partners": ["SolarTech SA", "Green Energy Fund", "Western Cape Government"],
            },
        ),
        _grades("A", "B", "A", biodiversity_impact="B"),
    ),
    (
        Project(
            name="Lake Turkana Wind Power",
            description="Kenya's largest wind farm with 365 turbines generating 310MW of low-cost renewable energy.",
            country="Kenya",
            region="Lake Turkana",
            category="Renewable Energy",
            size="Extra Large (> $50M)",
            funding="$78M",
            contact_info="info@ltwp.co.ke",
            details={
                "impact": "Provides 17% of Kenya's installed capacity",
                "timeline": "2020-2024",
                "partners": ["KenGen", "African Development Bank", "EU-Africa Infrastructure Trust Fund"],
            },
        ),
        _grades("A", "C", "B", biodiversity_impact="C", labor_practices="B"),
    ),
    (
        Project(
            name="Ghana Forest Restoration Initiative",
            description="Reforestation of 10,000 hectares of degraded forest land in Western Ghana using native species.",
            country="Ghana",
            region="Western Region",
            category="Conservation",
            size="Medium ($1M - $10M)",
            funding="$5.2M",
            contact_info="ghanaforests@environment.gov.gh",
            details={
                "impact": "Carbon sequestration of 45,000 tons annually",
                "timeline": "2023-2028",
                "partners": ["Ghana Forestry Commission", "Global Environment Facility", "Local Communities"],
            },
        ),
        _grades("A", "B", "C"),
    ),
    (
        Project(
            name="Namibia Water Harvesting Project",
            description="Innovative water collection and conservation systems across 18 rural communities in central Namibia.",
            country="Namibia",
            region="Central Regions",
            category="Water Management",
            size="Medium ($1M - $10M)",
            funding="$3.7M",
            contact_info="water@namibia-environment.org",
            details={
                "impact": "Improved water access for 12,000 people",
                "timeline": "2022-2025",
                "partners": ["Namibia Water Corporation", "UNDP", "Rural Development Agency"],
            },
        ),
        _grades("B", "B", "D", climate_risk="C"),
    ),
    (
        Project(
            name="Kenya Climate-Smart Agriculture",
            description="Teaching 6,500 smallholder farmers climate-resilient agricultural practices across 4 counties.",
            country="Kenya",
            region="Multiple Counties",
            category="Sustainable Agriculture",
            size="Medium ($1M - $10M)",
            funding="$2.8M",
            contact_info="smartagri@kenya.org",
            details={
                "impact": "30% increase in crop yields with 40% less water",
                "timeline": "2021-2024",
                "partners": ["Kenya Agricultural Research Institute", "World Bank", "FAO"],
            },
        ),
        _grades("A", "A", "B"),
    ),
    (
        Project(
            name="Lagos Community Biogas Initiative",
            description="Converting organic waste into clean cooking gas for 12 communities in Lagos State's urban areas.",
            country="Nigeria",
            region="Lagos State",
            category="Renewable Energy",
            size="Small (< $1M)",
            funding="$1.2M",
            contact_info="biogas@lagosenergy.org",
            details={
                "impact": "Reduces indoor air pollution for 3,500 households",
                "timeline": "2022-2024",
                "partners": ["Lagos Waste Management Authority", "Energy Commission of Nigeria", "Community Leaders"],
            },
        ),
        _grades("A", "A", "C", pollution_waste="B"),
    ),
]


def seed_storage(storage: Storage, aggregator: Optional[Aggregator] = None) -> int:
    """Create and assess the sample projects when the store is empty.

    Returns:
        Number of projects created.
    """
    if storage.get_projects():
        return 0

    aggregator = aggregator or Aggregator()
    for project, grades in SAMPLE_PROJECTS:
        created = storage.create_project(project)
        storage.record_assessment(
            RiskAssessment.from_assessment(created.id, aggregator.assess(grades))
        )

    logger.info(f"Seeded {len(SAMPLE_PROJECTS)} sample projects")
    return len(SAMPLE_PROJECTS)
