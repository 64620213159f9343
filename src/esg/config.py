"""ESG Configuration and Enums."""

from enum import Enum


class Grade(Enum):
    """Letter grade for a single ESG category."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    UNASSIGNED = ""


class Pillar(Enum):
    """Top-level ESG pillar."""
    ENVIRONMENTAL = "environmental"
    SOCIAL = "social"
    GOVERNANCE = "governance"


class RiskLevel(Enum):
    """Coarse risk label derived from the overall grade."""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


# Numeric value of each grade
GRADE_VALUES = {
    Grade.A: 4,
    Grade.B: 3,
    Grade.C: 2,
    Grade.D: 1,
    Grade.UNASSIGNED: 0,
}

MAX_GRADE_VALUE = 4

# Overall score (0-100) thresholds, inclusive lower bounds
SCORE_THRESHOLDS = {
    Grade.A: 75,
    Grade.B: 50,
    Grade.C: 25,
}

# Pillar average (1-4) thresholds, inclusive lower bounds
PILLAR_THRESHOLDS = {
    Grade.A: 3.5,
    Grade.B: 2.5,
    Grade.C: 1.5,
}

GRADE_RISK_LEVELS = {
    Grade.A: RiskLevel.LOW,
    Grade.B: RiskLevel.MODERATE,
    Grade.C: RiskLevel.HIGH,
    Grade.D: RiskLevel.VERY_HIGH,
}

# Grades that trigger an improvement suggestion
LOW_GRADES = frozenset({Grade.C, Grade.D})

NO_CONCERNS_MESSAGE = (
    "No significant ESG concerns were identified. "
    "Continue monitoring all ESG aspects to maintain strong performance."
)

GOOD_PRACTICE_SUMMARY = (
    "This project demonstrates good ESG practices overall. "
    "Continue to monitor and improve performance in all categories."
)

CONCERNS_SUMMARY_TEMPLATE = (
    "This project has significant ESG concerns in the following areas: {areas}. "
    "Consider implementing mitigation strategies in these categories."
)

# Remediation sentence per category id
REMEDIATION_TEXT = {
    "project_type": "Consider redesigning high-impact aspects of the project to reduce environmental footprint.",
    "energy_use": "Implement energy efficiency measures and increase renewable energy sourcing.",
    "resource_use": "Adopt circular economy principles and improve material efficiency in operations.",
    "pollution_waste": "Strengthen waste management practices and implement pollution prevention technologies.",
    "biodiversity_impact": "Develop habitat conservation plans and minimize disturbance to natural ecosystems.",
    "climate_risk": "Implement climate adaptation measures and reduce climate vulnerability in project design.",
    "labor_practices": "Improve workplace safety standards and ensure fair compensation policies.",
    "community_impact": "Strengthen community engagement processes and develop local benefit-sharing initiatives.",
    "human_rights": "Implement human rights due diligence processes throughout operations and supply chain.",
    "responsible_operation": "Enhance management transparency and create clear accountability mechanisms.",
    "corruption_ethics": "Strengthen anti-corruption policies and provide ethics training to all staff.",
}
