"""Per-pillar narrative insights."""

from src.insights.provider import (
    InsightPillar,
    InsightProvider,
    InsightRequest,
    OfflineInsightProvider,
    build_insight_request,
)

__all__ = [
    "InsightPillar",
    "InsightProvider",
    "InsightRequest",
    "OfflineInsightProvider",
    "build_insight_request",
]
