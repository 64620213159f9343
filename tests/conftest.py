"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Isolate each test from ESGTRACK_* env vars and cached settings."""
    from src.db.engine import reset_engine
    from src.settings import get_settings

    for key in [k for k in os.environ if k.startswith("ESGTRACK_")]:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    reset_engine()


@pytest.fixture
def all_grades():
    """Build a complete grade map with every category set to one letter."""
    from src.esg.models import CATEGORY_IDS

    def _build(letter: str = "A", **overrides: str) -> dict[str, str]:
        grades = {cid: letter for cid in CATEGORY_IDS}
        grades.update(overrides)
        return grades

    return _build


@pytest.fixture
def sample_project():
    from src.storage.models import Project

    return Project(
        name="Rwanda Mini-Grid Programme",
        description="Solar mini-grids serving off-grid villages in the Eastern Province.",
        country="Rwanda",
        region="Eastern Province",
        category="Renewable Energy",
        size="Medium ($1M - $10M)",
        funding="$4.1M",
    )
