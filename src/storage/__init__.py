"""Project, assessment and bookmark persistence."""

import logging
from typing import Optional

from src.db.engine import build_engine, get_engine
from src.settings import Settings, get_settings
from src.storage.base import Storage
from src.storage.database import DatabaseStorage
from src.storage.memory import MemStorage
from src.storage.models import (
    Bookmark,
    FilterOptions,
    Project,
    RiskAssessment,
    User,
)
from src.storage.seed import SAMPLE_PROJECTS, seed_storage

logger = logging.getLogger(__name__)


def get_storage(settings: Optional[Settings] = None) -> Storage:
    """Build the storage backend selected by settings.

    ``use_database`` picks DatabaseStorage on ``database_url``,
    otherwise an in-memory store. Sample data is added to an empty
    store when ``seed_sample_data`` is set.
    """
    shared = settings is None
    settings = settings or get_settings()

    if settings.use_database:
        engine = get_engine() if shared else build_engine(settings)
        storage: Storage = DatabaseStorage(engine=engine, create_tables=True)
        logger.info("Using database storage")
    else:
        storage = MemStorage()
        logger.info("Using in-memory storage")

    if settings.seed_sample_data:
        seed_storage(storage)
    return storage


__all__ = [
    "Storage",
    "DatabaseStorage",
    "MemStorage",
    "Bookmark",
    "FilterOptions",
    "Project",
    "RiskAssessment",
    "User",
    "SAMPLE_PROJECTS",
    "get_storage",
    "seed_storage",
]
