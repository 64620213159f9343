"""Project gallery: filtering, paging, summaries and bookmarks."""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import pandas as pd

from src.errors.validators import validate_pagination
from src.esg.config import Grade, Pillar
from src.logging_config.performance import PerformanceTimer
from src.settings import get_settings
from src.storage.base import Storage
from src.storage.models import RISK_LEVEL_ORDER, Bookmark, FilterOptions, Project

logger = logging.getLogger(__name__)

GALLERY_COLUMNS = [
    "id",
    "name",
    "description",
    "country",
    "region",
    "category",
    "size",
    "environment_grade",
    "social_grade",
    "governance_grade",
    "risk_score",
    "risk_level",
]

SEARCH_COLUMNS = ("name", "description", "country")

PILLAR_COLUMNS = {
    Pillar.ENVIRONMENTAL: "environment_grade",
    Pillar.SOCIAL: "social_grade",
    Pillar.GOVERNANCE: "governance_grade",
}

LETTER_GRADES = [g.value for g in Grade if g is not Grade.UNASSIGNED]


@dataclass
class GalleryPage:
    """One page of filtered gallery results."""
    projects: list[Project] = field(default_factory=list)
    page: int = 1
    page_size: int = 6
    total: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def to_dict(self) -> dict:
        return {
            "projects": [p.to_dict() for p in self.projects],
            "page": self.page,
            "page_size": self.page_size,
            "total": self.total,
            "total_pages": self.total_pages,
        }


class ProjectGallery:
    """Browse, filter and bookmark tracked projects.

    Filters match country, category and risk level exactly; ``search``
    is a case-insensitive substring match on name, description and
    country. An empty value or "all" disables a filter.
    """

    def __init__(self, storage: Storage, page_size: Optional[int] = None):
        settings = get_settings()
        self.storage = storage
        self.max_page_size = settings.max_page_size
        _, self.page_size = validate_pagination(
            1, page_size or settings.gallery_page_size, self.max_page_size
        )

    def frame(self, projects: Optional[list[Project]] = None) -> pd.DataFrame:
        """Gallery columns as a DataFrame, one row per project."""
        if projects is None:
            projects = self.storage.get_projects()
        if not projects:
            return pd.DataFrame(columns=GALLERY_COLUMNS)
        rows = [{col: getattr(p, col) for col in GALLERY_COLUMNS} for p in projects]
        return pd.DataFrame(rows, columns=GALLERY_COLUMNS)

    def filter(self, options: Optional[FilterOptions] = None) -> list[Project]:
        """Projects matching every active filter, in storage order."""
        active = (options or FilterOptions()).active
        projects = self.storage.get_projects()
        if not active or not projects:
            return projects

        with PerformanceTimer("gallery_filter"):
            df = self.frame(projects)
            mask = pd.Series(True, index=df.index)
            for column in ("country", "category", "risk_level"):
                if column in active:
                    mask &= df[column] == active[column]
            if "search" in active:
                term = active["search"].lower()
                hit = pd.Series(False, index=df.index)
                for column in SEARCH_COLUMNS:
                    hit |= df[column].fillna("").str.lower().str.contains(term, regex=False)
                mask &= hit

        selected = set(df.loc[mask, "id"])
        return [p for p in projects if p.id in selected]

    def page(self, options: Optional[FilterOptions] = None, page: int = 1) -> GalleryPage:
        """One page of filtered projects (1-based)."""
        page, page_size = validate_pagination(page, self.page_size, self.max_page_size)
        projects = self.filter(options)
        start = (page - 1) * page_size
        return GalleryPage(
            projects=projects[start:start + page_size],
            page=page,
            page_size=page_size,
            total=len(projects),
        )

    def risk_distribution(self) -> dict[str, int]:
        """Assessed project counts per risk level, Low to Very High."""
        df = self.frame()
        counts = df["risk_level"].value_counts().reindex(RISK_LEVEL_ORDER, fill_value=0)
        return {level: int(n) for level, n in counts.items()}

    def pillar_grade_counts(self) -> dict[str, dict[str, int]]:
        """Per pillar, how many projects hold each letter grade."""
        df = self.frame()
        result = {}
        for pillar, column in PILLAR_COLUMNS.items():
            counts = df[column].value_counts().reindex(LETTER_GRADES, fill_value=0)
            result[pillar.value] = {grade: int(n) for grade, n in counts.items()}
        return result

    def average_score(self) -> Optional[float]:
        """Mean overall score of assessed projects, None when none are assessed."""
        scores = self.frame()["risk_score"].dropna()
        if scores.empty:
            return None
        return round(float(np.mean(scores.to_numpy(dtype=float))), 1)

    def bookmarked_projects(self, user_id: int) -> list[Project]:
        ids = {b.project_id for b in self.storage.get_bookmarks_by_user_id(user_id)}
        return [p for p in self.storage.get_projects() if p.id in ids]

    def toggle_bookmark(self, user_id: int, project_id: int) -> bool:
        """Bookmark or un-bookmark a project.

        Returns:
            True if the project is bookmarked after the call.
        """
        for bookmark in self.storage.get_bookmarks_by_user_id(user_id):
            if bookmark.project_id == project_id:
                self.storage.delete_bookmark(bookmark.id)
                logger.info(f"User {user_id} removed bookmark on project {project_id}")
                return False

        self.storage.create_bookmark(Bookmark(user_id=user_id, project_id=project_id))
        logger.info(f"User {user_id} bookmarked project {project_id}")
        return True
