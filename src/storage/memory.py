"""In-memory storage backend."""

import copy
import logging
import threading
from dataclasses import replace
from datetime import datetime
from typing import Any, Optional

from src.errors.config import ErrorCode
from src.errors.exceptions import ConflictError, NotFoundError, ValidationError
from src.errors.validators import validate_project_fields
from src.storage.base import Storage
from src.storage.models import (
    PROJECT_MUTABLE_FIELDS,
    Bookmark,
    Project,
    RiskAssessment,
    User,
)

logger = logging.getLogger(__name__)


class MemStorage(Storage):
    """Thread-safe dict-backed storage.

    Ids are assigned from per-table counters starting at 1. Records are
    copied on the way in and out so callers cannot mutate stored state.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._projects: dict[int, Project] = {}
        self._assessments: dict[int, RiskAssessment] = {}
        self._bookmarks: dict[int, Bookmark] = {}
        self._counters = {"users": 0, "projects": 0, "assessments": 0, "bookmarks": 0}
        self._lock = threading.RLock()

    def _next_id(self, table: str) -> int:
        self._counters[table] += 1
        return self._counters[table]

    # --- Users ---

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return copy.deepcopy(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return copy.deepcopy(user)
        return None

    def create_user(self, user: User) -> User:
        with self._lock:
            if any(u.username == user.username for u in self._users.values()):
                raise ConflictError(f"Username '{user.username}' is already taken")
            stored = replace(user, id=self._next_id("users"), created_at=datetime.now())
            self._users[stored.id] = stored
            return copy.deepcopy(stored)

    # --- Projects ---

    def get_projects(self) -> list[Project]:
        with self._lock:
            return [copy.deepcopy(p) for p in self._projects.values()]

    def get_project_by_id(self, project_id: int) -> Optional[Project]:
        with self._lock:
            project = self._projects.get(project_id)
            return copy.deepcopy(project) if project else None

    def create_project(self, project: Project) -> Project:
        validate_project_fields(project.to_dict())
        with self._lock:
            stored = replace(
                copy.deepcopy(project),
                id=self._next_id("projects"),
                created_at=datetime.now(),
            )
            self._projects[stored.id] = stored
            logger.info(f"Created project {stored.id}: {stored.name}")
            return copy.deepcopy(stored)

    def update_project(self, project_id: int, **changes: Any) -> Optional[Project]:
        unknown = sorted(set(changes) - PROJECT_MUTABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown project fields: {', '.join(unknown)}")
        with self._lock:
            project = self._projects.get(project_id)
            if project is None:
                return None
            updated = replace(project, **changes)
            validate_project_fields(updated.to_dict())
            self._projects[project_id] = updated
            return copy.deepcopy(updated)

    def delete_project(self, project_id: int) -> bool:
        with self._lock:
            if self._projects.pop(project_id, None) is None:
                return False
            self._assessments = {
                k: a for k, a in self._assessments.items() if a.project_id != project_id
            }
            self._bookmarks = {
                k: b for k, b in self._bookmarks.items() if b.project_id != project_id
            }
            logger.info(f"Deleted project {project_id}")
            return True

    # --- Assessments ---

    def get_risk_assessment_by_project_id(self, project_id: int) -> Optional[RiskAssessment]:
        with self._lock:
            matches = [a for a in self._assessments.values() if a.project_id == project_id]
            return copy.deepcopy(max(matches, key=lambda a: a.id)) if matches else None

    def record_assessment(self, assessment: RiskAssessment) -> tuple[Project, RiskAssessment]:
        with self._lock:
            project = self._projects.get(assessment.project_id)
            if project is None:
                raise NotFoundError(
                    f"Project {assessment.project_id} not found",
                    error_code=ErrorCode.PROJECT_NOT_FOUND,
                    resource_type="project",
                    resource_id=assessment.project_id,
                )
            stored = replace(
                copy.deepcopy(assessment),
                id=self._next_id("assessments"),
                created_at=datetime.now(),
            )
            updated = replace(project, **stored.project_updates())
            self._assessments[stored.id] = stored
            self._projects[project.id] = updated
            logger.info(
                f"Recorded assessment {stored.id} for project {project.id}: "
                f"{stored.overall_grade} ({stored.overall_score})"
            )
            return copy.deepcopy(updated), copy.deepcopy(stored)

    # --- Bookmarks ---

    def get_bookmarks_by_user_id(self, user_id: int) -> list[Bookmark]:
        with self._lock:
            return [copy.deepcopy(b) for b in self._bookmarks.values() if b.user_id == user_id]

    def create_bookmark(self, bookmark: Bookmark) -> Bookmark:
        with self._lock:
            if bookmark.project_id not in self._projects:
                raise NotFoundError(
                    f"Project {bookmark.project_id} not found",
                    error_code=ErrorCode.PROJECT_NOT_FOUND,
                    resource_type="project",
                    resource_id=bookmark.project_id,
                )
            if self.is_project_bookmarked(bookmark.user_id, bookmark.project_id):
                raise ConflictError("Project already bookmarked", ErrorCode.DUPLICATE_BOOKMARK)
            stored = replace(bookmark, id=self._next_id("bookmarks"), created_at=datetime.now())
            self._bookmarks[stored.id] = stored
            return copy.deepcopy(stored)

    def delete_bookmark(self, bookmark_id: int) -> bool:
        with self._lock:
            return self._bookmarks.pop(bookmark_id, None) is not None

    def is_project_bookmarked(self, user_id: int, project_id: int) -> bool:
        with self._lock:
            return any(
                b.user_id == user_id and b.project_id == project_id
                for b in self._bookmarks.values()
            )
