"""Storage Interface.

Repository abstraction over projects, assessments, users and bookmarks.
Two interchangeable backends implement it: MemStorage and DatabaseStorage.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from src.storage.models import Bookmark, Project, RiskAssessment, User


class Storage(ABC):
    """Abstract persistence backend."""

    # --- Users ---

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Persist a new user.

        Raises:
            ConflictError: If the username is taken.
        """

    # --- Projects ---

    @abstractmethod
    def get_projects(self) -> list[Project]:
        """All projects, oldest first."""

    @abstractmethod
    def get_project_by_id(self, project_id: int) -> Optional[Project]:
        ...

    def get_projects_by_country(self, country: str) -> list[Project]:
        return [p for p in self.get_projects() if p.country == country]

    def get_projects_by_category(self, category: str) -> list[Project]:
        return [p for p in self.get_projects() if p.category == category]

    def get_projects_by_risk_level(self, risk_level: str) -> list[Project]:
        return [p for p in self.get_projects() if p.risk_level == risk_level]

    @abstractmethod
    def create_project(self, project: Project) -> Project:
        """Persist a new project and return it with its id assigned.

        Raises:
            ValidationError: If a required field is blank.
        """

    @abstractmethod
    def update_project(self, project_id: int, **changes: Any) -> Optional[Project]:
        """Apply field changes; None if the project does not exist.

        Raises:
            ValidationError: If a change names an unknown field.
        """

    @abstractmethod
    def delete_project(self, project_id: int) -> bool:
        """Delete a project with its assessments and bookmarks."""

    # --- Assessments ---

    @abstractmethod
    def get_risk_assessment_by_project_id(self, project_id: int) -> Optional[RiskAssessment]:
        """Latest assessment of a project."""

    @abstractmethod
    def record_assessment(self, assessment: RiskAssessment) -> tuple[Project, RiskAssessment]:
        """Store an assessment and copy its derived fields onto the project.

        Both writes happen together or not at all.

        Raises:
            NotFoundError: If the project does not exist.
        """

    # --- Bookmarks ---

    @abstractmethod
    def get_bookmarks_by_user_id(self, user_id: int) -> list[Bookmark]:
        ...

    @abstractmethod
    def create_bookmark(self, bookmark: Bookmark) -> Bookmark:
        """Persist a bookmark.

        Raises:
            NotFoundError: If the project does not exist.
            ConflictError: If the user already bookmarked the project.
        """

    @abstractmethod
    def delete_bookmark(self, bookmark_id: int) -> bool:
        ...

    @abstractmethod
    def is_project_bookmarked(self, user_id: int, project_id: int) -> bool:
        ...
