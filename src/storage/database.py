"""Relational storage backend on SQLAlchemy."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from src.db.base import Base
from src.db.engine import get_session_factory
from src.db.models import BookmarkRecord, ProjectRecord, RiskAssessmentRecord, UserRecord
from src.errors.config import ErrorCode
from src.errors.exceptions import ConflictError, NotFoundError, StorageError, ValidationError
from src.errors.validators import validate_project_fields
from src.esg.models import CATEGORY_IDS
from src.logging_config.performance import log_performance
from src.storage.base import Storage
from src.storage.models import (
    PROJECT_MUTABLE_FIELDS,
    Bookmark,
    Project,
    RiskAssessment,
    User,
)

logger = logging.getLogger(__name__)


def _user_from_row(row: UserRecord) -> User:
    return User(
        id=row.id,
        username=row.username,
        email=row.email,
        name=row.name,
        organization=row.organization,
        created_at=row.created_at,
    )


def _project_from_row(row: ProjectRecord) -> Project:
    return Project(
        id=row.id,
        name=row.name,
        description=row.description,
        country=row.country,
        region=row.region,
        category=row.category,
        size=row.size,
        funding=row.funding,
        environment_grade=row.environment_grade,
        social_grade=row.social_grade,
        governance_grade=row.governance_grade,
        risk_score=row.risk_score,
        risk_level=row.risk_level,
        details=dict(row.details or {}),
        image_url=row.image_url,
        contact_info=row.contact_info,
        created_at=row.created_at,
    )


def _assessment_from_row(row: RiskAssessmentRecord) -> RiskAssessment:
    return RiskAssessment(
        id=row.id,
        project_id=row.project_id,
        grades={cid: getattr(row, cid) for cid in CATEGORY_IDS},
        overall_score=row.overall_score,
        overall_grade=row.overall_grade,
        environment_grade=row.environment_grade,
        social_grade=row.social_grade,
        governance_grade=row.governance_grade,
        risk_level=row.risk_level,
        overall_notes=row.overall_notes or "",
        created_at=row.created_at,
    )


def _bookmark_from_row(row: BookmarkRecord) -> Bookmark:
    return Bookmark(
        id=row.id,
        user_id=row.user_id,
        project_id=row.project_id,
        created_at=row.created_at,
    )


class DatabaseStorage(Storage):
    """Storage backed by the tables in ``src.db.models``.

    Every public call runs in its own session and transaction. SQLAlchemy
    failures surface as StorageError; domain errors pass through.
    """

    def __init__(
        self,
        session_factory: Optional[sessionmaker] = None,
        engine: Optional[Engine] = None,
        create_tables: bool = False,
    ):
        self._session_factory = session_factory or get_session_factory(engine)
        if create_tables:
            Base.metadata.create_all(engine or self._session_factory.kw["bind"])

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        try:
            with self._session_factory() as session, session.begin():
                yield session
        except SQLAlchemyError as exc:
            logger.exception("Database operation failed")
            raise StorageError(f"Database operation failed: {type(exc).__name__}") from exc

    # --- Users ---

    def get_user(self, user_id: int) -> Optional[User]:
        with self._transaction() as session:
            row = session.get(UserRecord, user_id)
            return _user_from_row(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._transaction() as session:
            row = session.scalars(
                select(UserRecord).where(UserRecord.username == username)
            ).first()
            return _user_from_row(row) if row else None

    def create_user(self, user: User) -> User:
        with self._transaction() as session:
            exists = session.scalars(
                select(UserRecord.id).where(UserRecord.username == user.username)
            ).first()
            if exists is not None:
                raise ConflictError(f"Username '{user.username}' is already taken")
            row = UserRecord(
                username=user.username,
                email=user.email,
                name=user.name,
                organization=user.organization,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _user_from_row(row)

    # --- Projects ---

    def get_projects(self) -> list[Project]:
        with self._transaction() as session:
            rows = session.scalars(select(ProjectRecord).order_by(ProjectRecord.id))
            return [_project_from_row(r) for r in rows]

    def get_project_by_id(self, project_id: int) -> Optional[Project]:
        with self._transaction() as session:
            row = session.get(ProjectRecord, project_id)
            return _project_from_row(row) if row else None

    def get_projects_by_country(self, country: str) -> list[Project]:
        return self._projects_where(ProjectRecord.country == country)

    def get_projects_by_category(self, category: str) -> list[Project]:
        return self._projects_where(ProjectRecord.category == category)

    def get_projects_by_risk_level(self, risk_level: str) -> list[Project]:
        return self._projects_where(ProjectRecord.risk_level == risk_level)

    def _projects_where(self, condition) -> list[Project]:
        with self._transaction() as session:
            rows = session.scalars(
                select(ProjectRecord).where(condition).order_by(ProjectRecord.id)
            )
            return [_project_from_row(r) for r in rows]

    def create_project(self, project: Project) -> Project:
        validate_project_fields(project.to_dict())
        values = {k: v for k, v in project.to_dict().items() if k in PROJECT_MUTABLE_FIELDS}
        with self._transaction() as session:
            row = ProjectRecord(**values)
            session.add(row)
            session.flush()
            session.refresh(row)
            logger.info(f"Created project {row.id}: {row.name}")
            return _project_from_row(row)

    def update_project(self, project_id: int, **changes: Any) -> Optional[Project]:
        unknown = sorted(set(changes) - PROJECT_MUTABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown project fields: {', '.join(unknown)}")
        with self._transaction() as session:
            row = session.get(ProjectRecord, project_id)
            if row is None:
                return None
            for key, value in changes.items():
                setattr(row, key, value)
            validate_project_fields(_project_from_row(row).to_dict())
            session.flush()
            return _project_from_row(row)

    def delete_project(self, project_id: int) -> bool:
        with self._transaction() as session:
            row = session.get(ProjectRecord, project_id)
            if row is None:
                return False
            session.delete(row)
            logger.info(f"Deleted project {project_id}")
            return True

    # --- Assessments ---

    def get_risk_assessment_by_project_id(self, project_id: int) -> Optional[RiskAssessment]:
        with self._transaction() as session:
            row = session.scalars(
                select(RiskAssessmentRecord)
                .where(RiskAssessmentRecord.project_id == project_id)
                .order_by(RiskAssessmentRecord.id.desc())
            ).first()
            return _assessment_from_row(row) if row else None

    @log_performance()
    def record_assessment(self, assessment: RiskAssessment) -> tuple[Project, RiskAssessment]:
        with self._transaction() as session:
            project = session.get(ProjectRecord, assessment.project_id)
            if project is None:
                raise NotFoundError(
                    f"Project {assessment.project_id} not found",
                    error_code=ErrorCode.PROJECT_NOT_FOUND,
                    resource_type="project",
                    resource_id=assessment.project_id,
                )
            row = RiskAssessmentRecord(
                project_id=assessment.project_id,
                overall_score=assessment.overall_score,
                overall_grade=assessment.overall_grade,
                environment_grade=assessment.environment_grade,
                social_grade=assessment.social_grade,
                governance_grade=assessment.governance_grade,
                risk_level=assessment.risk_level,
                overall_notes=assessment.overall_notes,
                **{cid: assessment.grades[cid] for cid in CATEGORY_IDS},
            )
            session.add(row)
            for key, value in assessment.project_updates().items():
                setattr(project, key, value)
            session.flush()
            session.refresh(row)
            logger.info(
                f"Recorded assessment {row.id} for project {project.id}: "
                f"{row.overall_grade} ({row.overall_score})"
            )
            return _project_from_row(project), _assessment_from_row(row)

    # --- Bookmarks ---

    def get_bookmarks_by_user_id(self, user_id: int) -> list[Bookmark]:
        with self._transaction() as session:
            rows = session.scalars(
                select(BookmarkRecord)
                .where(BookmarkRecord.user_id == user_id)
                .order_by(BookmarkRecord.id)
            )
            return [_bookmark_from_row(r) for r in rows]

    def create_bookmark(self, bookmark: Bookmark) -> Bookmark:
        try:
            with self._session_factory() as session, session.begin():
                if session.get(ProjectRecord, bookmark.project_id) is None:
                    raise NotFoundError(
                        f"Project {bookmark.project_id} not found",
                        error_code=ErrorCode.PROJECT_NOT_FOUND,
                        resource_type="project",
                        resource_id=bookmark.project_id,
                    )
                row = BookmarkRecord(user_id=bookmark.user_id, project_id=bookmark.project_id)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _bookmark_from_row(row)
        except IntegrityError as exc:
            raise ConflictError("Project already bookmarked", ErrorCode.DUPLICATE_BOOKMARK) from exc
        except SQLAlchemyError as exc:
            logger.exception("Database operation failed")
            raise StorageError(f"Database operation failed: {type(exc).__name__}") from exc

    def delete_bookmark(self, bookmark_id: int) -> bool:
        with self._transaction() as session:
            row = session.get(BookmarkRecord, bookmark_id)
            if row is None:
                return False
            session.delete(row)
            return True

    def is_project_bookmarked(self, user_id: int, project_id: int) -> bool:
        with self._transaction() as session:
            found = session.scalars(
                select(BookmarkRecord.id).where(
                    BookmarkRecord.user_id == user_id,
                    BookmarkRecord.project_id == project_id,
                )
            ).first()
            return found is not None
