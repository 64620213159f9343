"""SQLAlchemy ORM models for the ESG tracker.

Tables:
- users: Accounts that own bookmarks
- projects: Tracked projects with denormalized pillar grades and risk fields
- risk_assessments: One row per grading of a project (latest wins)
- bookmarks: User -> project bookmarks
"""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from src.db.base import Base


class UserRecord(Base):
    """Application user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(200))
    name = Column(String(200))
    organization = Column(String(200))
    created_at = Column(DateTime, server_default=func.now())


class ProjectRecord(Base):
    """Tracked project. Pillar grades and risk fields are copies of the latest assessment."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    country = Column(String(100), nullable=False, index=True)
    region = Column(String(100))
    category = Column(String(100), nullable=False, index=True)
    size = Column(String(50), nullable=False)
    funding = Column(String(50))

    # Denormalized from the latest assessment
    environment_grade = Column(String(2))
    social_grade = Column(String(2))
    governance_grade = Column(String(2))
    risk_score = Column(Integer)
    risk_level = Column(String(20), index=True)

    details = Column(JSON)
    image_url = Column(Text)
    contact_info = Column(String(200))
    created_at = Column(DateTime, server_default=func.now())

    assessments = relationship(
        "RiskAssessmentRecord",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="RiskAssessmentRecord.id",
    )
    bookmarks = relationship("BookmarkRecord", cascade="all, delete-orphan")


class RiskAssessmentRecord(Base):
    """Graded ESG assessment of a project."""

    __tablename__ = "risk_assessments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)

    # One letter grade per category
    project_type = Column(String(1), nullable=False)
    energy_use = Column(String(1), nullable=False)
    resource_use = Column(String(1), nullable=False)
    pollution_waste = Column(String(1), nullable=False)
    biodiversity_impact = Column(String(1), nullable=False)
    climate_risk = Column(String(1), nullable=False)
    labor_practices = Column(String(1), nullable=False)
    community_impact = Column(String(1), nullable=False)
    human_rights = Column(String(1), nullable=False)
    responsible_operation = Column(String(1), nullable=False)
    corruption_ethics = Column(String(1), nullable=False)

    overall_grade = Column(String(1), nullable=False)
    overall_score = Column(Integer, nullable=False)
    environment_grade = Column(String(1), nullable=False)
    social_grade = Column(String(1), nullable=False)
    governance_grade = Column(String(1), nullable=False)
    risk_level = Column(String(20), nullable=False)
    overall_notes = Column(Text)
    created_at = Column(DateTime, server_default=func.now())

    project = relationship("ProjectRecord", back_populates="assessments")

    __table_args__ = (
        Index("ix_risk_assessments_project", "project_id", "id"),
    )


class BookmarkRecord(Base):
    """A user's bookmark on a project."""

    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "project_id", name="uq_bookmark_user_project"),
    )
