"""Initial schema - users, projects, risk assessments, bookmarks.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CATEGORY_COLUMNS = (
    "project_type",
    "energy_use",
    "resource_use",
    "pollution_waste",
    "biodiversity_impact",
    "climate_risk",
    "labor_practices",
    "community_impact",
    "human_rights",
    "responsible_operation",
    "corruption_ethics",
)


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(200), nullable=True),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("organization", sa.String(200), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_index("ix_users_username", "users", ["username"])

    # --- projects ---
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("country", sa.String(100), nullable=False),
        sa.Column("region", sa.String(100), nullable=True),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("size", sa.String(50), nullable=False),
        sa.Column("funding", sa.String(50), nullable=True),
        sa.Column("environment_grade", sa.String(2), nullable=True),
        sa.Column("social_grade", sa.String(2), nullable=True),
        sa.Column("governance_grade", sa.String(2), nullable=True),
        sa.Column("risk_score", sa.Integer(), nullable=True),
        sa.Column("risk_level", sa.String(20), nullable=True),
        sa.Column("details", sa.JSON(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("contact_info", sa.String(200), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_country", "projects", ["country"])
    op.create_index("ix_projects_category", "projects", ["category"])
    op.create_index("ix_projects_risk_level", "projects", ["risk_level"])

    # --- risk_assessments ---
    op.create_table(
        "risk_assessments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        *[sa.Column(name, sa.String(1), nullable=False) for name in CATEGORY_COLUMNS],
        sa.Column("overall_grade", sa.String(1), nullable=False),
        sa.Column("overall_score", sa.Integer(), nullable=False),
        sa.Column("environment_grade", sa.String(1), nullable=False),
        sa.Column("social_grade", sa.String(1), nullable=False),
        sa.Column("governance_grade", sa.String(1), nullable=False),
        sa.Column("risk_level", sa.String(20), nullable=False),
        sa.Column("overall_notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_risk_assessments_project", "risk_assessments", ["project_id", "id"]
    )

    # --- bookmarks ---
    op.create_table(
        "bookmarks",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "project_id", name="uq_bookmark_user_project"),
    )
    op.create_index("ix_bookmarks_user_id", "bookmarks", ["user_id"])


def downgrade() -> None:
    op.drop_table("bookmarks")
    op.drop_table("risk_assessments")
    op.drop_table("projects")
    op.drop_table("users")
