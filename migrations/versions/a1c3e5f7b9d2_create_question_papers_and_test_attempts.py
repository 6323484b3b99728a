"""create question_papers and test_attempts tables

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-18 10:02:11.418530

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "a1c3e5f7b9d2"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONDocument = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "question_papers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("test_series_id", sa.Integer(), nullable=True),
        sa.Column("sections", JSONDocument, nullable=False),
        sa.Column("attempts", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_question_papers_id", "question_papers", ["id"])
    op.create_index(
        "ix_question_papers_test_series_id", "question_papers", ["test_series_id"]
    )

    op.create_table(
        "test_attempts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("test_series_id", sa.Integer(), nullable=False),
        sa.Column("paper_id", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("progress", JSONDocument, nullable=False),
        sa.Column("sections", JSONDocument, nullable=False),
        sa.Column("summary", JSONDocument, nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_active_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("total_time_spent", sa.Float(), nullable=False),
        sa.Column("remaining_time", sa.Float(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_test_attempts_id", "test_attempts", ["id"])
    op.create_index("ix_test_attempts_user_id", "test_attempts", ["user_id"])
    op.create_index(
        "ix_test_attempts_test_series_id", "test_attempts", ["test_series_id"]
    )
    op.create_index("ix_test_attempts_paper_id", "test_attempts", ["paper_id"])
    op.create_index("ix_test_attempts_status", "test_attempts", ["status"])
    op.create_index(
        "ix_test_attempts_last_active_at", "test_attempts", ["last_active_at"]
    )
    op.create_index("ix_test_attempts_started_at", "test_attempts", ["started_at"])
    op.create_index(
        "ix_test_attempts_lookup",
        "test_attempts",
        ["user_id", "test_series_id", "paper_id"],
    )
    # At most one in-progress attempt per (user, series, paper)
    op.create_index(
        "uq_test_attempts_in_progress",
        "test_attempts",
        ["user_id", "test_series_id", "paper_id"],
        unique=True,
        postgresql_where=sa.text("status = 'in-progress'"),
        sqlite_where=sa.text("status = 'in-progress'"),
    )


def downgrade() -> None:
    op.drop_index("uq_test_attempts_in_progress", table_name="test_attempts")
    op.drop_table("test_attempts")
    op.drop_table("question_papers")
