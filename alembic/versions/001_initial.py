"""Initial tables: users, chapters, progress, quiz_answers.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_user_id"), "users", ["user_id"], unique=True)

    op.create_table(
        "chapters",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("chapter_id", sa.String(128), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("video_url", sa.String(1024), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("quiz_json", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_chapters_chapter_id"), "chapters", ["chapter_id"], unique=True)
    op.create_index(op.f("ix_chapters_order"), "chapters", ["order"], unique=False)

    op.create_table(
        "progress",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("chapter_id", sa.String(128), nullable=False),
        sa.Column("video_progress", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("video_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("quiz_progress", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("quiz_answer_slots", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("quiz_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("chapter_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("write_count", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_accessed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "chapter_id", name="uq_progress_user_chapter"),
    )
    op.create_index(op.f("ix_progress_user_id"), "progress", ["user_id"], unique=False)

    op.create_table(
        "quiz_answers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("chapter_id", sa.String(128), nullable=False),
        sa.Column("question_index", sa.Integer(), nullable=False),
        sa.Column("answer", sa.Integer(), nullable=False),
        sa.Column("answered_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "chapter_id", "question_index", name="uq_quiz_answer_slot"),
    )
    op.create_index("ix_quiz_answers_user_chapter", "quiz_answers", ["user_id", "chapter_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_quiz_answers_user_chapter", table_name="quiz_answers")
    op.drop_table("quiz_answers")
    op.drop_index(op.f("ix_progress_user_id"), table_name="progress")
    op.drop_table("progress")
    op.drop_index(op.f("ix_chapters_order"), table_name="chapters")
    op.drop_index(op.f("ix_chapters_chapter_id"), table_name="chapters")
    op.drop_table("chapters")
    op.drop_index(op.f("ix_users_user_id"), table_name="users")
    op.drop_table("users")
