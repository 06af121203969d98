"""Initial schema for the campus events recommender.

Creates:
- categories: event categories (seeded defaults plus user-created)
- events: campus and external events
- event_categories: event <-> category association
- clubs: student clubs
- user_preferences: stated preferences used for recommendations
- ai_suggestion_feedback: append-only relevance feedback on suggestions

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
    # 1. categories
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), unique=True, nullable=False),
        sa.Column("color", sa.String(20), nullable=False),
        sa.Column("is_default", sa.Boolean, server_default=sa.text("false"), nullable=False),
    )

    # 2. events
    op.create_table(
        "events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("featured", sa.Boolean, server_default=sa.text("false"), nullable=False),
        sa.Column("organizer_id", sa.Integer),
        sa.Column("external_id", sa.String(255)),
        sa.Column("external_url", sa.Text),
        sa.Column("source", sa.String(50)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_events_featured", "events", ["featured"])

    # 3. event_categories
    op.create_table(
        "event_categories",
        sa.Column("event_id", sa.Integer, sa.ForeignKey("events.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("category_id", sa.Integer, sa.ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
    )

    # 4. clubs
    op.create_table(
        "clubs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), unique=True, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("meeting_location", sa.String(255)),
        sa.Column("featured", sa.Boolean, server_default=sa.text("false"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    # 5. user_preferences
    op.create_table(
        "user_preferences",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, unique=True, nullable=False),
        sa.Column("preferred_categories", sa.JSON, nullable=False),
        sa.Column("preferred_days_of_week", sa.JSON, nullable=False),
        sa.Column("preferred_time_of_day", sa.JSON, nullable=False),
        sa.Column("location_preference", sa.String(255)),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_user_preferences_user_id", "user_preferences", ["user_id"], unique=True)

    # 6. ai_suggestion_feedback
    op.create_table(
        "ai_suggestion_feedback",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, nullable=False),
        sa.Column("event_id", sa.Integer, sa.ForeignKey("events.id", ondelete="CASCADE")),
        sa.Column("club_id", sa.Integer, sa.ForeignKey("clubs.id", ondelete="CASCADE")),
        sa.Column("suggestion_type", sa.String(50), nullable=False),
        sa.Column("is_relevant", sa.Boolean),
        sa.Column("feedback_text", sa.Text),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_suggestion_feedback_user", "ai_suggestion_feedback", ["user_id"])


def downgrade() -> None:
    op.drop_table("ai_suggestion_feedback")
    op.drop_table("user_preferences")
    op.drop_table("clubs")
    op.drop_table("event_categories")
    op.drop_table("events")
    op.drop_table("categories")
