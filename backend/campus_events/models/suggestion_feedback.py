"""AI suggestion feedback model: append-only relevance signals on recommendations."""

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String, Text

from campus_events.models.base import Base, IntegerIDMixin, TimestampMixin


class AiSuggestionFeedback(IntegerIDMixin, TimestampMixin, Base):
    __tablename__ = "ai_suggestion_feedback"

    user_id = Column(Integer, nullable=False)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"))
    club_id = Column(Integer, ForeignKey("clubs.id", ondelete="CASCADE"))
    suggestion_type = Column(String(50), nullable=False)  # event_recommendation, club_recommendation, ...
    is_relevant = Column(Boolean)
    feedback_text = Column(Text)

    __table_args__ = (
        Index("idx_suggestion_feedback_user", "user_id"),
    )
