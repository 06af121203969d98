"""User preferences model: stated interests used by the recommendation scorer."""

from sqlalchemy import JSON, Column, DateTime, Integer, String, func

from campus_events.models.base import Base, IntegerIDMixin, utcnow


class UserPreferences(IntegerIDMixin, Base):
    __tablename__ = "user_preferences"

    # No FK to users: preferences are created for any id the caller supplies
    user_id = Column(Integer, unique=True, nullable=False, index=True)

    preferred_categories = Column(JSON, nullable=False, default=list)
    preferred_days_of_week = Column(JSON, nullable=False, default=list)
    preferred_time_of_day = Column(JSON, nullable=False, default=list)
    location_preference = Column(String(255))

    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )
