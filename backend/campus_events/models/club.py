"""Club model: only the fields suggestion feedback needs to reference."""

from sqlalchemy import Boolean, Column, String, Text

from campus_events.models.base import Base, IntegerIDMixin, TimestampMixin


class Club(IntegerIDMixin, TimestampMixin, Base):
    __tablename__ = "clubs"

    name = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=False, default="")
    meeting_location = Column(String(255))
    featured = Column(Boolean, default=False, nullable=False)
