"""Event, category and event-category association models."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from campus_events.models.base import Base, IntegerIDMixin, TimestampMixin

event_categories = Table(
    "event_categories",
    Base.metadata,
    Column("event_id", Integer, ForeignKey("events.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)


class Category(IntegerIDMixin, Base):
    __tablename__ = "categories"

    name = Column(String(100), unique=True, nullable=False)
    color = Column(String(20), nullable=False)
    is_default = Column(Boolean, default=False, nullable=False)


class Event(IntegerIDMixin, TimestampMixin, Base):
    __tablename__ = "events"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    location = Column(String(255), nullable=False, default="")
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=False)
    featured = Column(Boolean, default=False, nullable=False, index=True)
    organizer_id = Column(Integer)

    # External events
    external_id = Column(String(255))
    external_url = Column(Text)
    source = Column(String(50))

    # Relationships
    categories = relationship("Category", secondary=event_categories, order_by="Category.id", lazy="selectin")
