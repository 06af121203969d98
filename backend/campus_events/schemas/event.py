"""Pydantic schemas for Event model and scored recommendations."""

from datetime import datetime

from pydantic import Field, model_validator

from campus_events.schemas.base import APIModel
from campus_events.schemas.category import CategoryRead


class EventBase(APIModel):
    """Base fields for event."""

    name: str
    description: str = ""
    location: str = ""
    start_time: datetime
    end_time: datetime
    featured: bool = False
    organizer_id: int | None = None
    external_id: str | None = None
    external_url: str | None = None
    source: str | None = None


class EventCreate(EventBase):
    """Input for creating an event with its category associations."""

    category_ids: list[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_times(self) -> "EventCreate":
        if self.start_time > self.end_time:
            raise ValueError("start_time must not be after end_time")
        return self


class EventRead(EventBase):
    """Full event output."""

    id: int
    created_at: datetime | None = None


class EventWithCategories(EventRead):
    """Event with its resolved categories."""

    categories: list[CategoryRead] = Field(default_factory=list)


class ScoredEvent(EventRead):
    """Event annotated with its relevance to a user. Never persisted."""

    relevance_score: float
    matched_preferences: list[str]
    suggested_reason: str


class EventCategoryLink(APIModel):
    """Association of one category with one event."""

    event_id: int
    category_id: int


class EventCategoryCreate(APIModel):
    """Input for linking an existing category to an event."""

    category_id: int
