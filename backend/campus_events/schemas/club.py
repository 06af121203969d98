"""Pydantic schemas for Club model."""

from datetime import datetime

from campus_events.schemas.base import APIModel


class ClubBase(APIModel):
    name: str
    description: str = ""
    meeting_location: str | None = None
    featured: bool = False


class ClubCreate(ClubBase):
    pass


class ClubRead(ClubBase):
    id: int
    created_at: datetime | None = None
