"""Pydantic schemas for UserPreferences.

Preference values are normalised here so the scorer never sees malformed
shapes: weekday names are checked and title-cased, time-of-day buckets are
lower-cased, duplicates are dropped and a blank location means no preference.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from campus_events.schemas.base import APIModel

TimeOfDay = Literal["morning", "afternoon", "evening", "night"]

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_WEEKDAY_LOOKUP = {day.lower(): day for day in WEEKDAYS}


class UserPreferencesBase(APIModel):
    """Preference fields with their empty defaults."""

    preferred_categories: list[int] = Field(default_factory=list)
    preferred_days_of_week: list[str] = Field(default_factory=list)
    preferred_time_of_day: list[TimeOfDay] = Field(default_factory=list)
    location_preference: str | None = None

    @field_validator("preferred_categories")
    @classmethod
    def _dedupe_categories(cls, value: list[int]) -> list[int]:
        return list(dict.fromkeys(value))

    @field_validator("preferred_days_of_week")
    @classmethod
    def _normalize_days(cls, value: list[str]) -> list[str]:
        days = []
        for raw in value:
            day = _WEEKDAY_LOOKUP.get(raw.strip().lower())
            if day is None:
                raise ValueError(f"unknown day of week: {raw!r}")
            days.append(day)
        return list(dict.fromkeys(days))

    @field_validator("preferred_time_of_day", mode="before")
    @classmethod
    def _normalize_times(cls, value):
        if isinstance(value, list):
            value = [v.strip().lower() if isinstance(v, str) else v for v in value]
            return list(dict.fromkeys(value))
        return value

    @field_validator("location_preference")
    @classmethod
    def _blank_location(cls, value: str | None) -> str | None:
        """Trim surrounding whitespace; a blank value clears the preference."""
        if value is None or not value.strip():
            return None
        return value.strip()


class UserPreferencesUpdate(UserPreferencesBase):
    """Partial update. Only fields present in the request are applied."""


class UserPreferencesRead(UserPreferencesBase):
    """Stored preferences output."""

    id: int
    user_id: int
    updated_at: datetime
