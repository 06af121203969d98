"""Pydantic schemas package."""

from campus_events.schemas.category import (
    CategoryBase,
    CategoryCreate,
    CategoryRead,
)
from campus_events.schemas.club import (
    ClubBase,
    ClubCreate,
    ClubRead,
)
from campus_events.schemas.event import (
    EventBase,
    EventCategoryCreate,
    EventCategoryLink,
    EventCreate,
    EventRead,
    EventWithCategories,
    ScoredEvent,
)
from campus_events.schemas.feedback import (
    FeedbackCreate,
    FeedbackRead,
)
from campus_events.schemas.preferences import (
    UserPreferencesBase,
    UserPreferencesRead,
    UserPreferencesUpdate,
)

__all__ = [
    # Category
    "CategoryBase",
    "CategoryCreate",
    "CategoryRead",
    # Club
    "ClubBase",
    "ClubCreate",
    "ClubRead",
    # Event
    "EventBase",
    "EventCategoryCreate",
    "EventCategoryLink",
    "EventCreate",
    "EventRead",
    "EventWithCategories",
    "ScoredEvent",
    # Feedback
    "FeedbackCreate",
    "FeedbackRead",
    # Preferences
    "UserPreferencesBase",
    "UserPreferencesRead",
    "UserPreferencesUpdate",
]
