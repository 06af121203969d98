"""Abstract store contract consumed by the recommendation services."""

from abc import ABC, abstractmethod
from typing import Any

from campus_events.schemas import (
    CategoryCreate,
    CategoryRead,
    ClubCreate,
    ClubRead,
    EventCreate,
    EventRead,
    EventWithCategories,
    FeedbackCreate,
    FeedbackRead,
    UserPreferencesBase,
    UserPreferencesRead,
)

# Seeded into an empty store at startup
DEFAULT_CATEGORIES = [
    CategoryCreate(name="Sports", color="#4CAF50", is_default=True),
    CategoryCreate(name="Academic", color="#2196F3", is_default=True),
    CategoryCreate(name="Arts", color="#F44336", is_default=True),
    CategoryCreate(name="Cultural", color="#9C27B0", is_default=True),
    CategoryCreate(name="Professional", color="#FF9800", is_default=True),
    CategoryCreate(name="Social", color="#795548", is_default=True),
]


class EventStore(ABC):
    """Async keyed store for the catalog, preferences and suggestion feedback.

    Implementations return pydantic schema objects, never ORM rows, so the
    services work the same against every backend. Ids are assigned by the
    store and increase monotonically per entity type.
    """

    # --- Categories ---

    @abstractmethod
    async def get_all_categories(self) -> list[CategoryRead]: ...

    @abstractmethod
    async def get_category(self, category_id: int) -> CategoryRead | None: ...

    @abstractmethod
    async def get_category_by_name(self, name: str) -> CategoryRead | None:
        """Case-insensitive lookup."""

    @abstractmethod
    async def create_category(self, category: CategoryCreate) -> CategoryRead: ...

    # --- Events ---

    @abstractmethod
    async def get_all_events(self) -> list[EventRead]:
        """Every event, in insertion order."""

    @abstractmethod
    async def get_event(self, event_id: int) -> EventRead | None: ...

    @abstractmethod
    async def get_event_with_categories(self, event_id: int) -> EventWithCategories | None: ...

    @abstractmethod
    async def get_featured_events(self, limit: int = 5) -> list[EventRead]:
        """First `limit` featured events, in insertion order."""

    @abstractmethod
    async def create_event(self, event: EventCreate) -> EventRead: ...

    @abstractmethod
    async def add_event_category(self, event_id: int, category_id: int) -> None: ...

    # --- Clubs ---

    @abstractmethod
    async def get_all_clubs(self) -> list[ClubRead]: ...

    @abstractmethod
    async def get_club(self, club_id: int) -> ClubRead | None: ...

    @abstractmethod
    async def get_featured_clubs(self, limit: int = 5) -> list[ClubRead]:
        """First `limit` featured clubs, in insertion order."""

    @abstractmethod
    async def create_club(self, club: ClubCreate) -> ClubRead: ...

    # --- Preferences ---

    @abstractmethod
    async def get_user_preferences(self, user_id: int) -> UserPreferencesRead | None: ...

    @abstractmethod
    async def create_user_preferences(
        self, user_id: int, preferences: UserPreferencesBase
    ) -> UserPreferencesRead: ...

    @abstractmethod
    async def update_user_preferences(self, user_id: int, changes: dict[str, Any]) -> UserPreferencesRead:
        """Merge `changes` into the user's record and refresh `updated_at`.

        Creates the default record first when the user has none.
        """

    # --- Suggestion feedback ---

    @abstractmethod
    async def create_suggestion_feedback(self, feedback: FeedbackCreate) -> FeedbackRead: ...

    @abstractmethod
    async def get_suggestion_feedback_by_user(self, user_id: int) -> list[FeedbackRead]:
        """All feedback for the user, in storage order."""

    async def seed_default_categories(self) -> int:
        """Create any default category missing by name. Returns how many were added."""
        added = 0
        for category in DEFAULT_CATEGORIES:
            if await self.get_category_by_name(category.name) is None:
                await self.create_category(category)
                added += 1
        return added
