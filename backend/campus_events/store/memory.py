"""In-process store backed by keyed dicts and append-only lists."""

import itertools
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any

from campus_events.errors import NotFoundError
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
from campus_events.store.base import EventStore


class MemoryStore(EventStore):
    """Reference store. Each instance is fully isolated, so tests build one per case.

    Records are copied on the way in and out; callers never hold a reference
    into the store's own state.
    """

    def __init__(self):
        self._categories: dict[int, CategoryRead] = {}
        self._events: dict[int, EventRead] = {}
        self._event_categories: dict[int, list[int]] = defaultdict(list)
        self._clubs: dict[int, ClubRead] = {}
        self._preferences: dict[int, UserPreferencesRead] = {}
        self._feedback: list[FeedbackRead] = []

        # Per-entity id sequences
        self._ids = defaultdict(lambda: itertools.count(1))

    def _next_id(self, entity: str) -> int:
        return next(self._ids[entity])

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    # --- Categories ---

    async def get_all_categories(self) -> list[CategoryRead]:
        return [c.model_copy() for c in self._categories.values()]

    async def get_category(self, category_id: int) -> CategoryRead | None:
        category = self._categories.get(category_id)
        return category.model_copy() if category else None

    async def get_category_by_name(self, name: str) -> CategoryRead | None:
        wanted = name.lower()
        for category in self._categories.values():
            if category.name.lower() == wanted:
                return category.model_copy()
        return None

    async def create_category(self, category: CategoryCreate) -> CategoryRead:
        created = CategoryRead(id=self._next_id("category"), **category.model_dump())
        self._categories[created.id] = created
        return created.model_copy()

    # --- Events ---

    async def get_all_events(self) -> list[EventRead]:
        return [e.model_copy() for e in self._events.values()]

    async def get_event(self, event_id: int) -> EventRead | None:
        event = self._events.get(event_id)
        return event.model_copy() if event else None

    async def get_event_with_categories(self, event_id: int) -> EventWithCategories | None:
        event = self._events.get(event_id)
        if event is None:
            return None
        categories = [
            self._categories[cid].model_copy()
            for cid in self._event_categories.get(event_id, [])
            if cid in self._categories
        ]
        return EventWithCategories(**event.model_dump(), categories=categories)

    async def get_featured_events(self, limit: int = 5) -> list[EventRead]:
        featured = [e for e in self._events.values() if e.featured]
        return [e.model_copy() for e in featured[:limit]]

    async def create_event(self, event: EventCreate) -> EventRead:
        for category_id in event.category_ids:
            if category_id not in self._categories:
                raise NotFoundError("Category", category_id)
        data = event.model_dump(exclude={"category_ids"})
        created = EventRead(id=self._next_id("event"), created_at=self._now(), **data)
        self._events[created.id] = created
        for category_id in event.category_ids:
            await self.add_event_category(created.id, category_id)
        return created.model_copy()

    async def add_event_category(self, event_id: int, category_id: int) -> None:
        if event_id not in self._events:
            raise NotFoundError("Event", event_id)
        if category_id not in self._categories:
            raise NotFoundError("Category", category_id)
        linked = self._event_categories[event_id]
        if category_id not in linked:
            linked.append(category_id)

    # --- Clubs ---

    async def get_all_clubs(self) -> list[ClubRead]:
        return [c.model_copy() for c in self._clubs.values()]

    async def get_club(self, club_id: int) -> ClubRead | None:
        club = self._clubs.get(club_id)
        return club.model_copy() if club else None

    async def get_featured_clubs(self, limit: int = 5) -> list[ClubRead]:
        featured = [c for c in self._clubs.values() if c.featured]
        return [c.model_copy() for c in featured[:limit]]

    async def create_club(self, club: ClubCreate) -> ClubRead:
        created = ClubRead(id=self._next_id("club"), created_at=self._now(), **club.model_dump())
        self._clubs[created.id] = created
        return created.model_copy()

    # --- Preferences ---

    async def get_user_preferences(self, user_id: int) -> UserPreferencesRead | None:
        prefs = self._preferences.get(user_id)
        return prefs.model_copy(deep=True) if prefs else None

    async def create_user_preferences(
        self, user_id: int, preferences: UserPreferencesBase
    ) -> UserPreferencesRead:
        created = UserPreferencesRead(
            id=self._next_id("preferences"),
            user_id=user_id,
            updated_at=self._now(),
            **preferences.model_dump(),
        )
        self._preferences[user_id] = created
        return created.model_copy(deep=True)

    async def update_user_preferences(self, user_id: int, changes: dict[str, Any]) -> UserPreferencesRead:
        existing = self._preferences.get(user_id)
        if existing is None:
            existing = await self.create_user_preferences(user_id, UserPreferencesBase())

        merged = UserPreferencesRead.model_validate(
            {**existing.model_dump(), **changes, "updated_at": self._now()}
        )
        self._preferences[user_id] = merged
        return merged.model_copy(deep=True)

    # --- Suggestion feedback ---

    async def create_suggestion_feedback(self, feedback: FeedbackCreate) -> FeedbackRead:
        created = FeedbackRead(
            id=self._next_id("feedback"),
            created_at=self._now(),
            **feedback.model_dump(),
        )
        self._feedback.append(created)
        return created.model_copy()

    async def get_suggestion_feedback_by_user(self, user_id: int) -> list[FeedbackRead]:
        return [f.model_copy() for f in self._feedback if f.user_id == user_id]
