"""SQLAlchemy-backed store.

Every public call runs under a single bounded timeout. A timeout surfaces as
StoreUnavailable, any SQLAlchemy failure as StoreError; neither is retried.
"""

import asyncio
import functools
import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import func, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from campus_events.errors import NotFoundError, StoreError, StoreUnavailable
from campus_events.models.club import Club
from campus_events.models.event import Category, Event, event_categories
from campus_events.models.suggestion_feedback import AiSuggestionFeedback
from campus_events.models.user_preferences import UserPreferences
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

logger = logging.getLogger(__name__)

_PREFERENCE_FIELDS = tuple(UserPreferencesBase.model_fields)


def _guarded(method):
    """Run a store call under the store timeout and translate failures."""

    @functools.wraps(method)
    async def wrapper(self: "SqlStore", *args, **kwargs):
        try:
            return await asyncio.wait_for(method(self, *args, **kwargs), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Store call %s timed out after %.1fs", method.__name__, self.timeout)
            raise StoreUnavailable(f"{method.__name__} timed out after {self.timeout}s") from exc
        except SQLAlchemyError as exc:
            logger.exception("Store call %s failed", method.__name__)
            raise StoreError(f"{method.__name__} failed: {exc}") from exc

    return wrapper


class SqlStore(EventStore):
    """Store over one AsyncSession. The caller owns commit/rollback."""

    def __init__(self, session: AsyncSession, timeout: float | None = 5.0):
        self.session = session
        self.timeout = timeout

    # --- Categories ---

    @_guarded
    async def get_all_categories(self) -> list[CategoryRead]:
        result = await self.session.execute(select(Category).order_by(Category.id))
        return [CategoryRead.model_validate(c) for c in result.scalars().all()]

    @_guarded
    async def get_category(self, category_id: int) -> CategoryRead | None:
        category = await self.session.get(Category, category_id)
        return CategoryRead.model_validate(category) if category else None

    @_guarded
    async def get_category_by_name(self, name: str) -> CategoryRead | None:
        result = await self.session.execute(
            select(Category).where(func.lower(Category.name) == name.lower())
        )
        category = result.scalars().first()
        return CategoryRead.model_validate(category) if category else None

    @_guarded
    async def create_category(self, category: CategoryCreate) -> CategoryRead:
        row = Category(**category.model_dump())
        self.session.add(row)
        await self.session.flush()
        return CategoryRead.model_validate(row)

    # --- Events ---

    @_guarded
    async def get_all_events(self) -> list[EventRead]:
        result = await self.session.execute(select(Event).order_by(Event.id))
        return [EventRead.model_validate(e) for e in result.scalars().all()]

    @_guarded
    async def get_event(self, event_id: int) -> EventRead | None:
        event = await self.session.get(Event, event_id)
        return EventRead.model_validate(event) if event else None

    @_guarded
    async def get_event_with_categories(self, event_id: int) -> EventWithCategories | None:
        result = await self.session.execute(
            select(Event)
            .options(selectinload(Event.categories))
            .where(Event.id == event_id)
            .execution_options(populate_existing=True)
        )
        event = result.scalar_one_or_none()
        return EventWithCategories.model_validate(event) if event else None

    @_guarded
    async def get_featured_events(self, limit: int = 5) -> list[EventRead]:
        result = await self.session.execute(
            select(Event).where(Event.featured.is_(True)).order_by(Event.id).limit(limit)
        )
        return [EventRead.model_validate(e) for e in result.scalars().all()]

    @_guarded
    async def create_event(self, event: EventCreate) -> EventRead:
        row = Event(**event.model_dump(exclude={"category_ids"}))
        self.session.add(row)
        await self.session.flush()
        for category_id in event.category_ids:
            await self._link_category(row.id, category_id)
        return EventRead.model_validate(row)

    @_guarded
    async def add_event_category(self, event_id: int, category_id: int) -> None:
        if await self.session.get(Event, event_id) is None:
            raise NotFoundError("Event", event_id)
        await self._link_category(event_id, category_id)

    async def _link_category(self, event_id: int, category_id: int) -> None:
        if await self.session.get(Category, category_id) is None:
            raise NotFoundError("Category", category_id)
        existing = await self.session.execute(
            select(event_categories.c.event_id).where(
                event_categories.c.event_id == event_id,
                event_categories.c.category_id == category_id,
            )
        )
        if existing.first() is None:
            await self.session.execute(
                insert(event_categories).values(event_id=event_id, category_id=category_id)
            )

    # --- Clubs ---

    @_guarded
    async def get_all_clubs(self) -> list[ClubRead]:
        result = await self.session.execute(select(Club).order_by(Club.id))
        return [ClubRead.model_validate(c) for c in result.scalars().all()]

    @_guarded
    async def get_club(self, club_id: int) -> ClubRead | None:
        club = await self.session.get(Club, club_id)
        return ClubRead.model_validate(club) if club else None

    @_guarded
    async def get_featured_clubs(self, limit: int = 5) -> list[ClubRead]:
        result = await self.session.execute(
            select(Club).where(Club.featured.is_(True)).order_by(Club.id).limit(limit)
        )
        return [ClubRead.model_validate(c) for c in result.scalars().all()]

    @_guarded
    async def create_club(self, club: ClubCreate) -> ClubRead:
        row = Club(**club.model_dump())
        self.session.add(row)
        await self.session.flush()
        return ClubRead.model_validate(row)

    # --- Preferences ---

    async def _preferences_row(self, user_id: int) -> UserPreferences | None:
        result = await self.session.execute(
            select(UserPreferences).where(UserPreferences.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def _insert_preferences(self, user_id: int, preferences: UserPreferencesBase) -> UserPreferences:
        row = UserPreferences(
            user_id=user_id,
            updated_at=datetime.now(timezone.utc),
            **preferences.model_dump(),
        )
        self.session.add(row)
        await self.session.flush()
        return row

    @_guarded
    async def get_user_preferences(self, user_id: int) -> UserPreferencesRead | None:
        row = await self._preferences_row(user_id)
        return UserPreferencesRead.model_validate(row) if row else None

    @_guarded
    async def create_user_preferences(
        self, user_id: int, preferences: UserPreferencesBase
    ) -> UserPreferencesRead:
        row = await self._insert_preferences(user_id, preferences)
        return UserPreferencesRead.model_validate(row)

    @_guarded
    async def update_user_preferences(self, user_id: int, changes: dict[str, Any]) -> UserPreferencesRead:
        row = await self._preferences_row(user_id)
        if row is None:
            row = await self._insert_preferences(user_id, UserPreferencesBase())

        current = UserPreferencesRead.model_validate(row).model_dump()
        merged = UserPreferencesRead.model_validate(
            {**current, **changes, "updated_at": datetime.now(timezone.utc)}
        )
        for field in _PREFERENCE_FIELDS:
            setattr(row, field, getattr(merged, field))
        row.updated_at = merged.updated_at
        await self.session.flush()
        return merged

    # --- Suggestion feedback ---

    @_guarded
    async def create_suggestion_feedback(self, feedback: FeedbackCreate) -> FeedbackRead:
        row = AiSuggestionFeedback(**feedback.model_dump())
        self.session.add(row)
        await self.session.flush()
        return FeedbackRead.model_validate(row)

    @_guarded
    async def get_suggestion_feedback_by_user(self, user_id: int) -> list[FeedbackRead]:
        result = await self.session.execute(
            select(AiSuggestionFeedback)
            .where(AiSuggestionFeedback.user_id == user_id)
            .order_by(AiSuggestionFeedback.id)
        )
        return [FeedbackRead.model_validate(f) for f in result.scalars().all()]
