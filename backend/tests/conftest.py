"""Shared test fixtures for the campus events backend."""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from campus_events.dependencies.store import get_store
from campus_events.main import app
from campus_events.schemas import EventCreate
from campus_events.store.memory import MemoryStore

# Default category ids in a freshly seeded store
SPORTS, ACADEMIC, ARTS, CULTURAL, PROFESSIONAL, SOCIAL = range(1, 7)

# 2026-03-02 is a Monday
MONDAY_MORNING = datetime(2026, 3, 2, 10, 0)


@pytest_asyncio.fixture
async def store() -> MemoryStore:
    """Isolated store with the default categories seeded."""
    store = MemoryStore()
    await store.seed_default_categories()
    return store


@pytest.fixture
def add_event(store: MemoryStore):
    """Factory adding an event to the test store."""

    async def _add(
        name: str = "Event",
        *,
        start: datetime = MONDAY_MORNING,
        hours: int = 2,
        location: str = "Main Hall",
        featured: bool = False,
        category_ids: tuple[int, ...] = (),
    ):
        return await store.create_event(
            EventCreate(
                name=name,
                description=f"{name} description",
                location=location,
                start_time=start,
                end_time=start + timedelta(hours=hours),
                featured=featured,
                category_ids=list(category_ids),
            )
        )

    return _add


@pytest_asyncio.fixture
async def client(store: MemoryStore) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client with the test store injected."""

    async def override_get_store():
        yield store

    app.dependency_overrides[get_store] = override_get_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
