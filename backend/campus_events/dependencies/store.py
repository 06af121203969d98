"""Store dependency for FastAPI routes."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from campus_events.config import get_settings
from campus_events.models.base import get_db
from campus_events.store.base import EventStore
from campus_events.store.memory import MemoryStore
from campus_events.store.sql import SqlStore

# Process-wide instance used only when store_backend == "memory"
_memory_store: MemoryStore | None = None


def get_memory_store() -> MemoryStore:
    """Return the shared MemoryStore instance."""
    global _memory_store
    if _memory_store is None:
        _memory_store = MemoryStore()
    return _memory_store


@asynccontextmanager
async def open_store() -> AsyncGenerator[EventStore, None]:
    """Open the configured store. SQL sessions commit on success and roll back on error."""
    settings = get_settings()
    if settings.store_backend == "sql":
        async with asynccontextmanager(get_db)() as session:
            yield SqlStore(session, timeout=settings.store_timeout)
    else:
        yield get_memory_store()


async def get_store() -> AsyncGenerator[EventStore, None]:
    """FastAPI dependency yielding the configured store. Tests override this."""
    async with open_store() as store:
        yield store
