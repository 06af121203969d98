"""Base database configuration and mixins."""

from datetime import datetime, timezone
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy import Column, DateTime, Integer, func
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, declared_attr

from campus_events.config import get_settings


@lru_cache
def get_engine() -> AsyncEngine:
    """Async engine for the SQL store, created on first use."""
    settings = get_settings()
    kwargs = {"echo": settings.debug}
    if settings.database_url.startswith("postgresql"):
        kwargs.update(pool_size=10, max_overflow=20, pool_timeout=30)
    return create_async_engine(settings.database_url, **kwargs)


@lru_cache
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


class Base(DeclarativeBase):
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )


class IntegerIDMixin:
    id = Column(Integer, primary_key=True, autoincrement=True)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with get_sessionmaker()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
