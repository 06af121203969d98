"""Seed a handful of sample campus events into the configured store.

Creates the default categories when missing, then adds sample events linked
to them by category name. Only useful against the SQL store; the memory
store is reset with the process.

Usage:
    STORE_BACKEND=sql python -m scripts.seed_sample_events
"""

import asyncio
import logging
from datetime import datetime, timedelta

from campus_events.dependencies.store import open_store
from campus_events.models.base import Base, get_engine
from campus_events.schemas import EventCreate

logger = logging.getLogger(__name__)

# (name, location, days from today, start hour, duration hours, featured, categories)
SAMPLE_EVENTS = [
    ("Intramural Soccer Finals", "North Campus Field", 2, 16, 2, True, ["Sports"]),
    ("Career Fair: Tech & Engineering", "Student Union Ballroom", 3, 10, 6, True, ["Professional", "Academic"]),
    ("Open Mic Night", "Campus Coffee House", 4, 20, 3, False, ["Arts", "Social"]),
    ("Lunar New Year Festival", "Main Quad", 6, 12, 5, True, ["Cultural", "Social"]),
    ("Research Symposium", "Science Library Auditorium", 8, 9, 4, False, ["Academic"]),
    ("Student Art Exhibition", "Fine Arts Gallery", 10, 18, 2, False, ["Arts"]),
]


async def seed() -> int:
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    today = datetime.now().replace(minute=0, second=0, microsecond=0)
    created = 0
    async with open_store() as store:
        await store.seed_default_categories()
        existing = {e.name for e in await store.get_all_events()}

        for name, location, days, hour, duration, featured, category_names in SAMPLE_EVENTS:
            if name in existing:
                continue
            category_ids = []
            for category_name in category_names:
                category = await store.get_category_by_name(category_name)
                if category:
                    category_ids.append(category.id)
            start = (today + timedelta(days=days)).replace(hour=hour)
            await store.create_event(
                EventCreate(
                    name=name,
                    description=f"{name} at {location}.",
                    location=location,
                    start_time=start,
                    end_time=start + timedelta(hours=duration),
                    featured=featured,
                    source="seed",
                    category_ids=category_ids,
                )
            )
            created += 1
    return created


def main():
    logging.basicConfig(level=logging.INFO)
    created = asyncio.run(seed())
    logger.info("Seeded %d sample events", created)


if __name__ == "__main__":
    main()
