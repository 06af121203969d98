"""Event and category catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from campus_events.dependencies.store import get_store
from campus_events.schemas import (
    CategoryCreate,
    CategoryRead,
    EventCategoryCreate,
    EventCategoryLink,
    EventCreate,
    EventRead,
    EventWithCategories,
)
from campus_events.store.base import EventStore

router = APIRouter(tags=["events"])


@router.get("/events", response_model=list[EventRead])
async def list_events(store: EventStore = Depends(get_store)):
    """All events in catalog order."""
    return await store.get_all_events()


@router.get("/events/featured", response_model=list[EventRead])
async def list_featured_events(
    limit: int = Query(5, ge=1, le=50),
    store: EventStore = Depends(get_store),
):
    """Featured events in catalog order."""
    return await store.get_featured_events(limit)


@router.get("/events/{event_id}", response_model=EventWithCategories)
async def get_event(
    event_id: int,
    store: EventStore = Depends(get_store),
):
    """Get a single event with its categories."""
    event = await store.get_event_with_categories(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.post("/events", response_model=EventRead, status_code=201)
async def create_event(
    payload: EventCreate,
    store: EventStore = Depends(get_store),
):
    """Add an event to the catalog. Unknown category ids are a 404."""
    return await store.create_event(payload)


@router.post("/events/{event_id}/categories", response_model=EventCategoryLink, status_code=201)
async def add_event_category(
    event_id: int,
    payload: EventCategoryCreate,
    store: EventStore = Depends(get_store),
):
    """Link an existing category to an event. Linking twice is a no-op."""
    await store.add_event_category(event_id, payload.category_id)
    return EventCategoryLink(event_id=event_id, category_id=payload.category_id)


@router.get("/categories", response_model=list[CategoryRead])
async def list_categories(store: EventStore = Depends(get_store)):
    """All categories."""
    return await store.get_all_categories()


@router.post("/categories", response_model=CategoryRead, status_code=201)
async def create_category(
    payload: CategoryCreate,
    store: EventStore = Depends(get_store),
):
    if await store.get_category_by_name(payload.name):
        raise HTTPException(status_code=409, detail=f"Category {payload.name!r} already exists")
    return await store.create_category(payload)
