"""User preference API endpoints."""

from fastapi import APIRouter, Depends, Path

from campus_events.dependencies.store import get_store
from campus_events.schemas import UserPreferencesRead, UserPreferencesUpdate
from campus_events.services.preference_service import resolve_preferences, update_preferences
from campus_events.store.base import EventStore

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("/{user_id}", response_model=UserPreferencesRead)
async def get_preferences(
    user_id: int = Path(..., gt=0),
    store: EventStore = Depends(get_store),
):
    """Get a user's preferences, creating empty defaults on first access."""
    return await resolve_preferences(store, user_id)


@router.put("/{user_id}", response_model=UserPreferencesRead)
async def replace_preferences(
    payload: UserPreferencesUpdate,
    user_id: int = Path(..., gt=0),
    store: EventStore = Depends(get_store),
):
    """Replace a user's preferences. Omitted fields are reset to empty."""
    return await update_preferences(store, user_id, payload, replace=True)


@router.patch("/{user_id}", response_model=UserPreferencesRead)
async def patch_preferences(
    payload: UserPreferencesUpdate,
    user_id: int = Path(..., gt=0),
    store: EventStore = Depends(get_store),
):
    """Merge the supplied fields into a user's preferences."""
    return await update_preferences(store, user_id, payload)
