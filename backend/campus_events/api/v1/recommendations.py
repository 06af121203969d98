"""Recommendation API endpoints."""

from fastapi import APIRouter, Depends, Query

from campus_events.config import get_settings
from campus_events.dependencies.store import get_store
from campus_events.schemas import ScoredEvent
from campus_events.services.recommendation_service import get_recommendations
from campus_events.store.base import EventStore

router = APIRouter(prefix="/recommendations", tags=["recommendations"])
settings = get_settings()


@router.get("", response_model=list[ScoredEvent])
async def list_recommendations(
    user_id: int = Query(..., alias="userId", gt=0, description="User to recommend events for"),
    limit: int = Query(
        settings.default_recommendation_limit,
        ge=1,
        description="Maximum number of events to return; values above the configured cap are clamped",
    ),
    store: EventStore = Depends(get_store),
):
    """Ranked events for a user, best first, each with its score and reason."""
    limit = min(limit, settings.max_recommendation_limit)
    return await get_recommendations(store, user_id, limit=limit, tz=settings.tzinfo)
