"""Suggestion feedback API endpoints."""

from fastapi import APIRouter, Depends, Query

from campus_events.dependencies.store import get_store
from campus_events.schemas import FeedbackCreate, FeedbackRead
from campus_events.services.feedback_service import get_feedback_for_user, record_feedback
from campus_events.store.base import EventStore

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", response_model=FeedbackRead, status_code=201)
async def create_feedback(
    payload: FeedbackCreate,
    store: EventStore = Depends(get_store),
):
    """Record a relevant / not relevant reaction to a suggestion."""
    return await record_feedback(store, payload)


@router.get("", response_model=list[FeedbackRead])
async def list_feedback(
    user_id: int = Query(..., alias="userId", gt=0),
    store: EventStore = Depends(get_store),
):
    """All feedback a user has submitted, oldest first."""
    return await get_feedback_for_user(store, user_id)
