"""Feedback service: append-only relevance signals on suggestions.

Records are stored for later tuning; the scoring service does not read them.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pydantic

from campus_events.errors import NotFoundError, ValidationError
from campus_events.schemas import FeedbackCreate, FeedbackRead
from campus_events.store.base import EventStore

logger = logging.getLogger(__name__)


def validate_feedback(payload: FeedbackCreate | Mapping[str, Any]) -> FeedbackCreate:
    """Coerce raw input into FeedbackCreate, raising ValidationError on bad shapes."""
    if isinstance(payload, FeedbackCreate):
        return payload
    try:
        return FeedbackCreate.model_validate(payload)
    except pydantic.ValidationError as exc:
        messages = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}" for err in exc.errors()
        )
        raise ValidationError(f"Invalid feedback: {messages}") from exc


async def record_feedback(
    store: EventStore,
    payload: FeedbackCreate | Mapping[str, Any],
) -> FeedbackRead:
    """Validate and append one feedback record. Duplicates are stored as separate records."""
    feedback = validate_feedback(payload)

    if feedback.event_id is not None and await store.get_event(feedback.event_id) is None:
        raise NotFoundError("Event", feedback.event_id)
    if feedback.club_id is not None and await store.get_club(feedback.club_id) is None:
        raise NotFoundError("Club", feedback.club_id)

    stored = await store.create_suggestion_feedback(feedback)
    logger.info(
        "Recorded %s feedback %s from user %s (relevant=%s)",
        stored.suggestion_type,
        stored.id,
        stored.user_id,
        stored.is_relevant,
    )
    return stored


async def get_feedback_for_user(store: EventStore, user_id: int) -> list[FeedbackRead]:
    """All feedback the user has submitted, in storage order."""
    return await store.get_suggestion_feedback_by_user(user_id)
