"""Recommendation service: ranks the event catalog for one user.

Users with no preferred categories get the featured events at a flat score
(the fallback branch). Everyone else gets every event in the catalog scored
by the scoring service, sorted by score and truncated to `limit`. Past events
are not filtered out.
"""

import logging
from datetime import tzinfo

from campus_events.errors import ValidationError
from campus_events.schemas import EventRead, EventWithCategories, ScoredEvent
from campus_events.services.preference_service import resolve_preferences
from campus_events.services.scoring_service import FACET_FEATURED, score_event
from campus_events.store.base import EventStore

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5

FALLBACK_SCORE = 0.5
FALLBACK_REASON = "This is a featured event that might interest you."


async def get_recommendations(
    store: EventStore,
    user_id: int,
    limit: int = DEFAULT_LIMIT,
    tz: tzinfo | None = None,
) -> list[ScoredEvent]:
    """Get up to `limit` recommended events for a user, best first."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValidationError(f"limit must be a positive integer, got {limit!r}")

    preferences = await resolve_preferences(store, user_id)

    if not preferences.preferred_categories:
        featured = await store.get_featured_events(limit)
        logger.debug("User %s has no preferred categories, returning %d featured events", user_id, len(featured))
        return [_fallback(event) for event in featured]

    candidates = await gather_candidates(store)
    scored = []
    for event in candidates:
        score, matched, reason = score_event(event, preferences, tz)
        scored.append(
            ScoredEvent(
                **event.model_dump(exclude={"categories"}),
                relevance_score=score,
                matched_preferences=matched,
                suggested_reason=reason,
            )
        )

    ranked = rank(scored, limit)
    logger.debug("Ranked %d candidates for user %s, returning %d", len(scored), user_id, len(ranked))
    return ranked


async def gather_candidates(store: EventStore) -> list[EventWithCategories]:
    """Every event in the store, with its categories resolved, in store order."""
    candidates = []
    for event in await store.get_all_events():
        with_categories = await store.get_event_with_categories(event.id)
        if with_categories is None:
            # Removed between the two reads; score it as uncategorised
            with_categories = EventWithCategories(**event.model_dump())
        candidates.append(with_categories)
    return candidates


def rank(scored: list[ScoredEvent], limit: int) -> list[ScoredEvent]:
    """Sort descending by score and truncate. Ties keep candidate order (sorted() is stable)."""
    return sorted(scored, key=lambda e: e.relevance_score, reverse=True)[:limit]


def _fallback(event: EventRead) -> ScoredEvent:
    return ScoredEvent(
        **event.model_dump(),
        relevance_score=FALLBACK_SCORE,
        matched_preferences=[FACET_FEATURED],
        suggested_reason=FALLBACK_REASON,
    )
