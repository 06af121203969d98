"""Preference service: resolves and updates a user's stated event preferences."""

import logging

from campus_events.schemas import UserPreferencesBase, UserPreferencesRead, UserPreferencesUpdate
from campus_events.store.base import EventStore

logger = logging.getLogger(__name__)


async def resolve_preferences(store: EventStore, user_id: int) -> UserPreferencesRead:
    """Return the user's preferences, creating the empty default record on first access.

    Any id is accepted: an unknown user and a user who never set preferences
    look the same from here.
    """
    preferences = await store.get_user_preferences(user_id)
    if preferences is not None:
        return preferences

    logger.info("No preferences for user %s, creating defaults", user_id)
    return await store.create_user_preferences(user_id, UserPreferencesBase())


async def update_preferences(
    store: EventStore,
    user_id: int,
    partial: UserPreferencesUpdate,
    replace: bool = False,
) -> UserPreferencesRead:
    """Merge the fields present in `partial` into the user's record.

    With `replace=True` every field is written, so omitted ones fall back to
    their empty defaults.
    """
    changes = partial.model_dump(exclude_unset=not replace)
    await resolve_preferences(store, user_id)
    updated = await store.update_user_preferences(user_id, changes)
    logger.info("Updated preferences for user %s (%s)", user_id, ", ".join(sorted(changes)) or "no fields")
    return updated
