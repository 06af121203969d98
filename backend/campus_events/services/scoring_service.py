"""Scoring service: weighted additive relevance of one event against one user's preferences.

score = 0.4 * (matched_categories / event_categories)
      + 0.2 if the local weekday is preferred
      + 0.2 if the local time-of-day bucket is preferred
      + 0.2 if the location preference is a substring of the event location
      + 0.1 if the event is featured

Scores are not normalised; several matching facets push the total above 1.0.
"""

from datetime import datetime, tzinfo

from campus_events.schemas import EventWithCategories, UserPreferencesBase
from campus_events.schemas.preferences import WEEKDAYS

# Facet weights
CATEGORY_WEIGHT = 0.4
DAY_OF_WEEK_WEIGHT = 0.2
TIME_OF_DAY_WEIGHT = 0.2
LOCATION_WEIGHT = 0.2
FEATURED_BONUS = 0.1

# Facet labels, in evaluation order
FACET_CATEGORIES = "categories"
FACET_DAY_OF_WEEK = "day of week"
FACET_TIME_OF_DAY = "time of day"
FACET_LOCATION = "location"
FACET_FEATURED = "featured"

BASE_REASON = "This event might interest you"


def local_start(start_time: datetime, tz: tzinfo | None = None) -> datetime:
    """Event start in the configured zone, or the server's local zone when none is set.

    Naive datetimes are taken as already local.
    """
    if start_time.tzinfo is None:
        return start_time
    return start_time.astimezone(tz)


def time_of_day_bucket(hour: int) -> str:
    """morning < 12 <= afternoon < 17 <= evening < 20 <= night."""
    if hour < 12:
        return "morning"
    if hour < 17:
        return "afternoon"
    if hour < 20:
        return "evening"
    return "night"


def build_reason(matched: list[str]) -> str:
    if not matched:
        return BASE_REASON
    return f"{BASE_REASON} based on your preferences for {', '.join(matched)}"


def category_contribution(event: EventWithCategories, preferences: UserPreferencesBase) -> float:
    """0.4 * share of the event's categories the user prefers; 0 for an uncategorised event."""
    if not event.categories:
        return 0.0
    preferred = set(preferences.preferred_categories)
    matched = sum(1 for category in event.categories if category.id in preferred)
    return CATEGORY_WEIGHT * (matched / len(event.categories))


def score_event(
    event: EventWithCategories,
    preferences: UserPreferencesBase,
    tz: tzinfo | None = None,
) -> tuple[float, list[str], str]:
    """Score one event. Returns (score, matched facet labels, reason)."""
    score = 0.0
    matched: list[str] = []

    contribution = category_contribution(event, preferences)
    if contribution > 0:
        score += contribution
        matched.append(FACET_CATEGORIES)

    start = local_start(event.start_time, tz)

    preferred_days = {day.lower() for day in preferences.preferred_days_of_week}
    if WEEKDAYS[start.weekday()].lower() in preferred_days:
        score += DAY_OF_WEEK_WEIGHT
        matched.append(FACET_DAY_OF_WEEK)

    if time_of_day_bucket(start.hour) in preferences.preferred_time_of_day:
        score += TIME_OF_DAY_WEIGHT
        matched.append(FACET_TIME_OF_DAY)

    location = preferences.location_preference
    if location and location.lower() in (event.location or "").lower():
        score += LOCATION_WEIGHT
        matched.append(FACET_LOCATION)

    if event.featured:
        score += FEATURED_BONUS
        matched.append(FACET_FEATURED)

    return score, matched, build_reason(matched)
