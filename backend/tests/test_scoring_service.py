"""Tests for the pure event scoring functions."""

import time
from datetime import datetime, timedelta, timezone

import pytest

from campus_events.schemas import CategoryRead, EventWithCategories, UserPreferencesBase
from campus_events.services.scoring_service import (
    build_reason,
    category_contribution,
    score_event,
    time_of_day_bucket,
)

MONDAY_MORNING = datetime(2026, 3, 2, 10, 0)


def _category(category_id: int) -> CategoryRead:
    return CategoryRead(id=category_id, name=f"Category {category_id}", color="#000000")


def _event(**overrides) -> EventWithCategories:
    data = {
        "id": 1,
        "name": "Event",
        "location": "Student Union, Room 204",
        "start_time": MONDAY_MORNING,
        "end_time": MONDAY_MORNING + timedelta(hours=2),
        "featured": False,
        "categories": [],
    }
    data.update(overrides)
    return EventWithCategories(**data)


def test_category_contribution_is_share_of_event_categories():
    event = _event(categories=[_category(1), _category(2), _category(3)])
    prefs = UserPreferencesBase(preferred_categories=[1, 3, 9])

    score, matched, _ = score_event(event, prefs)

    assert category_contribution(event, prefs) == pytest.approx(0.4 * 2 / 3)
    assert score == pytest.approx(0.4 * 2 / 3)
    assert matched == ["categories"]


def test_full_category_match_contributes_point_four():
    event = _event(categories=[_category(5)])
    score, matched, _ = score_event(event, UserPreferencesBase(preferred_categories=[5]))

    assert score == pytest.approx(0.4)
    assert matched == ["categories"]


def test_uncategorised_event_gets_no_category_credit():
    score, matched, _ = score_event(_event(), UserPreferencesBase(preferred_categories=[1, 2]))

    assert score == 0
    assert matched == []


def test_no_category_overlap_adds_no_label():
    event = _event(categories=[_category(4)])
    score, matched, _ = score_event(event, UserPreferencesBase(preferred_categories=[1]))

    assert score == 0
    assert "categories" not in matched


def test_flat_bonuses_add_up_in_facet_order():
    event = _event(featured=True)
    prefs = UserPreferencesBase(
        preferred_days_of_week=["monday"],
        preferred_time_of_day=["morning"],
        location_preference="student union",
    )

    score, matched, reason = score_event(event, prefs)

    assert score == pytest.approx(0.7)
    assert matched == ["day of week", "time of day", "location", "featured"]
    assert reason == (
        "This event might interest you based on your preferences for "
        "day of week, time of day, location, featured"
    )


def test_all_facets_can_exceed_one():
    event = _event(featured=True, categories=[_category(1)])
    prefs = UserPreferencesBase(
        preferred_categories=[1],
        preferred_days_of_week=["Monday"],
        preferred_time_of_day=["morning"],
        location_preference="Union",
    )

    score, matched, _ = score_event(event, prefs)

    assert score == pytest.approx(1.1)
    assert matched == ["categories", "day of week", "time of day", "location", "featured"]


def test_location_only_reason():
    prefs = UserPreferencesBase(location_preference="ROOM 204")
    score, matched, reason = score_event(_event(), prefs)

    assert score == pytest.approx(0.2)
    assert matched == ["location"]
    assert reason == "This event might interest you based on your preferences for location"


def test_no_match_reason():
    score, matched, reason = score_event(_event(), UserPreferencesBase(location_preference="Library"))

    assert score == 0
    assert matched == []
    assert reason == "This event might interest you"


def test_day_of_week_comparison_ignores_case():
    # model_construct skips the schema's normalisation
    prefs = UserPreferencesBase.model_construct(
        preferred_categories=[],
        preferred_days_of_week=["mOnDaY"],
        preferred_time_of_day=[],
        location_preference=None,
    )
    _, matched, _ = score_event(_event(), prefs)

    assert matched == ["day of week"]


def test_other_weekday_does_not_match():
    _, matched, _ = score_event(_event(), UserPreferencesBase(preferred_days_of_week=["Tuesday", "Sunday"]))

    assert matched == []


@pytest.mark.parametrize(
    "hour, bucket",
    [
        (0, "morning"),
        (11, "morning"),
        (12, "afternoon"),
        (16, "afternoon"),
        (17, "evening"),
        (19, "evening"),
        (20, "night"),
        (23, "night"),
    ],
)
def test_time_of_day_buckets(hour, bucket):
    assert time_of_day_bucket(hour) == bucket


def test_time_of_day_uses_event_start_hour():
    event = _event(start_time=datetime(2026, 3, 2, 18, 30), end_time=datetime(2026, 3, 2, 21, 0))
    _, matched, _ = score_event(event, UserPreferencesBase(preferred_time_of_day=["evening"]))

    assert matched == ["time of day"]


def test_start_time_is_converted_to_local_zone():
    # 02:00 UTC Monday is 21:00 Sunday at UTC-5
    start = datetime(2026, 3, 2, 2, 0, tzinfo=timezone.utc)
    event = _event(start_time=start, end_time=start + timedelta(hours=1))
    prefs = UserPreferencesBase(preferred_days_of_week=["Sunday"], preferred_time_of_day=["night"])

    _, local_matched, _ = score_event(event, prefs, tz=timezone(timedelta(hours=-5)))
    _, utc_matched, _ = score_event(event, prefs, tz=timezone.utc)

    assert local_matched == ["day of week", "time of day"]
    assert utc_matched == []


@pytest.fixture
def server_zone(monkeypatch):
    """Run the test with the process zone set to America/Chicago."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/Chicago")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_aware_start_uses_server_zone_without_configured_zone(server_zone):
    # 00:30 UTC Tuesday is 18:30 Monday in Chicago (CST, UTC-6)
    start = datetime(2026, 3, 3, 0, 30, tzinfo=timezone.utc)
    event = _event(start_time=start, end_time=start + timedelta(hours=2))
    prefs = UserPreferencesBase(preferred_days_of_week=["Monday"], preferred_time_of_day=["evening"])

    _, matched, _ = score_event(event, prefs)

    assert matched == ["day of week", "time of day"]


def test_naive_start_is_scored_as_stored(server_zone):
    event = _event(start_time=datetime(2026, 3, 3, 0, 30), end_time=datetime(2026, 3, 3, 2, 0))
    prefs = UserPreferencesBase(preferred_days_of_week=["Tuesday"], preferred_time_of_day=["morning"])

    _, matched, _ = score_event(event, prefs)

    assert matched == ["day of week", "time of day"]


def test_build_reason_joins_labels():
    assert build_reason([]) == "This event might interest you"
    assert build_reason(["categories", "featured"]) == (
        "This event might interest you based on your preferences for categories, featured"
    )
