"""Tests for preference resolution, updates and boundary validation."""

import pydantic
import pytest

from campus_events.schemas import UserPreferencesBase, UserPreferencesUpdate
from campus_events.services.preference_service import resolve_preferences, update_preferences


@pytest.mark.asyncio
async def test_resolve_creates_empty_defaults(store):
    prefs = await resolve_preferences(store, 42)

    assert prefs.user_id == 42
    assert prefs.preferred_categories == []
    assert prefs.preferred_days_of_week == []
    assert prefs.preferred_time_of_day == []
    assert prefs.location_preference is None


@pytest.mark.asyncio
async def test_resolve_is_idempotent(store):
    first = await resolve_preferences(store, 7)
    second = await resolve_preferences(store, 7)

    assert first == second
    assert first.id == second.id

    # Only one record was created: the next user gets the next id
    other = await resolve_preferences(store, 8)
    assert other.id == first.id + 1


@pytest.mark.asyncio
async def test_update_merges_only_supplied_fields(store):
    await update_preferences(store, 1, UserPreferencesUpdate(preferred_categories=[1, 2]))
    updated = await update_preferences(store, 1, UserPreferencesUpdate(location_preference="Library"))

    assert updated.preferred_categories == [1, 2]
    assert updated.location_preference == "Library"
    assert (await resolve_preferences(store, 1)) == updated


@pytest.mark.asyncio
async def test_update_creates_record_for_new_user(store):
    updated = await update_preferences(store, 5, UserPreferencesUpdate(preferred_time_of_day=["night"]))

    assert updated.user_id == 5
    assert updated.preferred_time_of_day == ["night"]
    assert updated.preferred_categories == []


@pytest.mark.asyncio
async def test_update_refreshes_updated_at(store):
    created = await resolve_preferences(store, 3)
    updated = await update_preferences(store, 3, UserPreferencesUpdate(preferred_days_of_week=["friday"]))

    assert updated.id == created.id
    assert updated.updated_at >= created.updated_at


@pytest.mark.asyncio
async def test_replace_resets_omitted_fields(store):
    await update_preferences(
        store, 9, UserPreferencesUpdate(preferred_categories=[3], location_preference="Gym")
    )
    replaced = await update_preferences(
        store, 9, UserPreferencesUpdate(preferred_days_of_week=["Saturday"]), replace=True
    )

    assert replaced.preferred_days_of_week == ["Saturday"]
    assert replaced.preferred_categories == []
    assert replaced.location_preference is None


@pytest.mark.asyncio
async def test_returned_record_does_not_alias_store(store):
    prefs = await update_preferences(store, 11, UserPreferencesUpdate(preferred_categories=[1]))
    prefs.preferred_categories.append(99)

    assert (await resolve_preferences(store, 11)).preferred_categories == [1]


def test_preference_values_are_normalised():
    prefs = UserPreferencesBase(
        preferred_categories=[2, 2, 1],
        preferred_days_of_week=[" monday", "MONDAY", "friday"],
        preferred_time_of_day=["Evening", "night"],
        location_preference="   ",
    )

    assert prefs.preferred_categories == [2, 1]
    assert prefs.preferred_days_of_week == ["Monday", "Friday"]
    assert prefs.preferred_time_of_day == ["evening", "night"]
    assert prefs.location_preference is None


def test_location_preference_is_trimmed():
    prefs = UserPreferencesBase(location_preference="  Student Union ")

    assert prefs.location_preference == "Student Union"


def test_unknown_weekday_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        UserPreferencesBase(preferred_days_of_week=["Funday"])


def test_unknown_time_of_day_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        UserPreferencesBase(preferred_time_of_day=["midnight"])


def test_camel_case_input_is_accepted():
    prefs = UserPreferencesUpdate.model_validate({"preferredCategories": [4], "locationPreference": "Quad"})

    assert prefs.model_dump(exclude_unset=True) == {"preferred_categories": [4], "location_preference": "Quad"}
