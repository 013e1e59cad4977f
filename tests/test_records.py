"""Tests for raw record parsing."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from health_metrics.adapters.records import (
    parse_food_entries,
    parse_profile,
    parse_weight_history,
)
from health_metrics.domain.models import MealSlot, Sex, UnitPreference


def test_parse_profile_from_store_keys() -> None:
    profile = parse_profile(
        {
            "id": "user-1",
            "height": 180.0,
            "age": 41.0,
            "gender": "Female",
            "activityLevel": 1.375,
            "monthlyWeightGoal": -1.5,
            "goalWeight": 65.0,
            "isMetric": False,
        }
    )

    assert profile is not None
    assert profile.height_cm == 180.0
    assert profile.age_years == 41
    assert profile.sex is Sex.FEMALE
    assert profile.activity_multiplier == 1.375
    assert profile.monthly_weight_goal_kg == -1.5
    assert profile.goal_weight_kg == 65.0
    assert profile.unit_preference is UnitPreference.IMPERIAL


def test_parse_profile_lenient_values() -> None:
    profile = parse_profile({"age": "not a number", "gender": "other"})

    assert profile is not None
    assert profile.age_years is None
    assert profile.sex is Sex.UNSPECIFIED
    assert profile.unit_preference is UnitPreference.METRIC
    assert parse_profile({"age": "29"}).age_years == 29
    assert parse_profile(None) is None


def test_parse_weight_history_epoch_millis() -> None:
    observations = parse_weight_history(
        [{"id": "1", "weight": 80.2, "timestamp": 1704096000000, "note": "am"}]
    )

    assert observations[0].weight_kg == 80.2
    assert observations[0].timestamp == datetime(2024, 1, 1, 8, 0, tzinfo=UTC)
    assert observations[0].note == "am"


def test_parse_weight_history_rejects_non_positive_weight() -> None:
    with pytest.raises(ValidationError):
        parse_weight_history([{"weight": 0, "timestamp": 1704096000000}])


def test_parse_food_entries_defaults() -> None:
    entries = parse_food_entries(
        [
            {
                "name": "Oats",
                "calories": 150,
                "proteins": 5,
                "carbs": 27,
                "fats": None,
                "mealType": "Breakfast",
                "servingSize": 1.5,
            },
            {"name": "Apple", "calories": 95},
        ]
    )

    assert entries[0].meal_slot is MealSlot.BREAKFAST
    assert entries[0].fat_g_per_serving == 0.0
    assert entries[0].effective_nutrition().calories == 225
    assert entries[1].meal_slot is MealSlot.SNACK
    assert entries[1].serving_multiplier == 1.0


def test_parse_food_entries_rejects_bad_values() -> None:
    with pytest.raises(ValidationError):
        parse_food_entries([{"calories": 100, "mealType": "brunch"}])
    with pytest.raises(ValidationError):
        parse_food_entries([{"calories": 100, "servingSize": 0}])
