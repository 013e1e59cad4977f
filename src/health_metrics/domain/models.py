"""Domain models for the health metrics engine."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Sex(Enum):
    """Biological sex category used by the body formulas."""

    MALE = "Male"
    FEMALE = "Female"
    UNSPECIFIED = "Unspecified"


class UnitPreference(Enum):
    """Display unit system."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class MealSlot(Enum):
    """Meal a food entry was logged under."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class Profile:
    """Biometric profile snapshot. Every field may be unset."""

    height_cm: float | None = None
    age_years: int | None = None
    sex: Sex = Sex.UNSPECIFIED
    activity_multiplier: float | None = None
    monthly_weight_goal_kg: float | None = None
    goal_weight_kg: float | None = None
    unit_preference: UnitPreference = UnitPreference.METRIC


@dataclass(frozen=True)
class WeightObservation:
    """Single body-weight reading in kilograms."""

    weight_kg: float
    timestamp: datetime
    note: str | None = None


@dataclass(frozen=True)
class NutritionTotals:
    """Calories and macro grams."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0

    def __add__(self, other: "NutritionTotals") -> "NutritionTotals":
        return NutritionTotals(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
        )


@dataclass(frozen=True)
class FoodEntry:
    """Logged food with per-serving nutrition."""

    calories_per_serving: float
    protein_g_per_serving: float
    carbs_g_per_serving: float
    fat_g_per_serving: float
    serving_multiplier: float = 1.0
    meal_slot: MealSlot = MealSlot.SNACK
    name: str | None = None

    def effective_nutrition(self) -> NutritionTotals:
        """Return nutrition scaled by the serving multiplier."""
        return NutritionTotals(
            calories=self.calories_per_serving * self.serving_multiplier,
            protein_g=self.protein_g_per_serving * self.serving_multiplier,
            carbs_g=self.carbs_g_per_serving * self.serving_multiplier,
            fat_g=self.fat_g_per_serving * self.serving_multiplier,
        )


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return int(math.copysign(rounded, value))
