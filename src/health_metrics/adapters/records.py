"""Pydantic models for raw profile, weight and food log records."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from health_metrics.domain.models import (
    FoodEntry,
    MealSlot,
    Profile,
    Sex,
    UnitPreference,
    WeightObservation,
)

_SEXES = {"male": Sex.MALE, "female": Sex.FEMALE}


class ProfileRecord(BaseModel):
    """Stored profile payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    height_cm: float | None = Field(default=None, alias="height")
    age_years: int | None = Field(default=None, alias="age")
    gender: str | None = None
    activity_multiplier: float | None = Field(default=None, alias="activityLevel")
    monthly_weight_goal_kg: float | None = Field(
        default=None, alias="monthlyWeightGoal"
    )
    goal_weight_kg: float | None = Field(default=None, alias="goalWeight")
    is_metric: bool = Field(default=True, alias="isMetric")

    @field_validator("age_years", mode="before")
    @classmethod
    def _coerce_age(cls, value: object) -> object:
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            cleaned = value.strip()
            return int(cleaned) if cleaned.isdigit() else None
        return value

    def to_domain(self) -> Profile:
        """Convert to a domain profile."""
        sex = _SEXES.get((self.gender or "").strip().lower(), Sex.UNSPECIFIED)
        return Profile(
            height_cm=self.height_cm,
            age_years=self.age_years,
            sex=sex,
            activity_multiplier=self.activity_multiplier,
            monthly_weight_goal_kg=self.monthly_weight_goal_kg,
            goal_weight_kg=self.goal_weight_kg,
            unit_preference=(
                UnitPreference.METRIC if self.is_metric else UnitPreference.IMPERIAL
            ),
        )


class WeightRecord(BaseModel):
    """Stored weight observation payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    weight_kg: float = Field(alias="weight", gt=0)
    timestamp: datetime
    note: str | None = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_epoch_millis(cls, value: object) -> object:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        return value

    def to_domain(self) -> WeightObservation:
        """Convert to a domain observation."""
        return WeightObservation(
            weight_kg=self.weight_kg, timestamp=self.timestamp, note=self.note
        )


class FoodRecord(BaseModel):
    """Stored food log entry payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    calories: float = 0.0
    protein_g: float = Field(default=0.0, alias="proteins")
    carbs_g: float = Field(default=0.0, alias="carbs")
    fat_g: float = Field(default=0.0, alias="fats")
    serving_multiplier: float = Field(default=1.0, alias="servingSize", gt=0)
    meal_slot: MealSlot = Field(default=MealSlot.SNACK, alias="mealType")

    @field_validator("calories", "protein_g", "carbs_g", "fat_g", mode="before")
    @classmethod
    def _default_missing_nutrient(cls, value: object) -> object:
        return 0.0 if value is None else value

    @field_validator("serving_multiplier", mode="before")
    @classmethod
    def _default_missing_serving(cls, value: object) -> object:
        return 1.0 if value is None else value

    @field_validator("meal_slot", mode="before")
    @classmethod
    def _normalize_meal_slot(cls, value: object) -> object:
        if value is None:
            return MealSlot.SNACK
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_domain(self) -> FoodEntry:
        """Convert to a domain food entry."""
        return FoodEntry(
            calories_per_serving=self.calories,
            protein_g_per_serving=self.protein_g,
            carbs_g_per_serving=self.carbs_g,
            fat_g_per_serving=self.fat_g,
            serving_multiplier=self.serving_multiplier,
            meal_slot=self.meal_slot,
            name=self.name,
        )


def parse_profile(payload: dict[str, object] | None) -> Profile | None:
    """Validate a raw profile payload; None stays None."""
    if payload is None:
        return None
    return ProfileRecord.model_validate(payload).to_domain()


def parse_weight_history(
    payloads: list[dict[str, object]],
) -> list[WeightObservation]:
    """Validate raw weight payloads."""
    return [WeightRecord.model_validate(item).to_domain() for item in payloads]


def parse_food_entries(payloads: list[dict[str, object]]) -> list[FoodEntry]:
    """Validate raw food log payloads."""
    return [FoodRecord.model_validate(item).to_domain() for item in payloads]
