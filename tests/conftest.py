"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

import pytest

from health_metrics.config import Settings
from health_metrics.domain.models import (
    FoodEntry,
    MealSlot,
    Profile,
    Sex,
    WeightObservation,
)
from health_metrics.services.metrics import (
    FoodLogRepository,
    MetricsService,
    ProfileRepository,
    WeightHistoryRepository,
)

T0 = datetime(2024, 1, 1, 8, 0, tzinfo=UTC)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile store for tests."""

    profile: Profile | None = None
    reads: int = 0

    def get_profile(self) -> Profile | None:
        self.reads += 1
        return self.profile


@dataclass
class InMemoryWeightHistoryRepository(WeightHistoryRepository):
    """In-memory weight history store for tests."""

    observations: list[WeightObservation] = field(default_factory=list)

    def list_observations(self) -> list[WeightObservation]:
        return list(self.observations)


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log store keyed by day."""

    entries: dict[date, list[FoodEntry]] = field(default_factory=dict)

    def list_entries(self, day: date) -> list[FoodEntry]:
        return list(self.entries.get(day, []))


def food(  # noqa: PLR0913
    calories: float,
    protein_g: float,
    carbs_g: float,
    fat_g: float,
    servings: float = 1.0,
    slot: MealSlot = MealSlot.SNACK,
) -> FoodEntry:
    return FoodEntry(
        calories_per_serving=calories,
        protein_g_per_serving=protein_g,
        carbs_g_per_serving=carbs_g,
        fat_g_per_serving=fat_g,
        serving_multiplier=servings,
        meal_slot=slot,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG")


@pytest.fixture
def profile() -> Profile:
    return Profile(
        height_cm=175,
        age_years=30,
        sex=Sex.MALE,
        activity_multiplier=1.55,
        monthly_weight_goal_kg=-2,
        goal_weight_kg=70,
    )


@pytest.fixture
def profile_repository(profile: Profile) -> InMemoryProfileRepository:
    return InMemoryProfileRepository(profile=profile)


@pytest.fixture
def weight_repository() -> InMemoryWeightHistoryRepository:
    return InMemoryWeightHistoryRepository(
        observations=[
            WeightObservation(weight_kg=80, timestamp=T0),
            WeightObservation(weight_kg=78, timestamp=T0.replace(day=8)),
        ]
    )


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def metrics_service(
    profile_repository: InMemoryProfileRepository,
    weight_repository: InMemoryWeightHistoryRepository,
    food_log_repository: InMemoryFoodLogRepository,
) -> MetricsService:
    return MetricsService(
        profile_repository=profile_repository,
        weight_repository=weight_repository,
        food_log_repository=food_log_repository,
    )
