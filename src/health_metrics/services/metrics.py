"""Metrics facade over the profile, weight and food log stores."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol

from health_metrics.domain.metrics import (
    CalorieProgress,
    DaySummary,
    DerivedMetrics,
    PeriodSummary,
    WeightLossPlan,
)
from health_metrics.domain.models import (
    FoodEntry,
    Profile,
    Sex,
    UnitPreference,
    WeightObservation,
)
from health_metrics.services.aggregation import (
    aggregate_day,
    calorie_progress,
    latest_observation,
    summarize_period,
    weight_change_since,
)
from health_metrics.services.body_composition import (
    classify_bmi,
    classify_body_fat,
    compute_bmi,
    compute_body_fat_percent,
)
from health_metrics.services.energy import (
    activity_level_label,
    compute_bmr,
    compute_tdee,
)
from health_metrics.services.formatting import format_height, format_weight
from health_metrics.services.goals import (
    calorie_goal_description,
    calorie_targets,
    daily_calorie_needs,
    is_safety_adjusted,
    macro_grams,
    macronutrient_split,
    recommended_daily_calories,
    recommended_exercise_burn,
    weight_loss_plan,
)
from health_metrics.services.progress import (
    goal_progress,
    weight_change_direction_text,
)

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Read interface for the user's profile."""

    def get_profile(self) -> Profile | None:
        """Return the stored profile, if any."""


class WeightHistoryRepository(Protocol):
    """Read interface for body-weight observations."""

    def list_observations(self) -> list[WeightObservation]:
        """Return all observations in any order."""


class FoodLogRepository(Protocol):
    """Read interface for logged food entries."""

    def list_entries(self, day: date) -> list[FoodEntry]:
        """Return entries logged on a calendar day."""


def missing_fields(profile: Profile | None, current_weight_kg: float | None) -> list[str]:
    """Return the names of inputs the user still has to provide."""
    if profile is None:
        return ["Profile"]
    missing = []
    if current_weight_kg is None:
        missing.append("Weight")
    if profile.height_cm is None:
        missing.append("Height")
    if profile.age_years is None:
        missing.append("Age")
    if profile.sex is None or profile.sex is Sex.UNSPECIFIED:
        missing.append("Gender")
    if profile.activity_multiplier is None:
        missing.append("Activity Level")
    return missing


def derive_metrics(
    profile: Profile | None, current_weight_kg: float | None
) -> DerivedMetrics:
    """Compute every derived metric for a profile snapshot and current weight."""
    resolved = profile or Profile()
    bmi = compute_bmi(resolved.height_cm, current_weight_kg)
    body_fat = compute_body_fat_percent(bmi, resolved.age_years, resolved.sex)
    bmr = compute_bmr(
        current_weight_kg, resolved.height_cm, resolved.age_years, resolved.sex
    )
    tdee = compute_tdee(bmr, resolved.activity_multiplier)
    recommended = recommended_daily_calories(
        bmr, resolved.activity_multiplier, resolved.monthly_weight_goal_kg
    )
    macros = macronutrient_split(
        resolved.monthly_weight_goal_kg,
        resolved.activity_multiplier,
        resolved.sex,
        resolved.age_years,
        current_weight_kg,
    )
    return DerivedMetrics(
        bmi=bmi,
        bmi_label=classify_bmi(bmi) if bmi is not None else None,
        body_fat_percent=body_fat,
        body_fat_label=(
            classify_body_fat(body_fat, resolved.sex) if body_fat is not None else None
        ),
        bmr=bmr,
        tdee=tdee,
        activity_label=activity_level_label(resolved.activity_multiplier),
        calorie_targets=calorie_targets(tdee),
        calorie_needs=daily_calorie_needs(bmr, resolved.activity_multiplier),
        recommended_calories=recommended,
        goal_description=calorie_goal_description(resolved.monthly_weight_goal_kg),
        safety_adjusted=is_safety_adjusted(
            bmr, resolved.activity_multiplier, resolved.monthly_weight_goal_kg
        ),
        macros=macros,
        macro_grams=macro_grams(recommended, macros),
        exercise=recommended_exercise_burn(
            resolved.monthly_weight_goal_kg,
            bmr,
            resolved.activity_multiplier,
            resolved.age_years,
            resolved.sex,
            current_weight_kg,
        ),
        missing_fields=missing_fields(profile, current_weight_kg),
    )


@dataclass
class MetricsService:
    """Reads store snapshots and hands them to the metric functions."""

    profile_repository: ProfileRepository
    weight_repository: WeightHistoryRepository
    food_log_repository: FoodLogRepository
    unit_preference: UnitPreference = UnitPreference.METRIC
    debug: bool = False

    def current_weight(self) -> float | None:
        """Return the latest recorded weight in kg."""
        latest = latest_observation(self.weight_repository.list_observations())
        return latest.weight_kg if latest else None

    def missing_fields(self) -> list[str]:
        """Return profile inputs still missing for the full metric set."""
        return missing_fields(
            self.profile_repository.get_profile(), self.current_weight()
        )

    def get_metrics(self) -> DerivedMetrics:
        """Return derived metrics for the stored profile and latest weight."""
        profile = self.profile_repository.get_profile()
        weight = self.current_weight()
        metrics = derive_metrics(profile, weight)
        if self.debug:
            _logger.info(
                "Derived metrics: bmr=%s tdee=%s target=%s safety_adjusted=%s "
                "missing=%s",
                metrics.bmr,
                metrics.tdee,
                metrics.recommended_calories,
                metrics.safety_adjusted,
                metrics.missing_fields,
            )
        return metrics

    def get_day_summary(self, day: date) -> DaySummary:
        """Return aggregated nutrition for a day."""
        summary = aggregate_day(self.food_log_repository.list_entries(day), day=day)
        if self.debug:
            _logger.info(
                "Day summary %s: calories=%s", day.isoformat(), summary.total_calories
            )
        return summary

    def get_day_progress(self, day: date) -> tuple[DaySummary, CalorieProgress]:
        """Return a day summary and its progress against the calorie target."""
        summary = self.get_day_summary(day)
        target = self.get_metrics().recommended_calories
        return summary, calorie_progress(summary.total_calories, target)

    def get_period_summary(self, start: date, days: int) -> PeriodSummary:
        """Return daily summaries and averages for ``days`` days from start."""
        entries_by_day = {}
        for offset in range(days):
            day = start + timedelta(days=offset)
            entries_by_day[day] = self.food_log_repository.list_entries(day)
        return summarize_period(entries_by_day, start, days)

    def get_weight_change(self, start: datetime) -> float | None:
        """Return net weight change since ``start``."""
        return weight_change_since(self.weight_repository.list_observations(), start)

    def get_weight_loss_plan(self, target_weeks: int) -> WeightLossPlan:
        """Return the deficit plan toward the profile's goal weight."""
        profile = self.profile_repository.get_profile()
        target = profile.goal_weight_kg if profile else None
        return weight_loss_plan(self.current_weight(), target, target_weeks)

    def _unit_for(self, profile: Profile | None) -> UnitPreference:
        return profile.unit_preference if profile else self.unit_preference

    def describe_current_weight(self) -> str:
        """Return the latest weight in the user's display unit."""
        profile = self.profile_repository.get_profile()
        return format_weight(self.current_weight(), self._unit_for(profile))

    def describe_height(self) -> str:
        """Return the profile height in the user's display unit."""
        profile = self.profile_repository.get_profile()
        height = profile.height_cm if profile else None
        return format_height(height, self._unit_for(profile))

    def get_goal_progress(self) -> tuple[float, str]:
        """Return progress toward the target weight and a short description."""
        profile = self.profile_repository.get_profile()
        target = profile.goal_weight_kg if profile else None
        weight = self.current_weight()
        return (
            goal_progress(weight, target),
            weight_change_direction_text(weight, target, self._unit_for(profile)),
        )
