"""Food log aggregation and weight trends."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, timedelta

from health_metrics.domain.metrics import (
    CalorieProgress,
    DaySummary,
    MacroPercentages,
    PeriodSummary,
)
from health_metrics.domain.models import (
    FoodEntry,
    MealSlot,
    NutritionTotals,
    WeightObservation,
    round_half_away,
)
from health_metrics.services.goals import (
    KCAL_PER_GRAM_CARBS,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
)


def aggregate_day(entries: Iterable[FoodEntry], day: date | None = None) -> DaySummary:
    """Sum effective nutrition overall and per meal slot."""
    meals = {slot: NutritionTotals() for slot in MealSlot}
    totals = NutritionTotals()
    for entry in entries:
        nutrition = entry.effective_nutrition()
        totals = totals + nutrition
        meals[entry.meal_slot] = meals[entry.meal_slot] + nutrition
    return DaySummary(
        totals=totals,
        macro_pct=macro_percentages(totals),
        meals=meals,
        day=day,
    )


def macro_percentages(totals: NutritionTotals) -> MacroPercentages:
    """Return each macro's share of the calories coming from macros.

    The denominator is the macro calories, not total calories, which can
    include untracked sources.
    """
    protein_kcal = totals.protein_g * KCAL_PER_GRAM_PROTEIN
    carbs_kcal = totals.carbs_g * KCAL_PER_GRAM_CARBS
    fat_kcal = totals.fat_g * KCAL_PER_GRAM_FAT
    macro_kcal = protein_kcal + carbs_kcal + fat_kcal
    if macro_kcal <= 0:
        return MacroPercentages()
    return MacroPercentages(
        protein=round_half_away(protein_kcal / macro_kcal * 100),
        carbs=round_half_away(carbs_kcal / macro_kcal * 100),
        fat=round_half_away(fat_kcal / macro_kcal * 100),
    )


def summarize_period(
    entries_by_day: Mapping[date, Sequence[FoodEntry]], start: date, days: int
) -> PeriodSummary:
    """Summarize each day in a window and average over the window length."""
    daily = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        daily.append(aggregate_day(entries_by_day.get(day, ()), day=day))

    totals = NutritionTotals()
    for summary in daily:
        totals = totals + summary.totals

    total_days = max(len(daily), 1)
    return PeriodSummary(
        daily=daily,
        avg_calories=totals.calories / total_days,
        avg_protein_g=totals.protein_g / total_days,
        avg_carbs_g=totals.carbs_g / total_days,
        avg_fat_g=totals.fat_g / total_days,
    )


def latest_observation(
    observations: Iterable[WeightObservation],
) -> WeightObservation | None:
    """Return the most recent observation, if any."""
    return max(observations, key=lambda item: item.timestamp, default=None)


def weight_change_since(
    observations: Sequence[WeightObservation], start: datetime
) -> float | None:
    """Return latest weight minus the first weight recorded at or after start.

    Positive values are a net gain. Returns None when there are no
    observations or none on or after ``start``.
    """
    latest = latest_observation(observations)
    if latest is None:
        return None
    candidates = [item for item in observations if item.timestamp >= start]
    if not candidates:
        return None
    earliest = min(candidates, key=lambda item: item.timestamp)
    return latest.weight_kg - earliest.weight_kg


def calorie_progress(total_calories: float, target: float) -> CalorieProgress:
    """Return intake as a fraction of the target in [0, 1] and calories left.

    ``remaining`` is negative once the target is exceeded. A target of 0
    (incomplete profile) reports no progress.
    """
    if target <= 0:
        return CalorieProgress(fraction=0.0, remaining=0.0)
    fraction = min(max(total_calories / target, 0.0), 1.0)
    return CalorieProgress(fraction=fraction, remaining=target - total_calories)
