"""Goal resolution: calorie targets, macro split and exercise budget."""

import logging

from health_metrics.domain.metrics import (
    CalorieTargets,
    DailyCalorieNeeds,
    ExerciseRecommendation,
    MacroGrams,
    MacroSplit,
    WeightLossPlan,
)
from health_metrics.domain.models import Sex, round_half_away

KCAL_PER_KG = 7700
DAYS_PER_MONTH = 30
SAFETY_FLOOR_RATIO = 0.9
SAFETY_BURN_MULTIPLIER = 1.2
GOAL_DEAD_ZONE_KG = 0.1

LOSS = "loss"
GAIN = "gain"
MAINTAIN = "maintain"

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

_BASE_SPLIT = (30, 45, 25)
_LOW_ACTIVITY = 1.4
_HIGH_ACTIVITY = 1.7
_OLDER_AGE = 50
_YOUNGER_AGE = 25
_REFERENCE_WEIGHT_KG = 70
_REFERENCE_KCAL_PER_MIN = 10
_GAIN_DAILY_BURN = 200
_MAINTAIN_DAILY_BURN = 300
_WEEKLY_STEPS = (250, 500, 1000)
_EXERCISE_DEFICIT_SHARE = 0.25

_logger = logging.getLogger(__name__)


def goal_direction(monthly_weight_goal_kg: float | None) -> str:
    """Classify a monthly goal as loss, gain or maintain with a 0.1 kg dead zone."""
    if monthly_weight_goal_kg is None:
        return MAINTAIN
    if monthly_weight_goal_kg < -GOAL_DEAD_ZONE_KG:
        return LOSS
    if monthly_weight_goal_kg > GOAL_DEAD_ZONE_KG:
        return GAIN
    return MAINTAIN


def calorie_targets(tdee: float | None) -> CalorieTargets:
    """Return coarse lose/maintain/gain bands (-20% / TDEE / +15%)."""
    if tdee is None:
        return CalorieTargets(lose=0, maintain=0, gain=0)
    maintain = round_half_away(tdee)
    return CalorieTargets(
        lose=round_half_away(maintain * 0.8),
        maintain=maintain,
        gain=round_half_away(maintain * 1.15),
    )


def daily_calorie_needs(
    bmr: float | None, activity_multiplier: float | None
) -> DailyCalorieNeeds:
    """Return intake for 0.25, 0.5 and 1 kg/week of loss or gain."""
    if bmr is None or activity_multiplier is None:
        return DailyCalorieNeeds()
    maintenance = round_half_away(bmr * activity_multiplier)
    slow, medium, fast = _WEEKLY_STEPS
    return DailyCalorieNeeds(
        maintenance=maintenance,
        lose_slow=maintenance - slow,
        lose_medium=maintenance - medium,
        lose_fast=maintenance - fast,
        gain_slow=maintenance + slow,
        gain_medium=maintenance + medium,
        gain_fast=maintenance + fast,
    )


def daily_calorie_change(monthly_weight_goal_kg: float) -> float:
    """Return the daily energy change implied by a monthly weight goal."""
    return monthly_weight_goal_kg / DAYS_PER_MONTH * KCAL_PER_KG


def calorie_floor(bmr: float) -> int:
    """Return the minimum safe intake, 90% of BMR."""
    return round_half_away(bmr * SAFETY_FLOOR_RATIO)


def _unclamped_target(
    bmr: float, activity_multiplier: float, monthly_weight_goal_kg: float
) -> int:
    maintenance = bmr * activity_multiplier
    return round_half_away(maintenance + daily_calorie_change(monthly_weight_goal_kg))


def is_safety_adjusted(
    bmr: float | None,
    activity_multiplier: float | None,
    monthly_weight_goal_kg: float | None,
) -> bool:
    """Return True when a loss goal would push intake below the safety floor."""
    if bmr is None or activity_multiplier is None or monthly_weight_goal_kg is None:
        return False
    if monthly_weight_goal_kg >= 0:
        return False
    target = _unclamped_target(bmr, activity_multiplier, monthly_weight_goal_kg)
    return target < calorie_floor(bmr)


def recommended_daily_calories(
    bmr: float | None,
    activity_multiplier: float | None,
    monthly_weight_goal_kg: float | None,
) -> int:
    """Return the daily calorie target for a monthly weight goal.

    Loss goals never go below 90% of BMR, however aggressive the goal.
    Returns 0 when any input is missing.
    """
    if bmr is None or activity_multiplier is None or monthly_weight_goal_kg is None:
        return 0
    target = _unclamped_target(bmr, activity_multiplier, monthly_weight_goal_kg)
    if monthly_weight_goal_kg < 0:
        floor = calorie_floor(bmr)
        if target < floor:
            _logger.debug("Calorie target %s raised to safety floor %s", target, floor)
            return floor
    return target


def calorie_goal_description(monthly_weight_goal_kg: float | None) -> str:
    """Describe what the calorie target is for."""
    direction = goal_direction(monthly_weight_goal_kg)
    if direction == LOSS:
        return "to lose weight"
    if direction == GAIN:
        return "to gain weight"
    return "to maintain weight"


def macronutrient_split(
    monthly_weight_goal_kg: float | None,
    activity_multiplier: float | None,
    sex: Sex | None,
    age_years: int | None,
    current_weight_kg: float | None,
) -> MacroSplit:
    """Return a personalised protein/carbs/fat split that sums to 100."""
    protein, carbs, fat = _BASE_SPLIT
    if (
        monthly_weight_goal_kg is None
        or activity_multiplier is None
        or age_years is None
        or current_weight_kg is None
    ):
        return MacroSplit(protein_pct=protein, carbs_pct=carbs, fat_pct=fat)

    direction = goal_direction(monthly_weight_goal_kg)
    if direction == LOSS:
        protein += 5
        carbs -= 5
    elif direction == GAIN:
        carbs += 5
        fat -= 5

    if activity_multiplier < _LOW_ACTIVITY:
        carbs -= 5
        fat += 5
    elif activity_multiplier > _HIGH_ACTIVITY:
        carbs += 5
        fat -= 5

    if age_years > _OLDER_AGE:
        protein += 5
        carbs -= 5

    # Any residual goes to carbs so the split always sums to 100.
    carbs += 100 - (protein + carbs + fat)

    if direction == LOSS:
        protein_per_kg = 2.0
    elif direction == GAIN:
        protein_per_kg = 1.6
    else:
        protein_per_kg = 1.8
    if activity_multiplier > _HIGH_ACTIVITY:
        protein_per_kg = round(protein_per_kg + 0.2, 1)

    return MacroSplit(
        protein_pct=protein,
        carbs_pct=carbs,
        fat_pct=fat,
        protein_per_kg=protein_per_kg,
        recommended_protein_g=round_half_away(current_weight_kg * protein_per_kg),
    )


def macro_grams(calories: float, split: MacroSplit) -> MacroGrams:
    """Convert a macro split into grams for a calorie target."""

    def grams(pct: int, kcal_per_gram: int) -> int:
        return round_half_away(calories * pct / 100 / kcal_per_gram)

    return MacroGrams(
        protein_g=grams(split.protein_pct, KCAL_PER_GRAM_PROTEIN),
        carbs_g=grams(split.carbs_pct, KCAL_PER_GRAM_CARBS),
        fat_g=grams(split.fat_pct, KCAL_PER_GRAM_FAT),
    )


def recommended_exercise_burn(  # noqa: PLR0913
    monthly_weight_goal_kg: float | None,
    bmr: float | None,
    activity_multiplier: float | None,
    age_years: int | None,
    sex: Sex | None,
    current_weight_kg: float | None,
) -> ExerciseRecommendation:
    """Return a daily exercise calorie budget and its duration equivalents.

    For loss goals a quarter of the daily deficit comes from exercise. When
    the intake target was raised to the safety floor, the gap is added back
    to the burn (x1.2) so the overall deficit is kept. Gain and maintain
    goals get fixed budgets. Minutes are only computed when the current
    weight is known.
    """
    if monthly_weight_goal_kg is None or bmr is None or activity_multiplier is None:
        return ExerciseRecommendation()

    direction = goal_direction(monthly_weight_goal_kg)
    safety_adjusted = False
    if direction == LOSS:
        daily_burn = round_half_away(
            0.25 * abs(daily_calorie_change(monthly_weight_goal_kg))
        )
        if is_safety_adjusted(bmr, activity_multiplier, monthly_weight_goal_kg):
            safety_adjusted = True
            shortfall = calorie_floor(bmr) - _unclamped_target(
                bmr, activity_multiplier, monthly_weight_goal_kg
            )
            daily_burn += round_half_away(SAFETY_BURN_MULTIPLIER * shortfall)
    elif direction == GAIN:
        daily_burn = _GAIN_DAILY_BURN
    else:
        daily_burn = _MAINTAIN_DAILY_BURN

    light = moderate = intense = 0
    if current_weight_kg is not None and current_weight_kg > 0:
        base = current_weight_kg / _REFERENCE_WEIGHT_KG * _REFERENCE_KCAL_PER_MIN
        factor = _age_factor(age_years) * _sex_factor(sex)
        light = round_half_away(daily_burn / (0.5 * base * factor))
        moderate = round_half_away(daily_burn / (1.0 * base * factor))
        intense = round_half_away(daily_burn / (1.5 * base * factor))

    return ExerciseRecommendation(
        daily_burn=daily_burn,
        weekly_burn=daily_burn * 7,
        light_minutes=light,
        moderate_minutes=moderate,
        intense_minutes=intense,
        recommendation_type=direction,
        safety_adjusted=safety_adjusted,
    )


def _age_factor(age_years: int | None) -> float:
    if age_years is None:
        return 1.0
    if age_years > _OLDER_AGE:
        return 0.85
    if age_years < _YOUNGER_AGE:
        return 1.15
    return 1.0


def _sex_factor(sex: Sex | None) -> float:
    if sex is Sex.MALE:
        return 1.1
    if sex is Sex.FEMALE:
        return 0.9
    return 1.0


def weight_loss_plan(
    current_weight_kg: float | None,
    target_weight_kg: float | None,
    target_weeks: int,
) -> WeightLossPlan:
    """Return the deficit to reach a lower target weight in ``target_weeks``.

    A quarter of the daily deficit is assigned to exercise and the rest to
    diet. Returns zeros unless the target is below the current weight and
    the window is at least one week.
    """
    if (
        current_weight_kg is None
        or target_weight_kg is None
        or target_weight_kg >= current_weight_kg
        or target_weeks <= 0
    ):
        return WeightLossPlan()
    weekly = (current_weight_kg - target_weight_kg) * KCAL_PER_KG / target_weeks
    daily = weekly / 7
    return WeightLossPlan(
        weekly_deficit=round_half_away(weekly),
        daily_deficit=round_half_away(daily),
        daily_exercise_calories=round_half_away(daily * _EXERCISE_DEFICIT_SHARE),
        daily_diet_calories=round_half_away(daily * (1 - _EXERCISE_DEFICIT_SHARE)),
    )
