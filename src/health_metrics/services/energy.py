"""Energy expenditure: BMR (Mifflin-St Jeor) and TDEE."""

from health_metrics.domain.models import Sex

_ACTIVITY_BANDS = (
    (1.3, "Sedentary"),
    (1.45, "Light Activity"),
    (1.65, "Moderate Activity"),
    (1.8, "Active"),
)


def _mifflin_st_jeor(
    weight_kg: float, height_cm: float, age_years: int, offset: float
) -> float:
    return 10 * weight_kg + 6.25 * height_cm - 5 * age_years + offset


def compute_bmr(
    weight_kg: float | None,
    height_cm: float | None,
    age_years: int | None,
    sex: Sex | None,
) -> float | None:
    """Return resting metabolic rate in kcal/day.

    An unspecified sex averages the male and female equations.
    """
    if weight_kg is None or height_cm is None or age_years is None:
        return None
    male = _mifflin_st_jeor(weight_kg, height_cm, age_years, 5)
    female = _mifflin_st_jeor(weight_kg, height_cm, age_years, -161)
    if sex is Sex.MALE:
        return male
    if sex is Sex.FEMALE:
        return female
    return (male + female) / 2


def compute_tdee(bmr: float | None, activity_multiplier: float | None) -> float | None:
    """Return BMR scaled by the activity multiplier."""
    if bmr is None or activity_multiplier is None:
        return None
    return bmr * activity_multiplier


def activity_level_label(activity_multiplier: float | None) -> str:
    """Describe an activity multiplier."""
    if activity_multiplier is None:
        return "Not set"
    for upper, label in _ACTIVITY_BANDS:
        if activity_multiplier < upper:
            return label
    return "Very Active"
