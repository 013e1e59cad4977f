"""Body composition formulas: BMI and estimated body fat."""

from health_metrics.domain.models import Sex

BODY_FAT_MIN = 3.0
BODY_FAT_MAX = 60.0
DEFAULT_AGE = 30

_BMI_BANDS = ((18.5, "Underweight"), (25, "Normal"), (30, "Overweight"))

_SEX_FACTORS = {Sex.MALE: 1.0, Sex.FEMALE: 0.0}
_UNSPECIFIED_SEX_FACTOR = 0.5

_BODY_FAT_LABELS = ("Essential", "Athletic", "Fitness", "Average", "Above Avg")
_BODY_FAT_THRESHOLDS = {
    Sex.MALE: (6, 14, 18, 25, 30),
    Sex.FEMALE: (14, 21, 25, 32, 38),
    Sex.UNSPECIFIED: (10, 18, 22, 28, 35),
}


def compute_bmi(height_cm: float | None, weight_kg: float | None) -> float | None:
    """Return weight(kg) / height(m)^2, or None for missing or invalid input."""
    if height_cm is None or weight_kg is None or height_cm <= 0 or weight_kg <= 0:
        return None
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def classify_bmi(bmi: float) -> str:
    """Return the BMI band label; lower bounds are inclusive."""
    for upper, label in _BMI_BANDS:
        if bmi < upper:
            return label
    return "Obese"


def compute_body_fat_percent(
    bmi: float | None, age_years: int | None, sex: Sex | None
) -> float | None:
    """Estimate body fat with the Deurenberg equation.

    Missing age falls back to 30 and an unspecified sex uses the midpoint
    factor. The result is clamped to 3-60%.
    """
    if bmi is None:
        return None
    age = age_years if age_years is not None else DEFAULT_AGE
    sex_factor = _SEX_FACTORS.get(sex, _UNSPECIFIED_SEX_FACTOR)
    result = 1.2 * bmi + 0.23 * age - 10.8 * sex_factor - 5.4
    return min(max(result, BODY_FAT_MIN), BODY_FAT_MAX)


def classify_body_fat(percent: float, sex: Sex | None) -> str:
    """Return the six-tier body fat label for the given sex."""
    thresholds = _BODY_FAT_THRESHOLDS.get(sex, _BODY_FAT_THRESHOLDS[Sex.UNSPECIFIED])
    for label, upper in zip(_BODY_FAT_LABELS, thresholds, strict=True):
        if percent < upper:
            return label
    return "Obese"
