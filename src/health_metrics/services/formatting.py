"""Display-unit formatting for weights and heights."""

import math

from health_metrics.domain.models import UnitPreference, round_half_away

LB_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12
NOT_SET = "Not set"


def kg_to_lb(weight_kg: float) -> float:
    return weight_kg * LB_PER_KG


def lb_to_kg(weight_lb: float) -> float:
    return weight_lb / LB_PER_KG


def weight_unit(unit: UnitPreference) -> str:
    return "kg" if unit is UnitPreference.METRIC else "lbs"


def display_weight(weight_kg: float, unit: UnitPreference) -> float:
    """Convert a stored kilogram value to the display unit."""
    return weight_kg if unit is UnitPreference.METRIC else kg_to_lb(weight_kg)


def format_weight(
    weight_kg: float | None, unit: UnitPreference, decimal_places: int = 1
) -> str:
    """Format a weight such as ``70.0 kg`` or ``154.3 lbs``."""
    if weight_kg is None:
        return NOT_SET
    value = display_weight(weight_kg, unit)
    return f"{value:.{decimal_places}f} {weight_unit(unit)}"


def format_height(height_cm: float | None, unit: UnitPreference) -> str:
    """Format a height in centimeters or feet and inches."""
    if height_cm is None:
        return NOT_SET
    if unit is UnitPreference.METRIC:
        return f"{float(height_cm)} cm"
    total_inches = height_cm / CM_PER_INCH
    feet = math.floor(total_inches / INCHES_PER_FOOT)
    inches = round_half_away(total_inches % INCHES_PER_FOOT)
    if inches == INCHES_PER_FOOT:
        feet += 1
        inches = 0
    return f"{feet}' {inches}\""
