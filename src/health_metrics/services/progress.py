"""Progress toward a target body weight."""

from health_metrics.domain.models import UnitPreference
from health_metrics.services.formatting import display_weight, weight_unit

GOAL_TOLERANCE_KG = 0.1
_ASSUMED_START_OFFSET = 0.2


def goal_progress(
    current_weight_kg: float | None, target_weight_kg: float | None
) -> float:
    """Return progress toward the target as a fraction in [0, 1].

    No start weight is tracked, so the start is assumed to be 20% above the
    target for loss and 20% below it for gain.
    """
    if current_weight_kg is None or target_weight_kg is None:
        return 0.0
    if abs(target_weight_kg - current_weight_kg) < GOAL_TOLERANCE_KG:
        return 1.0
    if current_weight_kg > target_weight_kg:
        start = target_weight_kg * (1 + _ASSUMED_START_OFFSET)
        progress = (start - current_weight_kg) / (start - target_weight_kg)
    else:
        start = target_weight_kg * (1 - _ASSUMED_START_OFFSET)
        progress = (current_weight_kg - start) / (target_weight_kg - start)
    return min(max(progress, 0.0), 1.0)


def remaining_weight_to_goal(
    current_weight_kg: float | None, target_weight_kg: float | None
) -> float | None:
    """Return kilograms left to the target; positive means weight to lose."""
    if current_weight_kg is None or target_weight_kg is None:
        return None
    return current_weight_kg - target_weight_kg


def weight_change_direction_text(
    current_weight_kg: float | None,
    target_weight_kg: float | None,
    unit: UnitPreference,
) -> str:
    """Describe the remaining change, e.g. ``4.5 kg to lose``."""
    difference = remaining_weight_to_goal(current_weight_kg, target_weight_kg)
    if difference is None:
        return "Set a target weight to track progress"
    if abs(difference) < GOAL_TOLERANCE_KG:
        return "Goal achieved!"
    amount = display_weight(abs(difference), unit)
    direction = "to lose" if difference > 0 else "to gain"
    return f"{amount:.1f} {weight_unit(unit)} {direction}"
