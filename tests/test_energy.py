"""Tests for energy expenditure formulas."""

import pytest

from health_metrics.domain.models import Sex
from health_metrics.services.energy import (
    activity_level_label,
    compute_bmr,
    compute_tdee,
)


def test_compute_bmr_male() -> None:
    assert compute_bmr(70, 175, 30, Sex.MALE) == 1648.75


def test_compute_bmr_female() -> None:
    assert compute_bmr(70, 175, 30, Sex.FEMALE) == 1482.75


def test_compute_bmr_unspecified_is_mean_of_both() -> None:
    male = compute_bmr(82, 168, 45, Sex.MALE)
    female = compute_bmr(82, 168, 45, Sex.FEMALE)

    assert compute_bmr(82, 168, 45, Sex.UNSPECIFIED) == pytest.approx(
        (male + female) / 2
    )
    assert compute_bmr(82, 168, 45, None) == pytest.approx((male + female) / 2)


@pytest.mark.parametrize(
    ("weight_kg", "height_cm", "age_years"),
    [(None, 175, 30), (70, None, 30), (70, 175, None)],
)
def test_compute_bmr_missing_input(weight_kg, height_cm, age_years) -> None:
    assert compute_bmr(weight_kg, height_cm, age_years, Sex.MALE) is None


def test_compute_tdee() -> None:
    assert compute_tdee(1500, 1.5) == 2250
    assert compute_tdee(None, 1.5) is None
    assert compute_tdee(1500, None) is None


@pytest.mark.parametrize(
    ("multiplier", "label"),
    [
        (None, "Not set"),
        (1.2, "Sedentary"),
        (1.3, "Light Activity"),
        (1.45, "Moderate Activity"),
        (1.55, "Moderate Activity"),
        (1.725, "Active"),
        (1.8, "Very Active"),
        (1.9, "Very Active"),
    ],
)
def test_activity_level_label(multiplier, label: str) -> None:
    assert activity_level_label(multiplier) == label
