"""Tests for body composition formulas."""

import pytest

from health_metrics.domain.models import Sex
from health_metrics.services.body_composition import (
    classify_bmi,
    classify_body_fat,
    compute_bmi,
    compute_body_fat_percent,
)


def test_compute_bmi_reference_value() -> None:
    assert compute_bmi(170, 70) == pytest.approx(24.22, abs=0.01)


@pytest.mark.parametrize(
    ("height_cm", "weight_kg"),
    [(None, 70), (170, None), (0, 70), (170, 0), (-170, 70), (170, -1)],
)
def test_compute_bmi_missing_or_invalid_is_none(height_cm, weight_kg) -> None:
    assert compute_bmi(height_cm, weight_kg) is None


def test_compute_bmi_monotonic() -> None:
    assert compute_bmi(180, 70) < compute_bmi(170, 70)
    assert compute_bmi(170, 75) > compute_bmi(170, 70)


@pytest.mark.parametrize(
    ("bmi", "label"),
    [
        (18.4, "Underweight"),
        (18.5, "Normal"),
        (24.9, "Normal"),
        (25.0, "Overweight"),
        (29.99, "Overweight"),
        (30.0, "Obese"),
    ],
)
def test_classify_bmi_lower_bounds_inclusive(bmi: float, label: str) -> None:
    assert classify_bmi(bmi) == label


def test_body_fat_none_without_bmi() -> None:
    assert compute_body_fat_percent(None, 30, Sex.MALE) is None


def test_body_fat_deurenberg_male_and_female() -> None:
    male = compute_body_fat_percent(24.0, 40, Sex.MALE)
    female = compute_body_fat_percent(24.0, 40, Sex.FEMALE)

    assert male == pytest.approx(1.2 * 24 + 0.23 * 40 - 10.8 - 5.4)
    assert female == pytest.approx(1.2 * 24 + 0.23 * 40 - 5.4)


def test_body_fat_defaults_age_and_sex() -> None:
    result = compute_body_fat_percent(22.0, None, Sex.UNSPECIFIED)

    assert result == pytest.approx(1.2 * 22 + 0.23 * 30 - 10.8 * 0.5 - 5.4)


def test_body_fat_is_clamped() -> None:
    assert compute_body_fat_percent(5.0, 18, Sex.MALE) == 3.0
    assert compute_body_fat_percent(70.0, 90, Sex.FEMALE) == 60.0


@pytest.mark.parametrize(
    ("percent", "sex", "label"),
    [
        (5.9, Sex.MALE, "Essential"),
        (6.0, Sex.MALE, "Athletic"),
        (17.9, Sex.MALE, "Fitness"),
        (24.0, Sex.MALE, "Average"),
        (29.0, Sex.MALE, "Above Avg"),
        (30.0, Sex.MALE, "Obese"),
        (13.0, Sex.FEMALE, "Essential"),
        (21.0, Sex.FEMALE, "Fitness"),
        (31.9, Sex.FEMALE, "Average"),
        (37.0, Sex.FEMALE, "Above Avg"),
        (38.0, Sex.FEMALE, "Obese"),
        (9.9, Sex.UNSPECIFIED, "Essential"),
        (18.0, Sex.UNSPECIFIED, "Fitness"),
        (28.0, Sex.UNSPECIFIED, "Above Avg"),
        (35.0, Sex.UNSPECIFIED, "Obese"),
        (20.0, None, "Fitness"),
    ],
)
def test_classify_body_fat_thresholds(percent: float, sex: Sex, label: str) -> None:
    assert classify_body_fat(percent, sex) == label
