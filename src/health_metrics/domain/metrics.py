"""Derived metric records returned by the engine."""

from dataclasses import dataclass, field
from datetime import date

from health_metrics.domain.models import MealSlot, NutritionTotals


@dataclass(frozen=True)
class CalorieTargets:
    """Coarse calorie bands around maintenance."""

    lose: int
    maintain: int
    gain: int


@dataclass(frozen=True)
class DailyCalorieNeeds:
    """Calorie intake for fixed weekly rates of change."""

    maintenance: int = 0
    lose_slow: int = 0
    lose_medium: int = 0
    lose_fast: int = 0
    gain_slow: int = 0
    gain_medium: int = 0
    gain_fast: int = 0


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient percentages of daily calories."""

    protein_pct: int
    carbs_pct: int
    fat_pct: int
    protein_per_kg: float | None = None
    recommended_protein_g: int | None = None


@dataclass(frozen=True)
class MacroGrams:
    """Gram equivalents of a macro split for a calorie target."""

    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class ExerciseRecommendation:
    """Supplementary exercise calorie budget."""

    daily_burn: int = 0
    weekly_burn: int = 0
    light_minutes: int = 0
    moderate_minutes: int = 0
    intense_minutes: int = 0
    recommendation_type: str = "none"
    safety_adjusted: bool = False


@dataclass(frozen=True)
class MacroPercentages:
    """Share of macro calories per macronutrient."""

    protein: int = 0
    carbs: int = 0
    fat: int = 0


@dataclass(frozen=True)
class DaySummary:
    """Aggregated nutrition for one day of food entries."""

    totals: NutritionTotals
    macro_pct: MacroPercentages
    meals: dict[MealSlot, NutritionTotals] = field(default_factory=dict)
    day: date | None = None

    @property
    def total_calories(self) -> float:
        return self.totals.calories


@dataclass(frozen=True)
class PeriodSummary:
    """Daily summaries and averages for a window of days."""

    daily: list[DaySummary]
    avg_calories: float
    avg_protein_g: float
    avg_carbs_g: float
    avg_fat_g: float


@dataclass(frozen=True)
class DerivedMetrics:
    """Full set of metrics for a profile and current weight."""

    bmi: float | None
    bmi_label: str | None
    body_fat_percent: float | None
    body_fat_label: str | None
    bmr: float | None
    tdee: float | None
    activity_label: str
    calorie_targets: CalorieTargets
    calorie_needs: DailyCalorieNeeds
    recommended_calories: int
    goal_description: str
    safety_adjusted: bool
    macros: MacroSplit
    macro_grams: MacroGrams
    exercise: ExerciseRecommendation
    missing_fields: list[str]


@dataclass(frozen=True)
class CalorieProgress:
    """Day intake measured against a calorie target."""

    fraction: float = 0.0
    remaining: float = 0.0

    @property
    def is_over(self) -> bool:
        return self.remaining < 0


@dataclass(frozen=True)
class WeightLossPlan:
    """Calorie deficit needed to reach a target weight, split diet/exercise."""

    weekly_deficit: int = 0
    daily_deficit: int = 0
    daily_exercise_calories: int = 0
    daily_diet_calories: int = 0
