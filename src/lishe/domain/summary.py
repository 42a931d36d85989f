"""Domain models for daily summaries."""

from dataclasses import dataclass
from datetime import date

from lishe.domain.meals import LoggedMeal


@dataclass(frozen=True)
class DailySummary:
    """Totals for one calendar day compared with the calorie target."""

    day: date
    total_calories: int
    protein: float
    carbs: float
    fat: float
    target_calories: int
    entries: list[LoggedMeal]
