"""Daily nutrition summaries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from lishe.domain.meals import LoggedMeal
from lishe.domain.summary import DailySummary
from lishe.services.meals import MealLogService
from lishe.services.profiles import ProfileService

LOSE_WEIGHT_TARGET = 1800
DEFAULT_TARGET = 2200


@dataclass
class SummaryService:
    """Reduces a day's meal logs into totals and a calorie target."""

    meal_log_service: MealLogService
    profile_service: ProfileService

    def summarize(self, user_id: UUID, day: date) -> DailySummary:
        """Return totals for the day from the logs' frozen snapshots."""
        logs = self.meal_log_service.list_meals(user_id, day)
        profile = self.profile_service.get_profile(user_id)
        goal = profile.dietary_goals if profile else None
        return _aggregate_day(day, logs, target_calories(goal))


def target_calories(dietary_goal: str | None) -> int:
    """Map a dietary goal to a daily calorie target."""
    if dietary_goal == "lose_weight":
        return LOSE_WEIGHT_TARGET
    return DEFAULT_TARGET


def _aggregate_day(day: date, logs: list[LoggedMeal], target: int) -> DailySummary:
    calories = 0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    for log in logs:
        calories += log.total_calories
        for entry in log.food_items:
            protein += entry.macros.protein
            carbs += entry.macros.carbs
            fat += entry.macros.fat
    return DailySummary(
        day=day,
        total_calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        target_calories=target,
        entries=logs,
    )
