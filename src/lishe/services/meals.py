"""Meal logging service."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from lishe.domain.catalog import FoodItem
from lishe.domain.meals import (
    MEAL_TYPES,
    FoodEntry,
    LoggedMeal,
    MacroSnapshot,
    MealSelection,
)
from lishe.errors import ValidationError
from lishe.services.catalog import CatalogService

_logger = logging.getLogger(__name__)


class MealLogRepository(Protocol):
    """Persistence interface for meal logs."""

    def create_meal_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        logged_at: datetime,
        meal_type: str,
        food_items: list[FoodEntry],
        total_calories: int,
    ) -> LoggedMeal:
        """Insert a meal log row with its entries and return it."""

    def list_meal_logs(
        self, user_id: UUID, start: datetime | None, end: datetime | None
    ) -> list[LoggedMeal]:
        """Return the user's logs in [start, end), most recent first."""

    def list_recent_meal_logs(self, user_id: UUID, limit: int) -> list[LoggedMeal]:
        """Return the user's most recent logs."""

    def delete_meal_log(self, user_id: UUID, meal_id: int) -> bool:
        """Delete an owned log and return whether a row was removed."""


@dataclass
class MealLogService:
    """Service that composes meal logs from catalog selections."""

    catalog_service: CatalogService
    repository: MealLogRepository
    timezone_name: str = "UTC"

    def compose(
        self,
        user_id: UUID,
        selections: list[MealSelection],
        meal_type: str,
        logged_at: datetime | date | str,
    ) -> LoggedMeal:
        """Scale catalog macros by portion and persist one meal log."""
        if not selections:
            raise ValidationError("A meal needs at least one food item", "foodItems")
        for selection in selections:
            if not math.isfinite(selection.quantity_g) or selection.quantity_g <= 0:
                raise ValidationError(
                    "quantity_g must be a positive number", "quantity_g"
                )
        if meal_type not in MEAL_TYPES:
            raise ValidationError(
                f"mealType must be one of: {', '.join(MEAL_TYPES)}", "mealType"
            )
        moment = parse_log_date(logged_at, self.timezone_name)

        foods = self.catalog_service.get_foods([item.food_id for item in selections])
        entries = [
            _scale_entry(foods[item.food_id], item.quantity_g) for item in selections
        ]
        calories = sum(entry.calories for entry in entries)
        if not math.isfinite(calories) or not all(map(_is_finite_entry, entries)):
            raise ValidationError("quantity_g is too large", "quantity_g")
        total_calories = round(calories)
        meal = self.repository.create_meal_log(
            user_id=user_id,
            logged_at=moment,
            meal_type=meal_type,
            food_items=entries,
            total_calories=total_calories,
        )
        _logger.info(
            "Meal logged",
            extra={"meal_id": meal.id, "total_calories": meal.total_calories},
        )
        return meal

    def list_meals(self, user_id: UUID, day: date | None = None) -> list[LoggedMeal]:
        """Return the user's logs, optionally limited to one calendar day."""
        if day is None:
            return self.repository.list_meal_logs(user_id, None, None)
        start, end = day_window(day, self.timezone_name)
        return self.repository.list_meal_logs(user_id, start, end)

    def list_recent(self, user_id: UUID, limit: int) -> list[LoggedMeal]:
        """Return the most recent logs."""
        return self.repository.list_recent_meal_logs(user_id, limit)

    def delete_meal(self, user_id: UUID, meal_id: int) -> bool:
        """Delete an owned log; other users' logs are left untouched."""
        return self.repository.delete_meal_log(user_id, meal_id)


def day_window(day: date, timezone_name: str) -> tuple[datetime, datetime]:
    """Return the UTC [start, next start) bounds of a calendar day."""
    tz = ZoneInfo(timezone_name)
    start = datetime(day.year, day.month, day.day, tzinfo=tz)
    end = start + timedelta(days=1)
    return start.astimezone(UTC), end.astimezone(UTC)


def parse_log_date(value: datetime | date | str, timezone_name: str) -> datetime:
    """Parse an ISO day or datetime, treating naive values as local to the policy tz."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValidationError("date must be an ISO date", "date") from exc
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=ZoneInfo(timezone_name))
    return value.astimezone(UTC)


def parse_day(value: str) -> date:
    """Parse an ISO calendar day from a query parameter."""
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError as exc:
        raise ValidationError("date must be an ISO date (YYYY-MM-DD)", "date") from exc


def _scale_entry(food: FoodItem, quantity_g: float) -> FoodEntry:
    factor = quantity_g / 100.0
    return FoodEntry(
        food_id=food.id,
        name=food.name,
        quantity_g=quantity_g,
        calories=food.calories * factor,
        macros=MacroSnapshot(
            protein=food.protein * factor,
            carbs=food.carbs * factor,
            fat=food.fat * factor,
        ),
    )


def _is_finite_entry(entry: FoodEntry) -> bool:
    macros = entry.macros
    return all(
        math.isfinite(value)
        for value in (entry.calories, macros.protein, macros.carbs, macros.fat)
    )
