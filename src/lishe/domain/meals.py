"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class MealSelection:
    """A catalog food picked for a meal with its portion size."""

    food_id: int
    quantity_g: float


@dataclass(frozen=True)
class MacroSnapshot:
    """Macros already scaled to a logged portion."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class FoodEntry:
    """Frozen copy of a food item as it was logged."""

    food_id: int
    name: str
    quantity_g: float
    calories: float
    macros: MacroSnapshot


@dataclass(frozen=True)
class LoggedMeal:
    """Persisted meal log with its entries."""

    id: int
    user_id: UUID
    date: datetime
    meal_type: str
    food_items: list[FoodEntry]
    total_calories: int
