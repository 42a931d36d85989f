"""Domain models for the reference food catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """Catalog entry with nutrient values per 100g."""

    id: int
    name: str
    category: str | None
    calories: int
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    vitamin_a: float | None = None
    iron: float | None = None
    is_kenya_specific: bool = False
