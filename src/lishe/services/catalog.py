"""Reference food catalog services."""

import logging
from dataclasses import dataclass
from typing import Protocol

from lishe.domain.catalog import FoodItem
from lishe.errors import NotFoundError, ValidationError

_logger = logging.getLogger(__name__)

_MACRO_FIELDS = ("protein", "carbs", "fat")
_OPTIONAL_FIELDS = ("fiber", "vitamin_a", "iron")
_NULLABLE_FIELDS = ("category", *_OPTIONAL_FIELDS)

KENYA_FOODS: list[dict[str, object]] = [
    {
        "name": "Ugali (Maize Meal)",
        "category": "Cereals",
        "calories": 365,
        "protein": 7.0,
        "carbs": 78.0,
        "fat": 1.0,
        "is_kenya_specific": True,
    },
    {
        "name": "Sukuma Wiki (Collard Greens)",
        "category": "Vegetables",
        "calories": 32,
        "protein": 3.0,
        "carbs": 5.4,
        "fat": 0.7,
        "vitamin_a": 500,
        "iron": 1.5,
        "is_kenya_specific": True,
    },
    {
        "name": "Githeri (Maize & Beans)",
        "category": "Mixed",
        "calories": 150,
        "protein": 6.0,
        "carbs": 25.0,
        "fat": 1.5,
        "is_kenya_specific": True,
    },
    {
        "name": "Chapati",
        "category": "Cereals",
        "calories": 297,
        "protein": 8.0,
        "carbs": 46.0,
        "fat": 9.0,
        "is_kenya_specific": True,
    },
    {
        "name": "Nyama Choma (Roasted Goat)",
        "category": "Meat",
        "calories": 143,
        "protein": 27.0,
        "carbs": 0.0,
        "fat": 3.0,
        "is_kenya_specific": True,
    },
    {
        "name": "Kachumbari",
        "category": "Vegetables",
        "calories": 45,
        "protein": 1.0,
        "carbs": 10.0,
        "fat": 0.2,
        "is_kenya_specific": True,
    },
    {
        "name": "Matoke (Green Bananas)",
        "category": "Fruits/Starch",
        "calories": 122,
        "protein": 1.3,
        "carbs": 31.0,
        "fat": 0.3,
        "is_kenya_specific": True,
    },
    {
        "name": "Chai (Tea with Milk)",
        "category": "Beverages",
        "calories": 60,
        "protein": 3.0,
        "carbs": 5.0,
        "fat": 3.0,
        "is_kenya_specific": True,
    },
    {
        "name": "Mandazi",
        "category": "Snacks",
        "calories": 300,
        "protein": 5.0,
        "carbs": 45.0,
        "fat": 10.0,
        "is_kenya_specific": True,
    },
    {
        "name": "Mukimo",
        "category": "Mixed",
        "calories": 180,
        "protein": 4.0,
        "carbs": 35.0,
        "fat": 2.0,
        "is_kenya_specific": True,
    },
]


class CatalogRepository(Protocol):
    """Persistence interface for the food catalog."""

    def search_foods(self, term: str | None, category: str | None) -> list[FoodItem]:
        """Return foods matching the filters in insertion order."""

    def get_foods(self, food_ids: list[int]) -> list[FoodItem]:
        """Return the foods with the given ids that exist."""

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a catalog entry and return it."""

    def update_food(self, food_id: int, payload: dict[str, object]) -> FoodItem | None:
        """Update a catalog entry, returning None when it does not exist."""

    def has_foods(self) -> bool:
        """Return True when the catalog holds at least one entry."""


@dataclass
class CatalogService:
    """Application service for the reference food catalog."""

    repository: CatalogRepository

    def search(
        self, term: str | None = None, category: str | None = None
    ) -> list[FoodItem]:
        """Search by case-insensitive name substring and exact category."""
        return self.repository.search_foods(term or None, category or None)

    def get_foods(self, food_ids: list[int]) -> dict[int, FoodItem]:
        """Resolve ids to foods, raising NotFoundError for any missing id."""
        unique_ids = list(dict.fromkeys(food_ids))
        found = {food.id: food for food in self.repository.get_foods(unique_ids)}
        missing = [food_id for food_id in unique_ids if food_id not in found]
        if missing:
            raise NotFoundError(f"Food {missing[0]} not found", field="foodId")
        return found

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Validate and create a catalog entry."""
        return self.repository.create_food(_validate_food(payload, partial=False))

    def update_food(self, food_id: int, payload: dict[str, object]) -> FoodItem:
        """Validate and update a catalog entry."""
        updated = self.repository.update_food(
            food_id, _validate_food(payload, partial=True)
        )
        if updated is None:
            raise NotFoundError(f"Food {food_id} not found")
        return updated

    def seed_defaults(self) -> int:
        """Seed the Kenyan reference foods when the catalog is empty."""
        if self.repository.has_foods():
            return 0
        for food in KENYA_FOODS:
            self.repository.create_food(dict(food))
        _logger.info("Seeded food catalog", extra={"count": len(KENYA_FOODS)})
        return len(KENYA_FOODS)


def _validate_food(payload: dict[str, object], *, partial: bool) -> dict[str, object]:
    cleaned = {
        key: value
        for key, value in payload.items()
        if value is not None or (partial and key in _NULLABLE_FIELDS)
    }
    if not partial:
        for key in ("name", "calories", *_MACRO_FIELDS):
            if key not in cleaned:
                raise ValidationError(f"{key} is required", field=key)
    if "name" in cleaned and not str(cleaned["name"]).strip():
        raise ValidationError("name must not be empty", field="name")
    if "calories" in cleaned and int(cleaned["calories"]) < 0:
        raise ValidationError("calories must be non-negative", field="calories")
    for key in (*_MACRO_FIELDS, *_OPTIONAL_FIELDS):
        if cleaned.get(key) is not None and float(cleaned[key]) < 0:
            raise ValidationError(f"{key} must be non-negative", field=key)
    return cleaned
