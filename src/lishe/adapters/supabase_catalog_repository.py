"""Supabase repository for the reference food catalog."""

from dataclasses import dataclass

from supabase import Client

from lishe.domain.catalog import FoodItem
from lishe.services.catalog import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase-backed food catalog."""

    client: Client

    def search_foods(self, term: str | None, category: str | None) -> list[FoodItem]:
        """Filter by name substring and category inside the query."""
        query = self.client.table("foods").select("*")
        if term:
            query = query.ilike("name", f"%{_escape_like(term)}%")
        if category:
            query = query.eq("category", category)
        response = query.order("id", desc=False).execute()
        return [_parse_food(row) for row in response.data or []]

    def get_foods(self, food_ids: list[int]) -> list[FoodItem]:
        """Return foods by id."""
        if not food_ids:
            return []
        response = self.client.table("foods").select("*").in_("id", food_ids).execute()
        return [_parse_food(row) for row in response.data or []]

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a catalog entry and return it."""
        response = self.client.table("foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return _parse_food(response.data[0])

    def update_food(self, food_id: int, payload: dict[str, object]) -> FoodItem | None:
        """Update a catalog entry and return it."""
        response = (
            self.client.table("foods").update(payload).eq("id", food_id).execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def has_foods(self) -> bool:
        """Return True when at least one food exists."""
        response = self.client.table("foods").select("id").limit(1).execute()
        return bool(response.data)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _optional_float(value: object) -> float | None:
    return float(value) if isinstance(value, int | float) else None


def _parse_food(row: dict[str, object]) -> FoodItem:
    return FoodItem(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        category=row.get("category"),
        calories=int(row.get("calories", 0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        fiber=_optional_float(row.get("fiber")),
        vitamin_a=_optional_float(row.get("vitamin_a")),
        iron=_optional_float(row.get("iron")),
        is_kenya_specific=bool(row.get("is_kenya_specific") or False),
    )
