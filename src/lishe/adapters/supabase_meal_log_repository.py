"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from lishe.domain.meals import FoodEntry, LoggedMeal, MacroSnapshot
from lishe.services.meals import MealLogRepository


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation storing entries in a JSON column."""

    client: Client

    def create_meal_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        logged_at: datetime,
        meal_type: str,
        food_items: list[FoodEntry],
        total_calories: int,
    ) -> LoggedMeal:
        """Insert the log and its entries as a single row."""
        response = (
            self.client.table("meal_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": logged_at.isoformat(),
                    "meal_type": meal_type,
                    "food_items": [_dump_entry(entry) for entry in food_items],
                    "total_calories": total_calories,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return _parse_meal(response.data[0])

    def list_meal_logs(
        self, user_id: UUID, start: datetime | None, end: datetime | None
    ) -> list[LoggedMeal]:
        """Return logs in [start, end), newest first."""
        query = self.client.table("meal_logs").select("*").eq("user_id", str(user_id))
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lt("date", end.isoformat())
        response = query.order("date", desc=True).execute()
        return [_parse_meal(row) for row in response.data or []]

    def list_recent_meal_logs(self, user_id: UUID, limit: int) -> list[LoggedMeal]:
        """Return recent meal logs for a user."""
        response = (
            self.client.table("meal_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def delete_meal_log(self, user_id: UUID, meal_id: int) -> bool:
        """Delete a log only when the user owns it."""
        response = (
            self.client.table("meal_logs")
            .delete()
            .eq("id", meal_id)
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _dump_entry(entry: FoodEntry) -> dict[str, object]:
    return {
        "foodId": entry.food_id,
        "name": entry.name,
        "quantity_g": entry.quantity_g,
        "calories": entry.calories,
        "macros": {
            "protein": entry.macros.protein,
            "carbs": entry.macros.carbs,
            "fat": entry.macros.fat,
        },
    }


def _parse_entry(raw: dict[str, object]) -> FoodEntry:
    macros = raw.get("macros") or {}
    return FoodEntry(
        food_id=int(raw.get("foodId", 0)),
        name=str(raw.get("name", "")),
        quantity_g=float(raw.get("quantity_g", 0.0)),
        calories=float(raw.get("calories", 0.0)),
        macros=MacroSnapshot(
            protein=float(macros.get("protein", 0.0)),
            carbs=float(macros.get("carbs", 0.0)),
            fat=float(macros.get("fat", 0.0)),
        ),
    )


def _parse_meal(row: dict[str, object]) -> LoggedMeal:
    return LoggedMeal(
        id=int(row["id"]),
        user_id=UUID(str(row["user_id"])),
        date=datetime.fromisoformat(str(row["date"])),
        meal_type=str(row.get("meal_type", "")),
        food_items=[_parse_entry(item) for item in row.get("food_items") or []],
        total_calories=int(row.get("total_calories", 0)),
    )
