"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from lishe.domain.profiles import Profile
from lishe.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles keyed by a unique user_id."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def upsert_profile(self, user_id: UUID, fields: dict[str, object]) -> Profile:
        """Insert or update in one statement using the user_id unique index."""
        response = (
            self.client.table("profiles")
            .upsert(
                {
                    **fields,
                    "user_id": str(user_id),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> Profile:
    updated_raw = row.get("updated_at")
    updated_at = (
        datetime.fromisoformat(updated_raw)
        if isinstance(updated_raw, str) and updated_raw
        else None
    )
    weight = row.get("weight")
    return Profile(
        id=int(row["id"]),
        user_id=UUID(str(row["user_id"])),
        height=row.get("height"),
        weight=float(weight) if isinstance(weight, int | float) else None,
        age=row.get("age"),
        gender=row.get("gender"),
        activity_level=row.get("activity_level"),
        dietary_goals=row.get("dietary_goals"),
        dietary_restrictions=row.get("dietary_restrictions"),
        subscription_tier=str(row.get("subscription_tier") or "free"),
        updated_at=updated_at,
    )
