"""Domain models for user profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

GENDERS = ("male", "female", "other")
ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "very_active")
DIETARY_GOALS = ("lose_weight", "maintain", "gain_muscle")
SUBSCRIPTION_TIERS = ("free", "premium")


@dataclass(frozen=True)
class Profile:
    """Body metrics, goals and subscription tier for one user."""

    id: int
    user_id: UUID
    height: int | None
    weight: float | None
    age: int | None
    gender: str | None
    activity_level: str | None
    dietary_goals: str | None
    dietary_restrictions: str | None
    subscription_tier: str
    updated_at: datetime | None
