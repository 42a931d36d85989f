"""Profile services."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from lishe.domain.profiles import (
    ACTIVITY_LEVELS,
    DIETARY_GOALS,
    GENDERS,
    SUBSCRIPTION_TIERS,
    Profile,
)
from lishe.errors import ValidationError

PROFILE_FIELDS = (
    "height",
    "weight",
    "age",
    "gender",
    "activity_level",
    "dietary_goals",
    "dietary_restrictions",
    "subscription_tier",
)

_CHOICES: dict[str, tuple[str, ...]] = {
    "gender": GENDERS,
    "activity_level": ACTIVITY_LEVELS,
    "dietary_goals": DIETARY_GOALS,
    "subscription_tier": SUBSCRIPTION_TIERS,
}


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile owned by the user, if any."""

    def upsert_profile(self, user_id: UUID, fields: dict[str, object]) -> Profile:
        """Atomically insert or update the user's single profile row."""


@dataclass
class ProfileService:
    """Application service for user profiles."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile or None when it was never created."""
        return self.repository.get_profile(user_id)

    def upsert_profile(self, user_id: UUID, fields: dict[str, object]) -> Profile:
        """Create the profile on first write, update it in place afterwards."""
        return self.repository.upsert_profile(user_id, _validate_fields(fields))

    def change_tier(self, user_id: UUID, tier: str) -> Profile:
        """Switch the subscription tier."""
        return self.upsert_profile(user_id, {"subscription_tier": tier})


def _validate_fields(fields: dict[str, object]) -> dict[str, object]:
    cleaned: dict[str, object] = {}
    for key, value in fields.items():
        if key not in PROFILE_FIELDS:
            continue
        if key in _CHOICES and value is not None and value not in _CHOICES[key]:
            raise ValidationError(
                f"{key} must be one of: {', '.join(_CHOICES[key])}", field=key
            )
        if key in {"height", "weight", "age"} and value is not None and value <= 0:
            raise ValidationError(f"{key} must be positive", field=key)
        cleaned[key] = value
    if "subscription_tier" in cleaned and cleaned["subscription_tier"] is None:
        raise ValidationError(
            "subscription_tier is required", field="subscription_tier"
        )
    return cleaned
