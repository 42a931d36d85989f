"""Profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from lishe.api.dependencies import require_user
from lishe.api.schemas import ProfileUpdate, TierChange  # noqa: TC001
from lishe.api.serializers import serialize_profile

if TYPE_CHECKING:
    from lishe.containers import AppContainer

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object] | None:
    """Return the caller's profile, or null before the first save."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    return serialize_profile(profile) if profile else None


@router.post("")
async def upsert_profile(
    payload: ProfileUpdate, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Create or update the caller's profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.upsert_profile(
        user_id, payload.model_dump(exclude_unset=True)
    )
    return serialize_profile(profile)


@router.post("/upgrade")
async def upgrade_profile(
    payload: TierChange, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Change the caller's subscription tier."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.change_tier(user_id, payload.tier)
    return serialize_profile(profile)
