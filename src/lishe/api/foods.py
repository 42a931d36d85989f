"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from lishe.api.dependencies import require_user
from lishe.api.serializers import serialize_food

if TYPE_CHECKING:
    from lishe.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def search_foods(
    request: Request,
    search: str | None = None,
    category: str | None = None,
    _user_id: UUID = Depends(require_user),
) -> list[dict[str, object]]:
    """Search the catalog by name substring and category."""
    container: AppContainer = request.app.state.container
    foods = container.catalog_service.search(search, category)
    return [serialize_food(food) for food in foods]
