"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, Request, status

from lishe.api.schemas import FoodCreate, FoodUpdate  # noqa: TC001
from lishe.api.serializers import serialize_food
from lishe.errors import UnauthorizedError

if TYPE_CHECKING:
    from lishe.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise UnauthorizedError()


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.post(
    "/foods",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_food(payload: FoodCreate, request: Request) -> dict[str, object]:
    """Add an entry to the food catalog."""
    container: AppContainer = request.app.state.container
    food = container.catalog_service.create_food(payload.model_dump())
    return serialize_food(food)


@router.put("/foods/{food_id}", dependencies=[Depends(require_admin)])
async def update_food(
    food_id: int, payload: FoodUpdate, request: Request
) -> dict[str, object]:
    """Edit a catalog entry; existing meal logs keep their snapshots."""
    container: AppContainer = request.app.state.container
    food = container.catalog_service.update_food(
        food_id, payload.model_dump(exclude_unset=True)
    )
    return serialize_food(food)
