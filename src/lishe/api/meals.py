"""Meal log and daily summary endpoints."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Request, Response, status

from lishe.api.dependencies import require_user
from lishe.api.schemas import MealCreate  # noqa: TC001
from lishe.api.serializers import serialize_meal, serialize_summary
from lishe.domain.meals import MealSelection
from lishe.services.meals import parse_day

if TYPE_CHECKING:
    from lishe.containers import AppContainer

router = APIRouter(tags=["meals"])


@router.get("/meals")
async def list_meals(
    request: Request,
    date: str | None = None,
    user_id: UUID = Depends(require_user),
) -> list[dict[str, object]]:
    """List the caller's meal logs, optionally for one day."""
    container: AppContainer = request.app.state.container
    day = parse_day(date) if date else None
    meals = container.meal_log_service.list_meals(user_id, day)
    return [serialize_meal(meal) for meal in meals]


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def create_meal(
    payload: MealCreate, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Compose and store a meal from catalog selections."""
    container: AppContainer = request.app.state.container
    meal = container.meal_log_service.compose(
        user_id=user_id,
        selections=[
            MealSelection(food_id=item.food_id, quantity_g=item.quantity_g)
            for item in payload.food_items
        ],
        meal_type=payload.meal_type,
        logged_at=payload.date,
    )
    return serialize_meal(meal)


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: int, request: Request, user_id: UUID = Depends(require_user)
) -> Response:
    """Delete one of the caller's meal logs."""
    container: AppContainer = request.app.state.container
    container.meal_log_service.delete_meal(user_id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/summary")
async def daily_summary(
    request: Request,
    date: str | None = None,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Return totals for a day (today in the configured timezone by default)."""
    container: AppContainer = request.app.state.container
    if date:
        day = parse_day(date)
    else:
        tz = ZoneInfo(container.settings.meal_day_timezone)
        day = datetime.now(tz=UTC).astimezone(tz).date()
    return serialize_summary(container.summary_service.summarize(user_id, day))
