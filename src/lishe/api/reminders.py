"""Reminder endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response, status

from lishe.api.dependencies import require_user
from lishe.api.schemas import ReminderCreate, ReminderUpdate  # noqa: TC001
from lishe.api.serializers import serialize_reminder

if TYPE_CHECKING:
    from lishe.containers import AppContainer

router = APIRouter(prefix="/reminders", tags=["reminders"])


@router.get("")
async def list_reminders(
    request: Request, user_id: UUID = Depends(require_user)
) -> list[dict[str, object]]:
    """List the caller's reminders."""
    container: AppContainer = request.app.state.container
    reminders = container.reminder_service.list_reminders(user_id)
    return [serialize_reminder(reminder) for reminder in reminders]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_reminder(
    payload: ReminderCreate, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Create a reminder."""
    container: AppContainer = request.app.state.container
    reminder = container.reminder_service.create_reminder(
        user_id,
        time=payload.time,
        reminder_type=payload.type,
        message=payload.message,
        is_active=payload.is_active,
    )
    return serialize_reminder(reminder)


@router.put("/{reminder_id}")
async def update_reminder(
    reminder_id: int,
    payload: ReminderUpdate,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Apply a partial update to a reminder."""
    container: AppContainer = request.app.state.container
    reminder = container.reminder_service.update_reminder(
        user_id, reminder_id, payload.model_dump(exclude_unset=True)
    )
    return serialize_reminder(reminder)


@router.delete("/{reminder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reminder(
    reminder_id: int, request: Request, user_id: UUID = Depends(require_user)
) -> Response:
    """Delete a reminder."""
    container: AppContainer = request.app.state.container
    container.reminder_service.delete_reminder(user_id, reminder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
