"""Domain models for reminders."""

from dataclasses import dataclass
from uuid import UUID

REMINDER_TYPES = ("water", "meal", "snack", "supplement")


@dataclass(frozen=True)
class Reminder:
    """Daily time-of-day notice shown to the user."""

    id: int
    user_id: UUID
    time: str
    type: str
    message: str
    is_active: bool
