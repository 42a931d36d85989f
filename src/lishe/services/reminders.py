"""Reminder registry service."""

import re
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from lishe.domain.reminders import REMINDER_TYPES, Reminder
from lishe.errors import NotFoundError, ValidationError

_TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")
_UPDATABLE_FIELDS = ("time", "type", "message", "is_active")


class ReminderRepository(Protocol):
    """Persistence interface for reminders."""

    def list_reminders(self, user_id: UUID) -> list[Reminder]:
        """Return the user's reminders in insertion order."""

    def create_reminder(self, user_id: UUID, fields: dict[str, object]) -> Reminder:
        """Create a reminder row and return it."""

    def update_reminder(
        self, user_id: UUID, reminder_id: int, fields: dict[str, object]
    ) -> Reminder | None:
        """Update an owned reminder, returning None when no row matched."""

    def delete_reminder(self, user_id: UUID, reminder_id: int) -> bool:
        """Delete an owned reminder and return whether a row was removed."""


@dataclass
class ReminderService:
    """Stores reminders for display; nothing is scheduled or delivered."""

    repository: ReminderRepository

    def list_reminders(self, user_id: UUID) -> list[Reminder]:
        """Return the user's reminders."""
        return self.repository.list_reminders(user_id)

    def create_reminder(
        self,
        user_id: UUID,
        time: str,
        reminder_type: str,
        message: str,
        is_active: bool = True,
    ) -> Reminder:
        """Validate and create a reminder."""
        fields = _validate(
            {
                "time": time,
                "type": reminder_type,
                "message": message,
                "is_active": is_active,
            }
        )
        return self.repository.create_reminder(user_id, fields)

    def update_reminder(
        self, user_id: UUID, reminder_id: int, fields: dict[str, object]
    ) -> Reminder:
        """Apply a partial update to an owned reminder."""
        cleaned = _validate(
            {
                key: value
                for key, value in fields.items()
                if key in _UPDATABLE_FIELDS and value is not None
            }
        )
        if not cleaned:
            raise ValidationError("No reminder fields to update")
        updated = self.repository.update_reminder(user_id, reminder_id, cleaned)
        if updated is None:
            raise NotFoundError(f"Reminder {reminder_id} not found")
        return updated

    def delete_reminder(self, user_id: UUID, reminder_id: int) -> bool:
        """Delete an owned reminder; repeated deletes are a no-op."""
        return self.repository.delete_reminder(user_id, reminder_id)


def is_valid_time(value: str) -> bool:
    """Return True for HH:mm strings between 00:00 and 23:59."""
    return bool(_TIME_PATTERN.fullmatch(value))


def _validate(fields: dict[str, object]) -> dict[str, object]:
    if "time" in fields and not is_valid_time(str(fields["time"])):
        raise ValidationError("time must be HH:mm between 00:00 and 23:59", "time")
    if "type" in fields and fields["type"] not in REMINDER_TYPES:
        raise ValidationError(
            f"type must be one of: {', '.join(REMINDER_TYPES)}", "type"
        )
    if "message" in fields:
        message = str(fields["message"]).strip()
        if not message:
            raise ValidationError("message must not be empty", "message")
        fields["message"] = message
    return fields
