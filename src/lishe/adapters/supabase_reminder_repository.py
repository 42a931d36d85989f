"""Supabase repository for reminders."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from lishe.domain.reminders import Reminder
from lishe.services.reminders import ReminderRepository


@dataclass
class SupabaseReminderRepository(ReminderRepository):
    """Supabase implementation for reminders, always filtered by owner."""

    client: Client

    def list_reminders(self, user_id: UUID) -> list[Reminder]:
        """Return the user's reminders."""
        response = (
            self.client.table("reminders")
            .select("*")
            .eq("user_id", str(user_id))
            .order("id", desc=False)
            .execute()
        )
        return [_parse_reminder(row) for row in response.data or []]

    def create_reminder(self, user_id: UUID, fields: dict[str, object]) -> Reminder:
        """Create a reminder row."""
        response = (
            self.client.table("reminders")
            .insert({**fields, "user_id": str(user_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create reminder")
        return _parse_reminder(response.data[0])

    def update_reminder(
        self, user_id: UUID, reminder_id: int, fields: dict[str, object]
    ) -> Reminder | None:
        """Update an owned reminder."""
        response = (
            self.client.table("reminders")
            .update(fields)
            .eq("id", reminder_id)
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_reminder(response.data[0])

    def delete_reminder(self, user_id: UUID, reminder_id: int) -> bool:
        """Delete an owned reminder."""
        response = (
            self.client.table("reminders")
            .delete()
            .eq("id", reminder_id)
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_reminder(row: dict[str, object]) -> Reminder:
    is_active = row.get("is_active")
    return Reminder(
        id=int(row["id"]),
        user_id=UUID(str(row["user_id"])),
        time=str(row.get("time", "")),
        type=str(row.get("type", "")),
        message=str(row.get("message", "")),
        is_active=True if is_active is None else bool(is_active),
    )
