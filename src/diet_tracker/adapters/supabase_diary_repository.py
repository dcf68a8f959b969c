"""Supabase repository for diary entries and daily progress."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from diet_tracker.domain.diary import DailyProgress, FoodEntry
from diet_tracker.services.diary import DiaryRepository


@dataclass
class SupabaseDiaryRepository(DiaryRepository):
    """Supabase implementation for the food diary."""

    client: Client

    def list_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        """Return entries logged on a day, oldest first."""
        response = (
            self.client.table("food_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def save_entry(self, user_id: UUID, day: date, entry: FoodEntry) -> None:
        """Insert a food entry."""
        response = (
            self.client.table("food_entries")
            .insert(
                {
                    "id": entry.id,
                    "user_id": str(user_id),
                    "day": day.isoformat(),
                    "name": entry.name,
                    "calories": entry.calories,
                    "protein": entry.protein,
                    "logged_at": entry.logged_at.isoformat(),
                    "is_favorite": entry.is_favorite,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save food entry")

    def delete_entry(self, user_id: UUID, day: date, entry_id: str) -> None:
        """Delete a food entry."""
        self.client.table("food_entries").delete().eq("id", entry_id).eq(
            "user_id", str(user_id)
        ).eq("day", day.isoformat()).execute()

    def get_progress(self, user_id: UUID, day: date) -> DailyProgress | None:
        """Return stored progress for a day."""
        response = (
            self.client.table("daily_progress")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return DailyProgress(
            day=day,
            calories=float(row.get("calories") or 0.0),
            protein=float(row.get("protein") or 0.0),
            steps=float(row.get("steps") or 0.0),
            completed_sessions=int(row.get("completed_sessions") or 0),
        )

    def save_progress(self, user_id: UUID, progress: DailyProgress) -> None:
        """Upsert progress for a day."""
        self.client.table("daily_progress").upsert(
            {
                "user_id": str(user_id),
                "day": progress.day.isoformat(),
                "calories": progress.calories,
                "protein": progress.protein,
                "steps": progress.steps,
                "completed_sessions": progress.completed_sessions,
            },
            on_conflict="user_id,day",
        ).execute()


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    logged_raw = row.get("logged_at")
    logged_at = (
        datetime.fromisoformat(logged_raw)
        if isinstance(logged_raw, str) and logged_raw
        else datetime.min
    )
    return FoodEntry(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        logged_at=logged_at,
        is_favorite=bool(row.get("is_favorite", False)),
    )
