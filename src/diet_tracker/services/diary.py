"""Daily food diary and progress."""

import dataclasses
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.diary import DailyProgress, DaySummary, FoodEntry
from diet_tracker.domain.foods import FoodItem
from diet_tracker.services.matching import compute_scaled

QUICK_ADD_NAME = "Quick Add"


class DiaryRepository(Protocol):
    """Persistence interface for diary entries and daily progress."""

    def list_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        """Return food entries logged on a day."""

    def save_entry(self, user_id: UUID, day: date, entry: FoodEntry) -> None:
        """Persist a food entry."""

    def delete_entry(self, user_id: UUID, day: date, entry_id: str) -> None:
        """Delete a food entry."""

    def get_progress(self, user_id: UUID, day: date) -> DailyProgress | None:
        """Return stored progress for a day, if any."""

    def save_progress(self, user_id: UUID, progress: DailyProgress) -> None:
        """Create or replace progress for a day."""


@dataclass
class DiaryService:
    """Application service for the food diary."""

    repository: DiaryRepository

    def get_day(self, user_id: UUID, day: date) -> DaySummary:
        """Return entries and progress, with intake totals taken from entries."""
        entries = self.repository.list_entries(user_id, day)
        stored = self.repository.get_progress(user_id, day) or DailyProgress(day=day)
        progress = dataclasses.replace(
            stored,
            calories=sum(entry.calories for entry in entries),
            protein=sum(entry.protein for entry in entries),
        )
        return DaySummary(day=day, entries=entries, progress=progress)

    def log_food(
        self, user_id: UUID, day: date, item: FoodItem, quantity: float
    ) -> FoodEntry:
        """Log ``quantity`` of a food, scaled from its serving size."""
        scaled = compute_scaled(item, quantity)
        return self._add(user_id, day, item.name, scaled.calories, scaled.protein)

    def quick_add(
        self,
        user_id: UUID,
        day: date,
        calories: float,
        protein: float,
        name: str = QUICK_ADD_NAME,
    ) -> FoodEntry:
        """Log raw calories and protein without a food lookup."""
        return self._add(user_id, day, name or QUICK_ADD_NAME, calories, protein)

    def remove_entry(self, user_id: UUID, day: date, entry_id: str) -> None:
        """Remove a logged entry."""
        self.repository.delete_entry(user_id, day, entry_id)

    def set_steps(self, user_id: UUID, day: date, steps: float) -> DailyProgress:
        """Record the step count for a day."""
        return self._save_progress(user_id, day, steps=steps)

    def set_completed_sessions(
        self, user_id: UUID, day: date, completed_sessions: int
    ) -> DailyProgress:
        """Record the completed workout session count for a day."""
        return self._save_progress(
            user_id, day, completed_sessions=completed_sessions
        )

    @staticmethod
    def filter_entries(entries: list[FoodEntry], text: str) -> list[FoodEntry]:
        """Return entries whose name contains ``text``, ignoring case."""
        needle = text.lower()
        return [entry for entry in entries if needle in entry.name.lower()]

    def _add(
        self, user_id: UUID, day: date, name: str, calories: float, protein: float
    ) -> FoodEntry:
        entry = FoodEntry(
            id=uuid4().hex,
            name=name,
            calories=calories,
            protein=protein,
            logged_at=datetime.now(tz=UTC),
        )
        self.repository.save_entry(user_id, day, entry)
        return entry

    def _save_progress(
        self, user_id: UUID, day: date, **changes: float
    ) -> DailyProgress:
        progress = dataclasses.replace(self.get_day(user_id, day).progress, **changes)
        self.repository.save_progress(user_id, progress)
        return progress
