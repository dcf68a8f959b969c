"""Domain models for the daily food diary."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class FoodEntry:
    """A logged food for one day."""

    id: str
    name: str
    calories: float
    protein: float
    logged_at: datetime
    is_favorite: bool = False


@dataclass(frozen=True)
class DailyProgress:
    """Progress totals for a single day."""

    day: date
    calories: float = 0
    protein: float = 0
    steps: float = 0
    completed_sessions: int = 0


@dataclass(frozen=True)
class DaySummary:
    """Entries and progress for a day."""

    day: date
    entries: list[FoodEntry]
    progress: DailyProgress
