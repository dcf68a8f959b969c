"""Domain models for workout plans."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class WeeklyChanges:
    """Planned week-over-week progression for an exercise."""

    weight: float
    sets: int
    max_reps: int


@dataclass(frozen=True)
class Exercise:
    """Exercise prescription within a session.

    Negative weights describe assisted lifts (e.g. assisted pull-ups).
    """

    name: str
    weight: float = 0
    sets: int = 3
    max_reps: int = 8
    notes: str = ""
    weekly_changes: WeeklyChanges | None = None


@dataclass(frozen=True)
class WorkoutSession:
    """A named session assigned to weekdays (0 = Sunday, 6 = Saturday)."""

    id: str
    name: str
    exercises: list[Exercise] = field(default_factory=list)
    assigned_days: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class WorkoutPlan:
    """A user's workout plan."""

    id: str
    name: str
    sessions: list[WorkoutSession]
    is_default: bool = False
    week_start_date: date | None = None


@dataclass(frozen=True)
class CompletedSession:
    """Snapshot of a session completed on a given day."""

    id: str
    plan_id: str
    session_id: str
    day: date
    exercises: list[Exercise]
