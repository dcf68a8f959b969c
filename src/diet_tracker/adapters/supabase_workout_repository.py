"""Supabase repository for workout plans and completed sessions."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from diet_tracker.domain.workouts import (
    CompletedSession,
    Exercise,
    WeeklyChanges,
    WorkoutPlan,
    WorkoutSession,
)
from diet_tracker.services.workouts import WorkoutRepository


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workout data.

    Sessions and exercises are stored as JSON documents on the plan row.
    """

    client: Client

    def list_plans(self, user_id: UUID) -> list[WorkoutPlan]:
        """Return all plans for a user, oldest first."""
        response = (
            self.client.table("workout_plans")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def create_plan(self, user_id: UUID, plan: WorkoutPlan) -> WorkoutPlan:
        """Insert a plan and return it with the generated id."""
        response = (
            self.client.table("workout_plans")
            .insert({"user_id": str(user_id), **_plan_to_row(plan)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout plan")
        return _parse_plan(response.data[0])

    def update_plan(self, user_id: UUID, plan: WorkoutPlan) -> WorkoutPlan:
        """Replace a plan's fields and return it."""
        response = (
            self.client.table("workout_plans")
            .update(_plan_to_row(plan))
            .eq("id", plan.id)
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update workout plan")
        return _parse_plan(response.data[0])

    def create_completed_session(
        self, user_id: UUID, session: CompletedSession
    ) -> CompletedSession:
        """Insert a completed session snapshot."""
        response = (
            self.client.table("completed_sessions")
            .insert(
                {
                    "user_id": str(user_id),
                    "plan_id": session.plan_id,
                    "session_id": session.session_id,
                    "day": session.day.isoformat(),
                    "exercises": [_exercise_to_dict(ex) for ex in session.exercises],
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save completed session")
        return _parse_completed(response.data[0])

    def list_completed_sessions(
        self, user_id: UUID, start: date, end: date
    ) -> list[CompletedSession]:
        """Return completed sessions between two days, inclusive."""
        response = (
            self.client.table("completed_sessions")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("day", desc=False)
            .execute()
        )
        return [_parse_completed(row) for row in response.data or []]


def _plan_to_row(plan: WorkoutPlan) -> dict[str, object]:
    return {
        "name": plan.name,
        "is_default": plan.is_default,
        "week_start_date": (
            plan.week_start_date.isoformat() if plan.week_start_date else None
        ),
        "sessions": [
            {
                "id": session.id,
                "name": session.name,
                "assigned_days": list(session.assigned_days),
                "exercises": [_exercise_to_dict(ex) for ex in session.exercises],
            }
            for session in plan.sessions
        ],
    }


def _exercise_to_dict(exercise: Exercise) -> dict[str, object]:
    changes = exercise.weekly_changes
    return {
        "name": exercise.name,
        "weight": exercise.weight,
        "sets": exercise.sets,
        "max_reps": exercise.max_reps,
        "notes": exercise.notes,
        "weekly_changes": (
            {
                "weight": changes.weight,
                "sets": changes.sets,
                "max_reps": changes.max_reps,
            }
            if changes
            else None
        ),
    }


def _parse_plan(row: dict[str, object]) -> WorkoutPlan:
    week_raw = row.get("week_start_date")
    week_start_date = (
        date.fromisoformat(week_raw) if isinstance(week_raw, str) and week_raw else None
    )
    return WorkoutPlan(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        is_default=bool(row.get("is_default", False)),
        week_start_date=week_start_date,
        sessions=[
            WorkoutSession(
                id=str(session.get("id", "")),
                name=str(session.get("name", "")),
                assigned_days=[int(day) for day in session.get("assigned_days") or []],
                exercises=[
                    _parse_exercise(ex) for ex in session.get("exercises") or []
                ],
            )
            for session in row.get("sessions") or []
        ],
    )


def _parse_exercise(raw: dict[str, object]) -> Exercise:
    changes = raw.get("weekly_changes")
    return Exercise(
        name=str(raw.get("name", "")),
        weight=float(raw.get("weight") or 0.0),
        sets=int(raw.get("sets") or 0),
        max_reps=int(raw.get("max_reps") or 0),
        notes=str(raw.get("notes") or ""),
        weekly_changes=(
            WeeklyChanges(
                weight=float(changes.get("weight") or 0.0),
                sets=int(changes.get("sets") or 0),
                max_reps=int(changes.get("max_reps") or 0),
            )
            if isinstance(changes, dict)
            else None
        ),
    )


def _parse_completed(row: dict[str, object]) -> CompletedSession:
    return CompletedSession(
        id=str(row["id"]),
        plan_id=str(row.get("plan_id", "")),
        session_id=str(row.get("session_id", "")),
        day=date.fromisoformat(str(row["day"])),
        exercises=[_parse_exercise(ex) for ex in row.get("exercises") or []],
    )
