"""Workout plan service."""

import dataclasses
import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.workouts import (
    CompletedSession,
    Exercise,
    WorkoutPlan,
    WorkoutSession,
)
from diet_tracker.services import plan_editor
from diet_tracker.services.dates import week_bounds, week_start, weekday_index
from diet_tracker.services.diary import DiaryService
from diet_tracker.services.plan_editor import NotFoundError

_logger = logging.getLogger(__name__)

# (session name, weekday, [(exercise, weight, sets, max reps), ...])
_DEFAULT_SESSIONS: list[tuple[str, int, list[tuple[str, float, int, int]]]] = [
    (
        "Upper Body A",
        1,
        [
            ("DB chest press", 50, 3, 11),
            ("Incline DB chest press", 50, 3, 8),
            ("DB chest fly", 25, 2, 7),
            ("Close-grip assisted pull-ups", -110, 3, 8),
            ("Close-grip seated rows", 115, 3, 8),
            ("Wide-grip assisted pull-ups", -125, 2, 5),
        ],
    ),
    (
        "Lower Body A",
        2,
        [
            ("Barbell squat", 140, 3, 7),
            ("Cable face pull", 95, 3, 10),
            ("Hack squat (quad)", 115, 3, 6),
            ("Standing calf", 180, 3, 12),
            ("Leg curl", 115, 3, 15),
            ("Leg extension", 115, 3, 11),
        ],
    ),
    (
        "Upper Body B",
        4,
        [
            ("Close-grip assisted pull-ups", -110, 3, 8),
            ("Close-grip seated rows", 115, 3, 8),
            ("Wide-grip assisted pull-ups", -125, 2, 5),
            ("DB chest press", 50, 3, 11),
            ("Incline DB chest press", 50, 3, 8),
            ("DB chest fly", 25, 2, 7),
        ],
    ),
    (
        "Lower Body B",
        6,
        [
            ("Barbell squat", 140, 3, 7),
            ("DB chest press", 50, 3, 9),
            ("Deadlift", 55, 3, 8),
            ("Hack squat (glut)", 115, 3, 6),
            ("Close-grip assisted pull-ups", -110, 3, 7),
            ("Standing calf", 180, 3, 12),
        ],
    ),
]


def default_plan() -> WorkoutPlan:
    """Return the built-in four day split used to seed new users."""
    sessions = [
        WorkoutSession(
            id=f"session-{position}",
            name=name,
            exercises=[
                Exercise(name=exercise, weight=weight, sets=sets, max_reps=reps)
                for exercise, weight, sets, reps in exercises
            ],
            assigned_days=[weekday],
        )
        for position, (name, weekday, exercises) in enumerate(_DEFAULT_SESSIONS, 1)
    ]
    return WorkoutPlan(id="", name="4-Day Split", sessions=sessions, is_default=True)


class WorkoutRepository(Protocol):
    """Persistence interface for workout plans and completed sessions."""

    def list_plans(self, user_id: UUID) -> list[WorkoutPlan]:
        """Return all plans for a user."""

    def create_plan(self, user_id: UUID, plan: WorkoutPlan) -> WorkoutPlan:
        """Persist a new plan and return it with its id."""

    def update_plan(self, user_id: UUID, plan: WorkoutPlan) -> WorkoutPlan:
        """Replace a stored plan and return it."""

    def create_completed_session(
        self, user_id: UUID, session: CompletedSession
    ) -> CompletedSession:
        """Persist a completed session and return it with its id."""

    def list_completed_sessions(
        self, user_id: UUID, start: date, end: date
    ) -> list[CompletedSession]:
        """Return completed sessions between two days, inclusive."""


@dataclass
class WorkoutService:
    """Application service for workout plans."""

    repository: WorkoutRepository
    diary_service: DiaryService

    def list_plans(self, user_id: UUID) -> list[WorkoutPlan]:
        """Return the user's plans, seeding the default plan for new users."""
        plans = self.repository.list_plans(user_id)
        if plans:
            return plans
        _logger.info("Seeding default workout plan: user_id=%s", user_id)
        return [self.repository.create_plan(user_id, default_plan())]

    def get_plan(self, user_id: UUID, plan_id: str) -> WorkoutPlan:
        """Return a plan by id."""
        for plan in self.repository.list_plans(user_id):
            if plan.id == plan_id:
                return plan
        raise NotFoundError(f"Plan {plan_id} not found")

    def create_plan(self, user_id: UUID, plan: WorkoutPlan) -> WorkoutPlan:
        """Validate and store a new plan."""
        cleaned = plan_editor.sanitize_plan(plan)
        if cleaned.week_start_date is None:
            today = datetime.now(tz=UTC).date()
            cleaned = dataclasses.replace(cleaned, week_start_date=week_start(today))
        return self.repository.create_plan(user_id, cleaned)

    def update_plan(self, user_id: UUID, plan: WorkoutPlan) -> WorkoutPlan:
        """Validate and replace an existing plan."""
        self.get_plan(user_id, plan.id)
        return self.repository.update_plan(user_id, plan_editor.sanitize_plan(plan))

    def update_exercise(
        self,
        user_id: UUID,
        plan_id: str,
        session_id: str,
        index: int,
        changes: dict[str, object],
    ) -> WorkoutPlan:
        """Edit fields of one exercise and persist the plan."""
        plan = self.get_plan(user_id, plan_id)
        updated = plan_editor.update_exercise(plan, session_id, index, changes)
        return self.repository.update_plan(user_id, updated)

    def add_session(self, user_id: UUID, plan_id: str) -> WorkoutPlan:
        """Append a blank session to a plan."""
        plan = plan_editor.add_session(self.get_plan(user_id, plan_id))
        return self.repository.update_plan(user_id, plan)

    def remove_session(
        self, user_id: UUID, plan_id: str, session_id: str
    ) -> WorkoutPlan:
        """Remove a session from a plan."""
        plan = plan_editor.remove_session(self.get_plan(user_id, plan_id), session_id)
        return self.repository.update_plan(user_id, plan)

    def rename_session(
        self, user_id: UUID, plan_id: str, session_id: str, name: str
    ) -> WorkoutPlan:
        """Rename a session."""
        plan = plan_editor.rename_session(
            self.get_plan(user_id, plan_id), session_id, name
        )
        return self.repository.update_plan(user_id, plan)

    def add_exercise(
        self, user_id: UUID, plan_id: str, session_id: str
    ) -> WorkoutPlan:
        """Append a blank exercise to a session."""
        plan = plan_editor.add_exercise(self.get_plan(user_id, plan_id), session_id)
        return self.repository.update_plan(user_id, plan)

    def remove_exercise(
        self, user_id: UUID, plan_id: str, session_id: str, index: int
    ) -> WorkoutPlan:
        """Remove an exercise from a session."""
        plan = plan_editor.remove_exercise(
            self.get_plan(user_id, plan_id), session_id, index
        )
        return self.repository.update_plan(user_id, plan)

    def toggle_day(
        self, user_id: UUID, plan_id: str, session_id: str, day: int
    ) -> WorkoutPlan:
        """Toggle a weekday assignment for a session."""
        plan = plan_editor.toggle_day(self.get_plan(user_id, plan_id), session_id, day)
        return self.repository.update_plan(user_id, plan)

    @staticmethod
    def session_for_day(plan: WorkoutPlan, day: date) -> WorkoutSession | None:
        """Return the session assigned to the day's weekday, else the first one."""
        weekday = weekday_index(day)
        for session in plan.sessions:
            if weekday in session.assigned_days:
                return session
        return plan.sessions[0] if plan.sessions else None

    def complete_session(
        self, user_id: UUID, plan_id: str, session_id: str, day: date
    ) -> CompletedSession:
        """Record a completed session and update the day's progress."""
        plan = self.get_plan(user_id, plan_id)
        session = plan_editor.find_session(plan, session_id)
        completed = self.repository.create_completed_session(
            user_id,
            CompletedSession(
                id="",
                plan_id=plan.id,
                session_id=session.id,
                day=day,
                exercises=list(session.exercises),
            ),
        )
        position = plan.sessions.index(session) + 1
        self.diary_service.set_completed_sessions(user_id, day, position)
        return completed

    def completed_in_week(self, user_id: UUID, day: date) -> list[CompletedSession]:
        """Return sessions completed in the Sunday to Saturday week of ``day``."""
        start, end = week_bounds(day)
        return self.repository.list_completed_sessions(user_id, start, end)
