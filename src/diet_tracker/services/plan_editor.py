"""Pure editing operations on workout plans."""

import dataclasses
from collections.abc import Callable
from uuid import uuid4

from diet_tracker.domain.workouts import Exercise, WorkoutPlan, WorkoutSession

DAYS_IN_WEEK = 7


class NotFoundError(LookupError):
    """Raised when a plan, session or exercise reference does not exist."""


class EmptyPlanError(ValueError):
    """Raised when a plan has no session with a named exercise."""


def new_session(position: int) -> WorkoutSession:
    """Return a fresh session holding one blank exercise."""
    return WorkoutSession(
        id=f"session-{uuid4().hex[:12]}",
        name=f"Session {position}",
        exercises=[Exercise(name="")],
        assigned_days=[],
    )


def add_session(plan: WorkoutPlan) -> WorkoutPlan:
    """Append a new session to the plan."""
    session = new_session(len(plan.sessions) + 1)
    return dataclasses.replace(plan, sessions=[*plan.sessions, session])


def remove_session(plan: WorkoutPlan, session_id: str) -> WorkoutPlan:
    """Remove a session from the plan."""
    find_session(plan, session_id)
    sessions = [session for session in plan.sessions if session.id != session_id]
    return dataclasses.replace(plan, sessions=sessions)


def rename_session(plan: WorkoutPlan, session_id: str, name: str) -> WorkoutPlan:
    """Rename a session."""
    return _replace_session(
        plan, session_id, lambda session: dataclasses.replace(session, name=name)
    )


def add_exercise(plan: WorkoutPlan, session_id: str) -> WorkoutPlan:
    """Append a blank exercise to a session."""
    return _replace_session(
        plan,
        session_id,
        lambda session: dataclasses.replace(
            session, exercises=[*session.exercises, Exercise(name="")]
        ),
    )


def remove_exercise(plan: WorkoutPlan, session_id: str, index: int) -> WorkoutPlan:
    """Remove the exercise at ``index`` from a session."""

    def _remove(session: WorkoutSession) -> WorkoutSession:
        _check_index(session, index)
        exercises = [ex for pos, ex in enumerate(session.exercises) if pos != index]
        return dataclasses.replace(session, exercises=exercises)

    return _replace_session(plan, session_id, _remove)


def update_exercise(
    plan: WorkoutPlan, session_id: str, index: int, changes: dict[str, object]
) -> WorkoutPlan:
    """Apply field changes to the exercise at ``index``."""

    def _update(session: WorkoutSession) -> WorkoutSession:
        _check_index(session, index)
        exercises = list(session.exercises)
        exercises[index] = dataclasses.replace(exercises[index], **changes)
        return dataclasses.replace(session, exercises=exercises)

    return _replace_session(plan, session_id, _update)


def toggle_day(plan: WorkoutPlan, session_id: str, day: int) -> WorkoutPlan:
    """Assign or unassign a weekday (0 = Sunday) for a session."""
    if not 0 <= day < DAYS_IN_WEEK:
        raise NotFoundError(f"Unknown weekday {day}")

    def _toggle(session: WorkoutSession) -> WorkoutSession:
        if day in session.assigned_days:
            days = [current for current in session.assigned_days if current != day]
        else:
            days = sorted([*session.assigned_days, day])
        return dataclasses.replace(session, assigned_days=days)

    return _replace_session(plan, session_id, _toggle)


def sanitize_plan(plan: WorkoutPlan) -> WorkoutPlan:
    """Drop unnamed exercises and sessions left without exercises."""
    sessions = []
    for session in plan.sessions:
        exercises = [ex for ex in session.exercises if ex.name.strip()]
        if exercises:
            sessions.append(dataclasses.replace(session, exercises=exercises))
    if not sessions:
        raise EmptyPlanError("Add at least one exercise to the plan")
    return dataclasses.replace(plan, sessions=sessions)


def find_session(plan: WorkoutPlan, session_id: str) -> WorkoutSession:
    """Return the session with ``session_id``."""
    for session in plan.sessions:
        if session.id == session_id:
            return session
    raise NotFoundError(f"Session {session_id} not found in plan {plan.id}")


def _replace_session(
    plan: WorkoutPlan,
    session_id: str,
    change: Callable[[WorkoutSession], WorkoutSession],
) -> WorkoutPlan:
    find_session(plan, session_id)
    sessions = [
        change(session) if session.id == session_id else session
        for session in plan.sessions
    ]
    return dataclasses.replace(plan, sessions=sessions)


def _check_index(session: WorkoutSession, index: int) -> None:
    if not 0 <= index < len(session.exercises):
        raise NotFoundError(f"Exercise {index} not found in session {session.id}")
