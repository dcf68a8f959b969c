"""Workout plan endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Request, status

from diet_tracker.api.auth import require_user
from diet_tracker.api.models import (
    ExerciseUpdate,
    SessionRenameRequest,
    WorkoutPlanRequest,
)
from diet_tracker.domain.models import UserContext
from diet_tracker.services.workouts import WorkoutService

router = APIRouter(prefix="/workouts", tags=["workouts"])


def _service(request: Request) -> WorkoutService:
    return request.app.state.container.workout_service


@router.get("/plans")
def list_plans(
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Return the user's plans, creating the default plan on first use."""
    return {"plans": service.list_plans(user.user_id)}


@router.post("/plans", status_code=status.HTTP_201_CREATED)
def create_plan(
    payload: WorkoutPlanRequest,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Create a plan."""
    return {"plan": service.create_plan(user.user_id, payload.to_domain())}


@router.put("/plans/{plan_id}")
def update_plan(
    plan_id: str,
    payload: WorkoutPlanRequest,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Replace a plan with the submitted version."""
    return {"plan": service.update_plan(user.user_id, payload.to_domain(plan_id))}


@router.post("/plans/{plan_id}/sessions", status_code=status.HTTP_201_CREATED)
def add_session(
    plan_id: str,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Append a blank session."""
    return {"plan": service.add_session(user.user_id, plan_id)}


@router.patch("/plans/{plan_id}/sessions/{session_id}")
def rename_session(
    plan_id: str,
    session_id: str,
    payload: SessionRenameRequest,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Rename a session."""
    plan = service.rename_session(user.user_id, plan_id, session_id, payload.name)
    return {"plan": plan}


@router.delete("/plans/{plan_id}/sessions/{session_id}")
def remove_session(
    plan_id: str,
    session_id: str,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Remove a session."""
    return {"plan": service.remove_session(user.user_id, plan_id, session_id)}


@router.post(
    "/plans/{plan_id}/sessions/{session_id}/exercises",
    status_code=status.HTTP_201_CREATED,
)
def add_exercise(
    plan_id: str,
    session_id: str,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Append a blank exercise to a session."""
    return {"plan": service.add_exercise(user.user_id, plan_id, session_id)}


@router.patch("/plans/{plan_id}/sessions/{session_id}/exercises/{index}")
def update_exercise(  # noqa: PLR0913
    plan_id: str,
    session_id: str,
    index: int,
    payload: ExerciseUpdate,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Edit one exercise in place."""
    plan = service.update_exercise(
        user.user_id, plan_id, session_id, index, payload.to_changes()
    )
    return {"plan": plan}


@router.delete("/plans/{plan_id}/sessions/{session_id}/exercises/{index}")
def remove_exercise(
    plan_id: str,
    session_id: str,
    index: int,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Remove one exercise."""
    return {
        "plan": service.remove_exercise(user.user_id, plan_id, session_id, index)
    }


@router.post("/plans/{plan_id}/sessions/{session_id}/days/{weekday}")
def toggle_day(
    plan_id: str,
    session_id: str,
    weekday: int,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Assign or unassign a weekday (0 = Sunday) for a session."""
    return {"plan": service.toggle_day(user.user_id, plan_id, session_id, weekday)}


@router.get("/plans/{plan_id}/session")
def session_for_day(
    plan_id: str,
    day: date,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Return the session scheduled for ``day``."""
    plan = service.get_plan(user.user_id, plan_id)
    return {"session": service.session_for_day(plan, day)}


@router.post("/plans/{plan_id}/sessions/{session_id}/complete")
def complete_session(
    plan_id: str,
    session_id: str,
    day: date,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Mark a session as completed on ``day``."""
    completed = service.complete_session(user.user_id, plan_id, session_id, day)
    return {"completed": completed}


@router.get("/completed")
def completed_in_week(
    day: date,
    user: UserContext = Depends(require_user),
    service: WorkoutService = Depends(_service),
) -> dict[str, object]:
    """Return sessions completed in the Sunday to Saturday week of ``day``."""
    return {"completed": service.completed_in_week(user.user_id, day)}
