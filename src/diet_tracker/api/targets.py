"""Daily target endpoints."""

from fastapi import APIRouter, Depends, Request

from diet_tracker.api.auth import require_user
from diet_tracker.api.models import TargetsUpdate
from diet_tracker.domain.models import UserContext

router = APIRouter(prefix="/targets", tags=["targets"])


@router.get("")
def get_targets(
    request: Request, user: UserContext = Depends(require_user)
) -> dict[str, object]:
    """Return the user's daily targets."""
    return {"targets": request.app.state.container.targets_service.get(user.user_id)}


@router.patch("")
def update_targets(
    payload: TargetsUpdate,
    request: Request,
    user: UserContext = Depends(require_user),
) -> dict[str, object]:
    """Update some or all daily targets."""
    service = request.app.state.container.targets_service
    return {"targets": service.update(user.user_id, payload.to_changes())}
