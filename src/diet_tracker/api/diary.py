"""Food diary endpoints."""

from datetime import UTC, date, datetime

from fastapi import APIRouter, Depends, Request, Response, status

from diet_tracker.api.auth import require_user
from diet_tracker.api.models import FoodSelection, QuickAddRequest, StepsRequest
from diet_tracker.domain.models import UserContext
from diet_tracker.services.dates import shift_day

router = APIRouter(prefix="/diary", tags=["diary"])


@router.get("/{day}")
def get_day(
    day: date,
    request: Request,
    q: str = "",
    user: UserContext = Depends(require_user),
) -> dict[str, object]:
    """Return a day's entries, progress and targets.

    ``q`` narrows the entry list by name; progress always covers every entry.
    """
    container = request.app.state.container
    summary = container.diary_service.get_day(user.user_id, day)
    entries = summary.entries
    if q:
        entries = container.diary_service.filter_entries(entries, q)
    return {
        "day": day,
        "entries": entries,
        "progress": summary.progress,
        "targets": container.targets_service.get(user.user_id),
        "previous_day": shift_day(day, -1),
        "next_day": shift_day(day, 1),
        "is_today": day == datetime.now(tz=UTC).date(),
    }


@router.post("/{day}/entries", status_code=status.HTTP_201_CREATED)
def quick_add(
    day: date,
    payload: QuickAddRequest,
    request: Request,
    user: UserContext = Depends(require_user),
) -> dict[str, object]:
    """Log calories and protein directly."""
    entry = request.app.state.container.diary_service.quick_add(
        user.user_id, day, payload.calories, payload.protein, name=payload.name
    )
    return {"entry": entry}


@router.post("/{day}/foods", status_code=status.HTTP_201_CREATED)
def log_food(
    day: date,
    selection: FoodSelection,
    request: Request,
    user: UserContext = Depends(require_user),
) -> dict[str, object]:
    """Log a quantity of a searched food."""
    entry = request.app.state.container.diary_service.log_food(
        user.user_id, day, selection.food.to_domain(), selection.quantity
    )
    return {"entry": entry}


@router.delete("/{day}/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_entry(
    day: date,
    entry_id: str,
    request: Request,
    user: UserContext = Depends(require_user),
) -> Response:
    """Delete a logged entry."""
    request.app.state.container.diary_service.remove_entry(user.user_id, day, entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{day}/steps")
def set_steps(
    day: date,
    payload: StepsRequest,
    request: Request,
    user: UserContext = Depends(require_user),
) -> dict[str, object]:
    """Record the day's step count."""
    progress = request.app.state.container.diary_service.set_steps(
        user.user_id, day, payload.steps
    )
    return {"progress": progress}
