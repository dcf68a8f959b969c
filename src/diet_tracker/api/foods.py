"""Food search, custom food and scaling endpoints."""

import logging
from dataclasses import asdict

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Request,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder

from diet_tracker.api.auth import require_user
from diet_tracker.api.models import CustomFoodRequest, FoodSelection
from diet_tracker.domain.foods import MatchResult
from diet_tracker.domain.models import UserContext
from diet_tracker.services.auth import AuthenticationError
from diet_tracker.services.foods import CustomFoodCreateError
from diet_tracker.services.matching import compute_scaled
from diet_tracker.services.search_sessions import SearchOutcome, SearchSession

router = APIRouter(prefix="/foods", tags=["foods"])

_logger = logging.getLogger(__name__)


def match_payload(match: MatchResult) -> dict[str, object]:
    """Serialize a search hit with its source tag."""
    return {**asdict(match.food), "source": match.source.value}


def outcome_payload(outcome: SearchOutcome) -> dict[str, object]:
    """Serialize a search session outcome."""
    return {
        "generation": outcome.generation,
        "query": outcome.query,
        "results": [match_payload(match) for match in outcome.results],
    }


@router.get("/search", dependencies=[Depends(require_user)])
async def search_foods(request: Request, q: str = "") -> dict[str, object]:
    """Return ranked foods matching ``q``."""
    results = await request.app.state.container.food_matcher.search(q)
    return {"query": q, "results": [match_payload(match) for match in results]}


@router.websocket("/search/ws")
async def search_socket(websocket: WebSocket, token: str | None = None) -> None:
    """Debounced search: send ``{"query": ...}``, receive the latest results."""
    container = websocket.app.state.container
    try:
        user = await run_in_threadpool(container.auth_service.authenticate, token)
    except AuthenticationError:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    await websocket.accept()

    async def deliver(outcome: SearchOutcome) -> None:
        await websocket.send_json(jsonable_encoder(outcome_payload(outcome)))

    session = SearchSession(
        matcher=container.food_matcher,
        deliver=deliver,
        debounce_seconds=container.settings.search_debounce_seconds,
    )
    try:
        while True:
            message = await websocket.receive_json()
            query = message.get("query") if isinstance(message, dict) else message
            session.submit(str(query or ""))
    except WebSocketDisconnect:
        _logger.debug("Search socket closed: user_id=%s", user.user_id)
    finally:
        session.close()


@router.post("/custom", status_code=status.HTTP_201_CREATED)
def create_custom_food(
    payload: CustomFoodRequest,
    request: Request,
    user: UserContext = Depends(require_user),
) -> dict[str, object]:
    """Add a food to the shared custom food database."""
    service = request.app.state.container.custom_food_service
    try:
        food = service.create(user.user_id, payload.to_domain())
    except CustomFoodCreateError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": str(exc), "food": payload.model_dump()},
        ) from exc
    return {"food": food}


@router.post("/scale", dependencies=[Depends(require_user)])
def scale_food(selection: FoodSelection) -> dict[str, object]:
    """Return a food's macros scaled to the selected quantity."""
    nutrients = compute_scaled(selection.food.to_domain(), selection.quantity)
    return {"quantity": selection.quantity, "nutrients": nutrients}
