"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from diet_tracker.api.diary import router as diary_router
from diet_tracker.api.foods import router as foods_router
from diet_tracker.api.targets import router as targets_router
from diet_tracker.api.workouts import router as workouts_router
from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import AppContainer
from diet_tracker.services.plan_editor import EmptyPlanError, NotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Diet Tracker")
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(diary_router)
    app.include_router(targets_router)
    app.include_router(workouts_router)

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(EmptyPlanError)
    async def empty_plan(request: Request, exc: EmptyPlanError) -> JSONResponse:
        logger.info("Rejected empty workout plan: path=%s", request.url.path)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
