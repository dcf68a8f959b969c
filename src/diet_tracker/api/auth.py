"""Bearer token authentication for API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, HTTPException, Request, status

from diet_tracker.domain.models import UserContext  # noqa: TC001
from diet_tracker.services.auth import AuthenticationError

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UserContext:
    """Resolve the calling user or reject the request."""
    container: AppContainer = request.app.state.container
    try:
        return container.auth_service.authenticate(bearer_token(authorization))
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
