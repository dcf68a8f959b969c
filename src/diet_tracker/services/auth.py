"""Session token resolution."""

import logging
from dataclasses import dataclass
from typing import Protocol

from diet_tracker.domain.models import UserContext

_logger = logging.getLogger(__name__)


class SessionResolver(Protocol):
    """Resolves access tokens issued by the auth provider."""

    def resolve(self, token: str) -> UserContext | None:
        """Return the user for a valid token, or None."""


class AuthenticationError(RuntimeError):
    """Raised when a request carries no valid session."""


@dataclass
class AuthService:
    """Authenticates requests against the auth provider."""

    resolver: SessionResolver

    def authenticate(self, token: str | None) -> UserContext:
        """Return the user for ``token`` or raise AuthenticationError."""
        if not token or not token.strip():
            raise AuthenticationError("Missing access token")
        try:
            user = self.resolver.resolve(token.strip())
        except Exception as exc:
            _logger.info("Session lookup failed: %s", exc)
            raise AuthenticationError("Invalid access token") from exc
        if user is None:
            raise AuthenticationError("Invalid access token")
        return user
