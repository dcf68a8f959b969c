"""Domain models for the diet tracker."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserContext:
    """Authenticated user resolved from a session token."""

    user_id: UUID
    email: str | None = None
