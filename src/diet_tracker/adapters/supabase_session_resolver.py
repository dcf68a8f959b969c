"""Supabase auth implementation of the session resolver."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.domain.models import UserContext
from diet_tracker.services.auth import SessionResolver


@dataclass
class SupabaseSessionResolver(SessionResolver):
    """Resolves Supabase access tokens into users."""

    client: Client

    def resolve(self, token: str) -> UserContext | None:
        """Return the user owning ``token``, or None."""
        response = self.client.auth.get_user(token)
        if response is None or response.user is None:
            return None
        return UserContext(user_id=UUID(response.user.id), email=response.user.email)
