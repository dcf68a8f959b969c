"""Daily targets service."""

import dataclasses
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.targets import Targets


class TargetsRepository(Protocol):
    """Persistence interface for user targets."""

    def get_targets(self, user_id: UUID) -> Targets | None:
        """Return stored targets for the user, if any."""

    def save_targets(self, user_id: UUID, targets: Targets) -> None:
        """Create or replace the user's targets."""


@dataclass
class TargetsService:
    """Service for reading and updating daily targets."""

    repository: TargetsRepository

    def get(self, user_id: UUID) -> Targets:
        """Return the user's targets, storing defaults on first access."""
        existing = self.repository.get_targets(user_id)
        if existing is not None:
            return existing
        defaults = Targets()
        self.repository.save_targets(user_id, defaults)
        return defaults

    def update(self, user_id: UUID, changes: dict[str, float]) -> Targets:
        """Merge partial changes into the current targets and persist them."""
        updated = dataclasses.replace(self.get(user_id), **changes)
        self.repository.save_targets(user_id, updated)
        return updated
