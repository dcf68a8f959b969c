"""Custom food creation."""

import logging
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.foods import CustomFoodDraft, FoodItem

_logger = logging.getLogger(__name__)


class CustomFoodRepository(Protocol):
    """Persistence interface for user-submitted foods."""

    def search_by_prefix(self, prefix: str) -> list[FoodItem]:
        """Return custom foods whose stored name starts with the prefix."""

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Persist a custom food and return it."""


class CustomFoodCreateError(RuntimeError):
    """Raised when the remote store rejects a new custom food."""

    def __init__(self, draft: CustomFoodDraft) -> None:
        super().__init__(f"Failed to create custom food {draft.name!r}")
        self.draft = draft


@dataclass
class CustomFoodService:
    """Application service for user-submitted foods."""

    repository: CustomFoodRepository

    def create(self, user_id: UUID, draft: CustomFoodDraft) -> FoodItem:
        """Persist a custom food owned by the user.

        Names are stored lowercased so the prefix range query can match them.
        """
        payload: dict[str, object] = {
            **asdict(draft),
            "name": draft.name.lower(),
            "created_by": str(user_id),
            "created_at": datetime.now(tz=UTC).isoformat(),
        }
        try:
            return self.repository.create_food(payload)
        except Exception as exc:
            _logger.warning("Custom food create failed: name=%s: %s", draft.name, exc)
            raise CustomFoodCreateError(draft) from exc
