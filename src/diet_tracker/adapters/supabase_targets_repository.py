"""Supabase repository for daily targets."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from diet_tracker.domain.targets import Targets
from diet_tracker.services.targets import TargetsRepository


@dataclass
class SupabaseTargetsRepository(TargetsRepository):
    """Supabase implementation for user targets."""

    client: Client

    def get_targets(self, user_id: UUID) -> Targets | None:
        """Return the stored targets for a user."""
        response = (
            self.client.table("user_targets")
            .select("calories_target, protein_target, steps_target")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Targets(
            calories_target=float(row.get("calories_target") or 0.0),
            protein_target=float(row.get("protein_target") or 0.0),
            steps_target=float(row.get("steps_target") or 0.0),
        )

    def save_targets(self, user_id: UUID, targets: Targets) -> None:
        """Upsert the user's targets."""
        self.client.table("user_targets").upsert(
            {
                "user_id": str(user_id),
                "calories_target": targets.calories_target,
                "protein_target": targets.protein_target,
                "steps_target": targets.steps_target,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
