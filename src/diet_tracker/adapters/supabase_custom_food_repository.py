"""Supabase repository for user-submitted foods."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from diet_tracker.domain.foods import FoodItem
from diet_tracker.services.foods import CustomFoodRepository
from diet_tracker.services.numbers import coerce_number

# Highest code point in the private use area; closes the prefix range.
_RANGE_END = "\uf8ff"


@dataclass
class SupabaseCustomFoodRepository(CustomFoodRepository):
    """Supabase-backed repository for the shared custom food table."""

    client: Client

    def search_by_prefix(self, prefix: str) -> list[FoodItem]:
        """Return foods whose lowercase name falls in the prefix range."""
        response = (
            self.client.table("custom_foods")
            .select("*")
            .gte("name", prefix)
            .lte("name", prefix + _RANGE_END)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Insert a custom food and return it."""
        response = self.client.table("custom_foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create custom food")
        return _parse_food(response.data[0])


def _parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a custom food row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    created_by = row.get("created_by")
    return FoodItem(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        serving_size=coerce_number(row.get("serving_size")),
        serving_unit=str(row.get("serving_unit") or "g"),
        calories=coerce_number(row.get("calories")),
        protein=coerce_number(row.get("protein")),
        carbs=coerce_number(row.get("carbs")),
        fat=coerce_number(row.get("fat")),
        fiber=coerce_number(row.get("fiber")),
        sugar=coerce_number(row.get("sugar")),
        sodium=coerce_number(row.get("sodium")),
        created_by=str(created_by) if created_by else None,
        created_at=created_at,
    )
