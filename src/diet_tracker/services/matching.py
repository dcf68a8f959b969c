"""Food search over the catalog and custom foods."""

import asyncio
import logging
from dataclasses import dataclass

from diet_tracker.domain.foods import FoodItem, FoodSource, MatchResult, ScaledNutrients
from diet_tracker.services.catalog import Catalog
from diet_tracker.services.foods import CustomFoodRepository
from diet_tracker.services.numbers import round_half_up
from diet_tracker.services.text import normalize

MIN_QUERY_LENGTH = 2
RESULT_LIMIT = 20

_logger = logging.getLogger(__name__)


@dataclass
class FoodMatcher:
    """Merges catalog and custom food matches into one ranked list."""

    catalog: Catalog
    repository: CustomFoodRepository
    fetch_timeout_seconds: float = 5.0
    result_limit: int = RESULT_LIMIT

    async def search(self, query: str) -> list[MatchResult]:
        """Return up to ``result_limit`` foods matching the query.

        A failing or slow custom food lookup degrades to catalog-only results.
        """
        if len(query) < MIN_QUERY_LENGTH:
            return []
        needle = normalize(query)
        matches = [
            MatchResult(
                food=entry.food,
                source=FoodSource.CATALOG,
                search_name=entry.search_name,
            )
            for entry in self.catalog.entries
            if needle in entry.search_name
        ]
        for food in await self._fetch_custom(query):
            search_name = normalize(food.name)
            if needle in search_name:
                matches.append(
                    MatchResult(
                        food=food, source=FoodSource.CUSTOM, search_name=search_name
                    )
                )
        return rank_matches(matches, needle)[: self.result_limit]

    async def _fetch_custom(self, query: str) -> list[FoodItem]:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.repository.search_by_prefix, query.lower()),
                timeout=self.fetch_timeout_seconds,
            )
        except Exception as exc:
            _logger.warning(
                "Custom food search failed, using catalog only: query=%s error=%r",
                query,
                exc,
            )
            return []


def rank_matches(matches: list[MatchResult], needle: str) -> list[MatchResult]:
    """Order prefix matches first, then by normalized name (stable)."""
    return sorted(
        matches,
        key=lambda match: (not match.search_name.startswith(needle), match.search_name),
    )


def compute_scaled(item: FoodItem, quantity: float) -> ScaledNutrients:
    """Scale per-serving macros to ``quantity`` in the item's serving unit.

    Calories round to whole numbers, macros to one decimal place.
    """
    if item.serving_size <= 0:
        return ScaledNutrients(calories=0, protein=0.0, carbs=0.0, fat=0.0)
    multiplier = quantity / item.serving_size
    return ScaledNutrients(
        calories=int(round_half_up(item.calories * multiplier)),
        protein=round_half_up(item.protein * multiplier, 1),
        carbs=round_half_up(item.carbs * multiplier, 1),
        fat=round_half_up(item.fat * multiplier, 1),
    )
