"""Food domain models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class FoodSource(str, Enum):
    """Where a food search result came from."""

    CATALOG = "catalog"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FoodItem:
    """A food with per-serving macros."""

    id: str
    name: str
    serving_size: float
    serving_unit: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    created_by: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class CustomFoodDraft:
    """User-submitted food before it is persisted."""

    name: str
    serving_size: float = 100.0
    serving_unit: str = "g"
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0


@dataclass(frozen=True)
class MatchResult:
    """Single ranked search hit."""

    food: FoodItem
    source: FoodSource
    search_name: str


@dataclass(frozen=True)
class ScaledNutrients:
    """Macros scaled to a requested quantity and rounded for display."""

    calories: int
    protein: float
    carbs: float
    fat: float
