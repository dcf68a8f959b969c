"""Bundled nutrition catalog loading."""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from diet_tracker.domain.foods import FoodItem
from diet_tracker.services.numbers import coerce_number
from diet_tracker.services.text import normalize

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "catalog.json"

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    """Catalog food with its precomputed search name."""

    food: FoodItem
    search_name: str


@dataclass(frozen=True)
class Catalog:
    """Read-only collection of catalog foods."""

    entries: tuple[CatalogEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)


def load_catalog(path: Path | str | None = None) -> Catalog:
    """Load and normalize the catalog JSON file."""
    resolved = Path(path) if path else DEFAULT_CATALOG_PATH
    rows = json.loads(resolved.read_text(encoding="utf-8"))
    catalog = parse_catalog(rows)
    _logger.info(
        "Loaded food catalog: path=%s rows=%s kept=%s",
        resolved,
        len(rows),
        len(catalog),
    )
    return catalog


def parse_catalog(rows: Iterable[dict[str, object]]) -> Catalog:
    """Build catalog entries, dropping rows without usable nutrition facts.

    A row is kept only when it has calories and at least one macro. Values
    are kept unrounded; rounding happens when a quantity is scaled.
    """
    entries: list[CatalogEntry] = []
    for index, row in enumerate(rows):
        name = str(row.get("foodName") or "")
        facts = row.get("nutritionFacts") or {}
        calories = _fact(facts, "calories")
        protein = _fact(facts, "protein")
        carbs = _fact(facts, "carbs")
        fat = _fact(facts, "fat")
        if calories <= 0 or not (protein > 0 or carbs > 0 or fat > 0):
            continue
        food = FoodItem(
            id=f"cnf-{index}",
            name=name,
            serving_size=100.0,
            serving_unit="g",
            calories=calories,
            protein=protein,
            carbs=carbs,
            fat=fat,
        )
        entries.append(CatalogEntry(food=food, search_name=normalize(name)))
    return Catalog(entries=tuple(entries))


def _fact(facts: dict[str, object], key: str) -> float:
    return coerce_number(facts.get(key))
