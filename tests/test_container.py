"""Tests for container wiring."""

import json
from pathlib import Path

from diet_tracker.config import Settings
from diet_tracker.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.auth_service is not None
    assert len(container.food_matcher.catalog) == 45
    assert container.food_matcher.fetch_timeout_seconds == 1.0
    assert container.workout_service.diary_service is container.diary_service


def test_build_container_uses_configured_catalog(
    settings: Settings, tmp_path: Path
) -> None:
    path = tmp_path / "catalog.json"
    rows = [{"foodName": "Tofu", "nutritionFacts": {"calories": 76, "protein": 8}}]
    path.write_text(json.dumps(rows), encoding="utf-8")
    settings.catalog_path = str(path)

    container = build_container(settings)

    assert len(container.food_matcher.catalog) == 1
