"""Tests for custom food creation."""

import asyncio
from datetime import UTC

import pytest

from diet_tracker.domain.foods import CustomFoodDraft, FoodSource
from diet_tracker.services.catalog import Catalog
from diet_tracker.services.foods import CustomFoodCreateError, CustomFoodService
from diet_tracker.services.matching import FoodMatcher
from tests.conftest import USER_ID, InMemoryCustomFoodRepository


def test_create_stores_lowercased_food_owned_by_user() -> None:
    repository = InMemoryCustomFoodRepository()
    service = CustomFoodService(repository)

    food = service.create(
        USER_ID, CustomFoodDraft(name="Grandma's Apple Crumble", calories=310)
    )

    assert food.name == "grandma's apple crumble"
    assert food.created_by == str(USER_ID)
    assert food.created_at is not None
    assert food.created_at.tzinfo == UTC
    assert food.serving_size == 100
    assert food.serving_unit == "g"
    assert repository.foods == [food]


def test_created_food_is_searchable(catalog: Catalog) -> None:
    repository = InMemoryCustomFoodRepository()
    CustomFoodService(repository).create(
        USER_ID, CustomFoodDraft(name="Apple Crumble", calories=310, carbs=45)
    )
    matcher = FoodMatcher(catalog=catalog, repository=repository)

    results = asyncio.run(matcher.search("apple cr"))

    assert [result.food.name for result in results] == ["apple crumble"]
    assert results[0].source is FoodSource.CUSTOM


def test_create_failure_keeps_the_draft() -> None:
    service = CustomFoodService(InMemoryCustomFoodRepository(fail_create=True))
    draft = CustomFoodDraft(name="Protein bar", calories=200, protein=20)

    with pytest.raises(CustomFoodCreateError) as error:
        service.create(USER_ID, draft)

    assert error.value.draft == draft
    assert isinstance(error.value.__cause__, RuntimeError)
