"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.supabase_custom_food_repository import (
    SupabaseCustomFoodRepository,
)
from diet_tracker.adapters.supabase_diary_repository import SupabaseDiaryRepository
from diet_tracker.adapters.supabase_session_resolver import SupabaseSessionResolver
from diet_tracker.adapters.supabase_targets_repository import (
    SupabaseTargetsRepository,
)
from diet_tracker.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from diet_tracker.config import Settings
from diet_tracker.services.auth import AuthService
from diet_tracker.services.catalog import load_catalog
from diet_tracker.services.diary import DiaryService
from diet_tracker.services.foods import CustomFoodService
from diet_tracker.services.matching import FoodMatcher
from diet_tracker.services.targets import TargetsService
from diet_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    food_matcher: FoodMatcher
    custom_food_service: CustomFoodService
    targets_service: TargetsService
    diary_service: DiaryService
    workout_service: WorkoutService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    custom_food_repository = SupabaseCustomFoodRepository(supabase_client)
    food_matcher = FoodMatcher(
        catalog=load_catalog(resolved_settings.catalog_path),
        repository=custom_food_repository,
        fetch_timeout_seconds=resolved_settings.custom_food_timeout_seconds,
        result_limit=resolved_settings.search_result_limit,
    )
    diary_service = DiaryService(SupabaseDiaryRepository(supabase_client))
    workout_service = WorkoutService(
        repository=SupabaseWorkoutRepository(supabase_client),
        diary_service=diary_service,
    )
    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(SupabaseSessionResolver(supabase_client)),
        food_matcher=food_matcher,
        custom_food_service=CustomFoodService(custom_food_repository),
        targets_service=TargetsService(SupabaseTargetsRepository(supabase_client)),
        diary_service=diary_service,
        workout_service=workout_service,
    )
