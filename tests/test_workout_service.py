"""Tests for the workout service."""

from datetime import date

import pytest

from diet_tracker.domain.workouts import Exercise, WorkoutPlan, WorkoutSession
from diet_tracker.services.diary import DiaryService
from diet_tracker.services.plan_editor import EmptyPlanError, NotFoundError
from diet_tracker.services.workouts import WorkoutService, default_plan
from tests.conftest import USER_ID, InMemoryDiaryRepository, InMemoryWorkoutRepository


def _service() -> tuple[WorkoutService, InMemoryWorkoutRepository, DiaryService]:
    repository = InMemoryWorkoutRepository()
    diary = DiaryService(InMemoryDiaryRepository())
    return WorkoutService(repository, diary), repository, diary


def test_default_plan_shape() -> None:
    plan = default_plan()

    assert plan.is_default
    assert [session.assigned_days for session in plan.sessions] == [[1], [2], [4], [6]]
    assert plan.sessions[0].exercises[3] == Exercise(
        name="Close-grip assisted pull-ups", weight=-110, sets=3, max_reps=8
    )


def test_list_plans_seeds_default_once() -> None:
    service, repository, _ = _service()

    first = service.list_plans(USER_ID)
    second = service.list_plans(USER_ID)

    assert len(first) == 1
    assert first == second
    assert first[0].id
    assert first[0].name == "4-Day Split"
    assert len(repository.plans[USER_ID]) == 1


def test_session_for_day_falls_back_to_first_session() -> None:
    plan = default_plan()

    monday = WorkoutService.session_for_day(plan, date(2024, 1, 1))
    tuesday = WorkoutService.session_for_day(plan, date(2024, 1, 2))
    wednesday = WorkoutService.session_for_day(plan, date(2024, 1, 3))
    empty = WorkoutPlan(id="p", name="Empty", sessions=[])

    assert monday is not None and monday.name == "Upper Body A"
    assert tuesday is not None and tuesday.name == "Lower Body A"
    assert wednesday is not None and wednesday.name == "Upper Body A"
    assert WorkoutService.session_for_day(empty, date(2024, 1, 1)) is None


def test_complete_session_records_snapshot_and_progress() -> None:
    service, _, diary = _service()
    plan = service.list_plans(USER_ID)[0]
    day = date(2024, 1, 4)

    completed = service.complete_session(USER_ID, plan.id, "session-3", day)
    progress = diary.get_day(USER_ID, day).progress

    assert completed.id
    assert completed.plan_id == plan.id
    assert completed.exercises == plan.sessions[2].exercises
    assert progress.completed_sessions == 3


def test_completed_in_week_uses_sunday_to_saturday() -> None:
    service, _, _ = _service()
    plan = service.list_plans(USER_ID)[0]
    service.complete_session(USER_ID, plan.id, "session-1", date(2023, 12, 31))
    service.complete_session(USER_ID, plan.id, "session-2", date(2024, 1, 6))
    service.complete_session(USER_ID, plan.id, "session-3", date(2024, 1, 7))

    week = service.completed_in_week(USER_ID, date(2024, 1, 3))

    assert [session.day for session in week] == [date(2023, 12, 31), date(2024, 1, 6)]


def test_create_plan_sanitizes_and_sets_week_start() -> None:
    service, _, _ = _service()
    plan = WorkoutPlan(
        id="",
        name="Mine",
        sessions=[
            WorkoutSession(
                id="a", name="A", exercises=[Exercise(name="Squat"), Exercise(name="")]
            ),
            WorkoutSession(id="b", name="B", exercises=[]),
        ],
    )

    created = service.create_plan(USER_ID, plan)

    assert [session.id for session in created.sessions] == ["a"]
    assert created.sessions[0].exercises == [Exercise(name="Squat")]
    assert created.week_start_date is not None
    assert created.week_start_date.weekday() == 0


def test_update_plan_requires_existing_plan() -> None:
    service, _, _ = _service()

    with pytest.raises(NotFoundError):
        service.update_plan(USER_ID, default_plan())


def test_update_plan_rejects_empty_plan() -> None:
    service, _, _ = _service()
    plan = service.list_plans(USER_ID)[0]
    emptied = WorkoutPlan(id=plan.id, name=plan.name, sessions=[])

    with pytest.raises(EmptyPlanError):
        service.update_plan(USER_ID, emptied)


def test_edit_operations_persist() -> None:
    service, repository, _ = _service()
    plan_id = service.list_plans(USER_ID)[0].id

    service.update_exercise(USER_ID, plan_id, "session-1", 0, {"weight": 55})
    service.rename_session(USER_ID, plan_id, "session-2", "Legs")
    service.toggle_day(USER_ID, plan_id, "session-2", 5)
    service.add_session(USER_ID, plan_id)
    plan = service.remove_session(USER_ID, plan_id, "session-4")

    assert repository.plans[USER_ID][0] == plan
    assert plan.sessions[0].exercises[0].weight == 55
    assert plan.sessions[1].name == "Legs"
    assert plan.sessions[1].assigned_days == [2, 5]
    assert [session.name for session in plan.sessions][-1] == "Session 5"
    assert "session-4" not in [session.id for session in plan.sessions]


def test_get_plan_unknown_id() -> None:
    service, _, _ = _service()

    with pytest.raises(NotFoundError):
        service.get_plan(USER_ID, "nope")
