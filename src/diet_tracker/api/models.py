"""Request models for the HTTP API.

Numeric fields are permissive: blanks, garbage and NaN are read as 0.
"""

from datetime import date
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from diet_tracker.domain.foods import CustomFoodDraft, FoodItem
from diet_tracker.domain.workouts import (
    Exercise,
    WeeklyChanges,
    WorkoutPlan,
    WorkoutSession,
)
from diet_tracker.services.diary import QUICK_ADD_NAME
from diet_tracker.services.numbers import coerce_number

_NUTRIENT_FIELDS = (
    "serving_size",
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "sodium",
)


def _to_int(value: object) -> int:
    return int(coerce_number(value))


class FoodPayload(BaseModel):
    """A food as returned by search, sent back for scaling or logging."""

    id: str = ""
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

    @field_validator(*_NUTRIENT_FIELDS, mode="before")
    @classmethod
    def _coerce(cls, value: object) -> float:
        return coerce_number(value)

    def to_domain(self) -> FoodItem:
        """Convert to a domain food item."""
        return FoodItem(**self.model_dump())


class CustomFoodRequest(BaseModel):
    """New user-submitted food."""

    name: str = Field(min_length=1)
    serving_size: float = 100.0
    serving_unit: Literal["g", "ml", "oz"] = "g"
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0

    @field_validator(*_NUTRIENT_FIELDS, mode="before")
    @classmethod
    def _coerce(cls, value: object) -> float:
        return coerce_number(value)

    def to_domain(self) -> CustomFoodDraft:
        """Convert to a domain draft."""
        return CustomFoodDraft(**self.model_dump())


class FoodSelection(BaseModel):
    """A food plus the quantity to scale it to."""

    food: FoodPayload
    quantity: float

    @field_validator("quantity", mode="before")
    @classmethod
    def _coerce(cls, value: object) -> float:
        return coerce_number(value)


class QuickAddRequest(BaseModel):
    """Raw calories and protein to log."""

    name: str = QUICK_ADD_NAME
    calories: float = 0.0
    protein: float = 0.0

    @field_validator("calories", "protein", mode="before")
    @classmethod
    def _coerce(cls, value: object) -> float:
        return coerce_number(value)


class StepsRequest(BaseModel):
    """Step count for a day."""

    steps: float

    @field_validator("steps", mode="before")
    @classmethod
    def _coerce(cls, value: object) -> float:
        return coerce_number(value)


class TargetsUpdate(BaseModel):
    """Partial update of daily targets."""

    calories_target: float | None = None
    protein_target: float | None = None
    steps_target: float | None = None

    @field_validator("calories_target", "protein_target", "steps_target", mode="before")
    @classmethod
    def _coerce(cls, value: object) -> float | None:
        return None if value is None else coerce_number(value)

    def to_changes(self) -> dict[str, float]:
        """Return only the fields that were provided."""
        return self.model_dump(exclude_none=True)


class WeeklyChangesPayload(BaseModel):
    """Planned progression for an exercise."""

    weight: float = 0.0
    sets: int = 0
    max_reps: int = 0

    @field_validator("weight", mode="before")
    @classmethod
    def _coerce_weight(cls, value: object) -> float:
        return coerce_number(value)

    @field_validator("sets", "max_reps", mode="before")
    @classmethod
    def _coerce_counts(cls, value: object) -> int:
        return _to_int(value)

    def to_domain(self) -> WeeklyChanges:
        """Convert to the domain model."""
        return WeeklyChanges(**self.model_dump())


class ExercisePayload(BaseModel):
    """Exercise within a submitted plan."""

    name: str = ""
    weight: float = 0.0
    sets: int = 3
    max_reps: int = 8
    notes: str = ""
    weekly_changes: WeeklyChangesPayload | None = None

    @field_validator("weight", mode="before")
    @classmethod
    def _coerce_weight(cls, value: object) -> float:
        return coerce_number(value)

    @field_validator("sets", "max_reps", mode="before")
    @classmethod
    def _coerce_counts(cls, value: object) -> int:
        return _to_int(value)

    def to_domain(self) -> Exercise:
        """Convert to the domain model."""
        return Exercise(
            name=self.name,
            weight=self.weight,
            sets=self.sets,
            max_reps=self.max_reps,
            notes=self.notes,
            weekly_changes=(
                self.weekly_changes.to_domain() if self.weekly_changes else None
            ),
        )


class WorkoutSessionPayload(BaseModel):
    """Session within a submitted plan."""

    id: str = ""
    name: str
    exercises: list[ExercisePayload] = Field(default_factory=list)
    assigned_days: list[int] = Field(default_factory=list)

    def to_domain(self) -> WorkoutSession:
        """Convert to the domain model, generating an id when missing."""
        return WorkoutSession(
            id=self.id or f"session-{uuid4().hex[:12]}",
            name=self.name,
            exercises=[exercise.to_domain() for exercise in self.exercises],
            assigned_days=sorted({day for day in self.assigned_days if 0 <= day <= 6}),
        )


class WorkoutPlanRequest(BaseModel):
    """Full workout plan as submitted by the client."""

    name: str = Field(min_length=1)
    sessions: list[WorkoutSessionPayload]
    is_default: bool = False
    week_start_date: date | None = None

    def to_domain(self, plan_id: str = "") -> WorkoutPlan:
        """Convert to the domain model."""
        return WorkoutPlan(
            id=plan_id,
            name=self.name,
            sessions=[session.to_domain() for session in self.sessions],
            is_default=self.is_default,
            week_start_date=self.week_start_date,
        )


class ExerciseUpdate(BaseModel):
    """Partial update of a single exercise."""

    name: str | None = None
    weight: float | None = None
    sets: int | None = None
    max_reps: int | None = None
    notes: str | None = None
    weekly_changes: WeeklyChangesPayload | None = None

    @field_validator("weight", mode="before")
    @classmethod
    def _coerce_weight(cls, value: object) -> float | None:
        return None if value is None else coerce_number(value)

    @field_validator("sets", "max_reps", mode="before")
    @classmethod
    def _coerce_counts(cls, value: object) -> int | None:
        return None if value is None else _to_int(value)

    def to_changes(self) -> dict[str, object]:
        """Return the provided fields as domain values."""
        changes: dict[str, object] = self.model_dump(
            exclude_none=True, exclude={"weekly_changes"}
        )
        if self.weekly_changes is not None:
            changes["weekly_changes"] = self.weekly_changes.to_domain()
        return changes


class SessionRenameRequest(BaseModel):
    """New name for a session."""

    name: str = Field(min_length=1)
