"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field


class ArmRequest(BaseModel):
    """Request to arm the scheduler for a child."""

    child_id: str = Field(min_length=1)
    age: float | None = Field(default=None, ge=0)


class SchedulerStatus(BaseModel):
    """Current scheduler state."""

    state: str
    child_id: str | None = None
    age: float | None = None


class MacroValues(BaseModel):
    """Calories and macronutrients."""

    calories: float
    protein: float
    carbs: float
    fat: float


class ProgressResponse(BaseModel):
    """Today's nutrition progress for a child."""

    child_id: str
    totals: MacroValues
    targets: MacroValues
    progress: MacroValues
    average_progress: float
