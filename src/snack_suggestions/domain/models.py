"""Domain models for children and their meals."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Child:
    """Represents a child profile stored in the database."""

    id: str
    name: str
    age: float | None


@dataclass(frozen=True)
class MealRecord:
    """A logged meal with its macronutrients.

    Any nutrient may be missing on the stored row; aggregation treats a
    missing value as zero.
    """

    child_id: str
    logged_at: datetime
    calories: float | None
    protein: float | None
    carbs: float | None
    fat: float | None
