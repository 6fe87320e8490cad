"""Snack catalog and slot models."""

from dataclasses import dataclass
from datetime import datetime, time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TimeOfDay(str, Enum):
    """Part of the day a suggestion is requested for."""

    MORNING = "morning"
    AFTERNOON = "afternoon"


class SnackCategory(str, Enum):
    """Part of the day a catalog snack is suited to."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    BOTH = "both"

    def suits(self, time_of_day: TimeOfDay) -> bool:
        """Return True when the snack may be offered at this time of day."""
        return self is SnackCategory.BOTH or self.value == time_of_day.value


class SnackSuggestion(BaseModel):
    """Static catalog entry describing a snack."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    calories: int
    protein: int
    carbs: int
    fat: int
    image_url: str = Field(alias="imageUrl")
    recipe: str
    category: SnackCategory


@dataclass(frozen=True)
class SnackSlot:
    """Daily window in which a snack reminder may fire."""

    name: str
    trigger_time: time
    threshold_percent: float
    time_of_day: TimeOfDay

    def matches(self, now: datetime) -> bool:
        """Return True when ``now`` falls in the trigger minute."""
        return (
            now.hour == self.trigger_time.hour
            and now.minute == self.trigger_time.minute
        )


DEFAULT_SLOTS: tuple[SnackSlot, ...] = (
    SnackSlot(
        name="morning",
        trigger_time=time(9, 45),
        threshold_percent=33.33,
        time_of_day=TimeOfDay.MORNING,
    ),
    SnackSlot(
        name="afternoon",
        trigger_time=time(15, 45),
        threshold_percent=66.67,
        time_of_day=TimeOfDay.AFTERNOON,
    ),
)
