"""Daily nutrition aggregation, age-based targets and progress."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from snack_suggestions.domain.models import MealRecord
from snack_suggestions.domain.nutrition import (
    NutritionProgress,
    NutritionTargets,
    NutritionTotals,
)

_logger = logging.getLogger(__name__)

ZERO_TOTALS = NutritionTotals(calories=0, protein=0, carbs=0, fat=0)

# Upper age bound (inclusive) for each bracket, youngest first.
AGE_BRACKETS: tuple[tuple[float, NutritionTargets], ...] = (
    (3, NutritionTargets(calories=1000, protein=25, carbs=130, fat=35)),
    (6, NutritionTargets(calories=1200, protein=30, carbs=150, fat=40)),
    (10, NutritionTargets(calories=1600, protein=35, carbs=200, fat=50)),
)
OLDEST_TARGETS = NutritionTargets(calories=2000, protein=45, carbs=250, fat=65)


class MealRepository(Protocol):
    """Read interface for logged meals."""

    def list_meals(
        self, child_id: str, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals logged in ``[start, end)``."""


def targets_for(age: float) -> NutritionTargets:
    """Return the daily targets for a child's age.

    Ages past the last bracket, and values that compare false against every
    bound, get the oldest bracket.
    """
    for upper_bound, targets in AGE_BRACKETS:
        if age <= upper_bound:
            return targets
    return OLDEST_TARGETS


def calculate_progress(
    current: NutritionTotals, targets: NutritionTargets
) -> NutritionProgress:
    """Return the percentage of each target reached."""
    return NutritionProgress(
        calories=current.calories / targets.calories * 100,
        protein=current.protein / targets.protein * 100,
        carbs=current.carbs / targets.carbs * 100,
        fat=current.fat / targets.fat * 100,
    )


def sum_meals(meals: list[MealRecord]) -> NutritionTotals:
    """Sum each nutrient across meals, counting missing values as zero."""
    calories = protein = carbs = fat = 0.0
    for meal in meals:
        calories += meal.calories or 0
        protein += meal.protein or 0
        carbs += meal.carbs or 0
        fat += meal.fat or 0
    return NutritionTotals(calories=calories, protein=protein, carbs=carbs, fat=fat)


@dataclass(frozen=True)
class ProgressReport:
    """Today's totals alongside targets and progress."""

    totals: NutritionTotals
    targets: NutritionTargets
    progress: NutritionProgress


@dataclass
class NutritionService:
    """Service computing a child's nutrition for the current local day."""

    repository: MealRepository
    timezone_name: str = "UTC"

    def day_bounds(self, now: datetime | None = None) -> tuple[datetime, datetime]:
        """Return local midnight of ``now`` and the following midnight."""
        tz = ZoneInfo(self.timezone_name)
        local_now = (now or datetime.now(tz=tz)).astimezone(tz)
        start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
        return start, start + timedelta(days=1)

    async def aggregate_today(
        self, child_id: str, now: datetime | None = None
    ) -> NutritionTotals:
        """Return today's totals, or zeros when meals can't be read."""
        start, end = self.day_bounds(now)
        try:
            meals = await asyncio.to_thread(
                self.repository.list_meals,
                child_id,
                start.astimezone(UTC),
                end.astimezone(UTC),
            )
        except Exception:
            _logger.exception("Failed to fetch meals for child %s", child_id)
            return ZERO_TOTALS
        return sum_meals(meals)

    async def get_progress(
        self, child_id: str, age: float, now: datetime | None = None
    ) -> ProgressReport:
        """Return today's totals, targets and progress for a child."""
        totals = await self.aggregate_today(child_id, now=now)
        targets = targets_for(age)
        return ProgressReport(
            totals=totals,
            targets=targets,
            progress=calculate_progress(totals, targets),
        )
