"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionTotals:
    """Consumed macronutrients for a day."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class NutritionTargets:
    """Daily macronutrient targets. Every field is strictly positive."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class NutritionProgress:
    """Percentage of each daily target reached, unclamped."""

    calories: float
    protein: float
    carbs: float
    fat: float

    @property
    def average(self) -> float:
        """Unweighted mean of the four percentages."""
        return (self.calories + self.protein + self.carbs + self.fat) / 4
