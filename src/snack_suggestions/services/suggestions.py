"""Random snack selection from the catalog."""

import random
from dataclasses import dataclass, field

from snack_suggestions.domain.snacks import SnackSuggestion, TimeOfDay
from snack_suggestions.snack_catalog import SNACK_CATALOG


class CatalogCoverageError(ValueError):
    """Raised when the catalog has no snack for some time of day."""


def validate_catalog(catalog: tuple[SnackSuggestion, ...]) -> None:
    """Ensure every time of day has at least one candidate snack."""
    missing = [
        time_of_day.value
        for time_of_day in TimeOfDay
        if not any(snack.category.suits(time_of_day) for snack in catalog)
    ]
    if missing:
        raise CatalogCoverageError(
            f"Snack catalog has no suggestions for: {', '.join(missing)}"
        )


@dataclass
class SuggestionService:
    """Pick snacks suited to a time of day."""

    catalog: tuple[SnackSuggestion, ...] = SNACK_CATALOG
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self) -> None:
        validate_catalog(self.catalog)

    def candidates(self, time_of_day: TimeOfDay) -> list[SnackSuggestion]:
        """Return catalog entries for the time of day, including ``both``."""
        return [snack for snack in self.catalog if snack.category.suits(time_of_day)]

    def pick(self, time_of_day: TimeOfDay) -> SnackSuggestion:
        """Return a uniformly random candidate."""
        return self.rng.choice(self.candidates(time_of_day))
