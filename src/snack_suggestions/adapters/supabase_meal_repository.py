"""Supabase repository for logged meals."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from snack_suggestions.domain.models import MealRecord
from snack_suggestions.services.nutrition import MealRepository


def _iso_millis(value: datetime) -> str:
    return value.astimezone(UTC).isoformat(timespec="milliseconds")


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal reads."""

    client: Client

    def list_meals(
        self, child_id: str, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return a child's meals created in ``[start, end)``."""
        response = (
            self.client.table("meals")
            .select("child_id, created_at, calories, protein, carbs, fat")
            .eq("child_id", child_id)
            .gte("created_at", _iso_millis(start))
            .lt("created_at", _iso_millis(end))
            .execute()
        )
        return [_parse_row(row, child_id) for row in response.data or []]


def _parse_optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _parse_row(row: dict[str, object], child_id: str) -> MealRecord:
    created_raw = row.get("created_at")
    logged_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    return MealRecord(
        child_id=str(row.get("child_id") or child_id),
        logged_at=logged_at,
        calories=_parse_optional_float(row.get("calories")),
        protein=_parse_optional_float(row.get("protein")),
        carbs=_parse_optional_float(row.get("carbs")),
        fat=_parse_optional_float(row.get("fat")),
    )
