"""Supabase-backed child repository."""

from dataclasses import dataclass

from supabase import Client

from snack_suggestions.domain.models import Child
from snack_suggestions.services.children import ChildRepository


@dataclass
class SupabaseChildRepository(ChildRepository):
    """Supabase implementation for child profile reads."""

    client: Client

    def get_child(self, child_id: str) -> Child | None:
        """Return the child row for an id, if present."""
        response = (
            self.client.table("children")
            .select("id, name, age")
            .eq("id", child_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Child(
            id=str(row["id"]),
            name=str(row.get("name") or ""),
            age=float(row["age"]) if row.get("age") is not None else None,
        )
