"""Supabase key-value store for notification markers."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from snack_suggestions.services.store import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Key-value store over a ``key``/``value`` table."""

    client: Client
    table_name: str = "notification_markers"

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite a key."""
        self.client.table(self.table_name).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()

    def delete(self, key: str) -> None:
        """Delete a key."""
        self.client.table(self.table_name).delete().eq("key", key).execute()

    def keys(self, prefix: str = "") -> list[str]:
        """Return keys starting with the prefix."""
        query = self.client.table(self.table_name).select("key")
        if prefix:
            query = query.like("key", f"{prefix}%")
        response = query.execute()
        return [str(row["key"]) for row in response.data or []]
