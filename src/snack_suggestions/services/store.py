"""Key-value storage abstractions."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol


class KeyValueStore(Protocol):
    """String key-value storage."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if any."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""

    def delete(self, key: str) -> None:
        """Remove a key if present."""

    def keys(self, prefix: str = "") -> list[str]:
        """Return stored keys starting with ``prefix``."""


@dataclass
class _Entry:
    value: str
    expires_at: datetime | None


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store with an optional TTL applied to every entry."""

    ttl_seconds: int | None
    _entries: dict[str, _Entry]

    def __init__(self, ttl_seconds: int | None = None) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries = {}

    def get(self, key: str) -> str | None:
        """Return a value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: str) -> None:
        """Store a value, stamping its expiry when a TTL is configured."""
        expires_at = None
        if self.ttl_seconds is not None:
            expires_at = datetime.now(tz=UTC) + timedelta(seconds=self.ttl_seconds)
        self._entries[key] = _Entry(value=value, expires_at=expires_at)

    def delete(self, key: str) -> None:
        """Remove a key."""
        self._entries.pop(key, None)

    def keys(self, prefix: str = "") -> list[str]:
        """Return live keys with the prefix."""
        return [
            key
            for key in list(self._entries)
            if key.startswith(prefix) and self.get(key) is not None
        ]
