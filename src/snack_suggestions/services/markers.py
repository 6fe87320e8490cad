"""Per-day dedupe markers for snack notifications."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from snack_suggestions.services.store import KeyValueStore

_logger = logging.getLogger(__name__)

MARKER_PREFIX = "snack_notification_"
MARKER_VALUE = "true"
_KEY_PARTS = 3


def marker_key(child_id: str, day: date, slot: str) -> str:
    """Return the storage key for a child, day and slot."""
    return f"{MARKER_PREFIX}{child_id}_{day.isoformat()}_{slot}"


def parse_marker_date(key: str) -> date | None:
    """Extract the day encoded in a marker key, if it has one."""
    if not key.startswith(MARKER_PREFIX):
        return None
    # Child ids may contain underscores; the date is always the second-last part.
    parts = key[len(MARKER_PREFIX) :].rsplit("_", 2)
    if len(parts) != _KEY_PARTS:
        return None
    try:
        return date.fromisoformat(parts[1])
    except ValueError:
        return None


@dataclass
class MarkerService:
    """Records which snack slots already notified on a given day."""

    store: KeyValueStore

    def is_marked(self, child_id: str, day: date, slot: str) -> bool:
        """Return True when a notification was already sent."""
        return self.store.get(marker_key(child_id, day, slot)) is not None

    def mark(self, child_id: str, day: date, slot: str) -> None:
        """Record that a notification was sent."""
        self.store.set(marker_key(child_id, day, slot), MARKER_VALUE)

    def prune(self, today: date, retention_days: int) -> int:
        """Delete markers older than the retention window.

        Returns the number of markers removed. Keys without a parseable date
        are left alone.
        """
        cutoff = today - timedelta(days=retention_days)
        removed = 0
        for key in self.store.keys(MARKER_PREFIX):
            day = parse_marker_date(key)
            if day is None or day >= cutoff:
                continue
            self.store.delete(key)
            removed += 1
        if removed:
            _logger.info("Pruned %s snack notification markers", removed)
        return removed
