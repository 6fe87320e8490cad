"""Child profile lookups."""

from dataclasses import dataclass
from typing import Protocol

from snack_suggestions.domain.models import Child


class ChildRepository(Protocol):
    """Read interface for child profiles."""

    def get_child(self, child_id: str) -> Child | None:
        """Return the child for an id, if present."""


@dataclass
class ChildService:
    """Application service for child profile reads."""

    repository: ChildRepository

    def get_child(self, child_id: str) -> Child | None:
        """Return a child profile by id."""
        return self.repository.get_child(child_id)
