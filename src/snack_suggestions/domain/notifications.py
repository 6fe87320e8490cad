"""Notification payload models."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from snack_suggestions.domain.snacks import SnackSuggestion


class NotificationType(str, Enum):
    """Kinds of notification the app emits."""

    SNACK_SUGGESTION = "snack_suggestion"
    TEST_SNACK_SUGGESTION = "test_snack_suggestion"
    TEST_NOTIFICATION = "test_notification"
    TEST_DELAYED_NOTIFICATION = "test_delayed_notification"
    SIMULATED_SNACK_TIME = "simulated_snack_time"


@dataclass(frozen=True)
class DelayTrigger:
    """Deliver a notification after a delay instead of immediately."""

    seconds: float


class NotificationData(BaseModel):
    """Structured data attached to a notification."""

    model_config = ConfigDict(populate_by_name=True)

    snack_suggestion: SnackSuggestion = Field(alias="snackSuggestion")
    child_id: str = Field(alias="childId")
    type: NotificationType
    avg_progress: int | None = Field(default=None, alias="avgProgress")
    target_percentage: int | None = Field(default=None, alias="targetPercentage")

    def to_dict(self) -> dict[str, object]:
        """Serialize with the camelCase keys notification consumers expect."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class NotificationPayload(BaseModel):
    """Title, body and data of a notification."""

    title: str
    body: str
    data: NotificationData

    def to_dict(self) -> dict[str, object]:
        """Serialize the payload for transport."""
        return {"title": self.title, "body": self.body, "data": self.data.to_dict()}
