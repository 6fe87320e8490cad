"""Manual notification tests for the snack reminder pipeline."""

import logging
from dataclasses import dataclass

from snack_suggestions.adapters.expo_push_client import NotificationClient
from snack_suggestions.domain.notifications import (
    DelayTrigger,
    NotificationData,
    NotificationPayload,
    NotificationType,
)
from snack_suggestions.domain.snacks import SnackSuggestion, TimeOfDay
from snack_suggestions.services.messages import (
    DELAYED_TITLE_PREFIX,
    NotificationMessages,
)
from snack_suggestions.services.suggestions import SuggestionService

_logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 10


@dataclass
class NotificationTester:
    """Sends test notifications outside the scheduled slots.

    On platforms without local notifications the payload is only returned,
    for the caller to simulate in-app.
    """

    suggestion_service: SuggestionService
    notification_client: NotificationClient
    messages: NotificationMessages
    notifications_supported: bool = True

    async def send_immediate(self, child_id: str) -> NotificationPayload:
        """Send a morning suggestion right away."""
        suggestion = self.suggestion_service.pick(TimeOfDay.MORNING)
        payload = self._payload(
            self.messages.title(),
            self.messages.body(suggestion),
            suggestion,
            child_id,
            NotificationType.TEST_NOTIFICATION,
        )
        await self._dispatch(payload, None)
        return payload

    async def send_delayed(
        self, child_id: str, seconds: float = DEFAULT_DELAY_SECONDS
    ) -> NotificationPayload:
        """Schedule an afternoon suggestion after a delay.

        Without local notifications the returned title is prefixed to mark
        the delay.
        """
        suggestion = self.suggestion_service.pick(TimeOfDay.AFTERNOON)
        payload = self._payload(
            self.messages.title(),
            self.messages.body(suggestion),
            suggestion,
            child_id,
            NotificationType.TEST_DELAYED_NOTIFICATION,
        )
        if not self.notifications_supported:
            return payload.model_copy(
                update={"title": f"{DELAYED_TITLE_PREFIX}{payload.title}"}
            )
        await self._dispatch(payload, DelayTrigger(seconds=seconds))
        return payload

    async def simulate_snack_time(self, child_id: str) -> NotificationPayload:
        """Send the snack time alert a parent would see at a slot."""
        suggestion = self.suggestion_service.pick(TimeOfDay.MORNING)
        title, body = self.messages.simulated(suggestion)
        payload = self._payload(
            title, body, suggestion, child_id, NotificationType.SIMULATED_SNACK_TIME
        )
        await self._dispatch(payload, None)
        return payload

    async def _dispatch(
        self, payload: NotificationPayload, trigger: DelayTrigger | None
    ) -> None:
        if not self.notifications_supported:
            _logger.info("Notifications unsupported; returning simulated payload")
            return
        await self.notification_client.schedule_notification(
            payload.title, payload.body, payload.data.to_dict(), trigger=trigger
        )

    @staticmethod
    def _payload(
        title: str,
        body: str,
        suggestion: SnackSuggestion,
        child_id: str,
        notification_type: NotificationType,
    ) -> NotificationPayload:
        return NotificationPayload(
            title=title,
            body=body,
            data=NotificationData(
                snack_suggestion=suggestion,
                child_id=child_id,
                type=notification_type,
            ),
        )
