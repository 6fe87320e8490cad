"""Expo push notification client adapter."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

import httpx

from snack_suggestions.domain.notifications import DelayTrigger

_logger = logging.getLogger(__name__)


class NotificationClient(Protocol):
    """Interface for dispatching device notifications."""

    async def schedule_notification(
        self,
        title: str,
        body: str,
        data: dict[str, object],
        trigger: DelayTrigger | None = None,
    ) -> None:
        """Send a notification now, or after the trigger's delay."""


@dataclass
class ExpoPushClient(NotificationClient):
    """Notification client backed by the Expo push API."""

    push_token: str
    push_url: str
    http_client: httpx.AsyncClient
    access_token: str | None = None
    _pending: set[asyncio.Task] = field(default_factory=set, init=False, repr=False)

    @classmethod
    def create(
        cls, push_token: str, push_url: str, access_token: str | None = None
    ) -> "ExpoPushClient":
        """Create a push client with a managed httpx session."""
        return cls(
            push_token=push_token,
            push_url=push_url,
            http_client=httpx.AsyncClient(),
            access_token=access_token,
        )

    async def schedule_notification(
        self,
        title: str,
        body: str,
        data: dict[str, object],
        trigger: DelayTrigger | None = None,
    ) -> None:
        """Push immediately, or queue a delayed push and return."""
        if trigger is None:
            await self._send(title, body, data)
            return
        task = asyncio.get_running_loop().create_task(
            self._send_later(trigger.seconds, title, body, data)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _send_later(
        self, delay: float, title: str, body: str, data: dict[str, object]
    ) -> None:
        await asyncio.sleep(delay)
        try:
            await self._send(title, body, data)
        except Exception:
            _logger.exception("Delayed push notification failed")

    async def _send(self, title: str, body: str, data: dict[str, object]) -> None:
        headers = {"Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        payload: dict[str, object] = {
            "to": self.push_token,
            "title": title,
            "body": body,
            "data": data,
            "sound": "default",
        }
        response = await self.http_client.post(
            self.push_url, json=payload, headers=headers, timeout=10
        )
        response.raise_for_status()
        ticket = response.json().get("data") or {}
        if isinstance(ticket, list):
            ticket = ticket[0] if ticket else {}
        if ticket.get("status") == "error":
            raise RuntimeError(
                f"Expo rejected push notification: {ticket.get('message')}"
            )

    async def close(self) -> None:
        """Cancel queued pushes and close the HTTP session."""
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        await self.http_client.aclose()
