"""Snack suggestion scheduler.

The scheduler is Idle until a child is armed, then runs a check right away
and every ``interval_seconds`` after that. A check looks for a matching
slot in the slot table, skips slots already notified today, compares the
child's average progress with the slot threshold, and pushes a snack
suggestion when the child is behind.

Re-arming for another child (or a new age) cancels the running task before
a new one starts, so only one timer is ever active per scheduler.
"""

import asyncio
import contextlib
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from snack_suggestions.adapters.expo_push_client import NotificationClient
from snack_suggestions.domain.notifications import (
    NotificationData,
    NotificationPayload,
    NotificationType,
)
from snack_suggestions.domain.snacks import DEFAULT_SLOTS, SnackSlot, TimeOfDay
from snack_suggestions.services.markers import MarkerService
from snack_suggestions.services.messages import NotificationMessages
from snack_suggestions.services.nutrition import NutritionService
from snack_suggestions.services.suggestions import SuggestionService

_logger = logging.getLogger(__name__)

DEFAULT_CHILD_AGE = 5
NOON_HOUR = 12
TEST_WINDOW_MINUTES = 5


class SchedulerState(str, Enum):
    """Lifecycle state of the scheduler."""

    IDLE = "idle"
    ARMED = "armed"


@dataclass(frozen=True)
class ChildContext:
    """Child the scheduler is armed for."""

    child_id: str
    age: float


@dataclass
class _ArmedRun:
    context: ChildContext
    task: asyncio.Task | None = None
    active: bool = True


def round_half_up(value: float) -> int:
    """Round like JavaScript's ``Math.round``."""
    return math.floor(value + 0.5)


@dataclass
class SnackSuggestionScheduler:
    """Periodically decides whether to push a snack suggestion."""

    nutrition_service: NutritionService
    suggestion_service: SuggestionService
    marker_service: MarkerService
    notification_client: NotificationClient
    messages: NotificationMessages
    clock: Callable[[], datetime]
    slots: tuple[SnackSlot, ...] = DEFAULT_SLOTS
    interval_seconds: float = 60
    test_notifications: bool = False
    notifications_supported: bool = True
    marker_retention_days: int = 7
    _run: _ArmedRun | None = field(default=None, init=False, repr=False)

    @property
    def state(self) -> SchedulerState:
        """Return whether a timer is running."""
        return SchedulerState.IDLE if self._run is None else SchedulerState.ARMED

    @property
    def context(self) -> ChildContext | None:
        """Return the child the scheduler is armed for."""
        return self._run.context if self._run else None

    def start(self, child_id: str | None, age: float = DEFAULT_CHILD_AGE) -> bool:
        """Arm for a child, re-arming when the child or age changed.

        Must be called from a running event loop. Returns True when the
        scheduler is armed afterwards.
        """
        if not child_id:
            self.stop()
            return False
        if not self.notifications_supported:
            _logger.info("Local notifications unsupported; scheduler stays idle")
            return False
        context = ChildContext(child_id=child_id, age=age)
        if self._run is not None and self._run.context == context:
            return True
        self._arm(context)
        return True

    def restart(self, child_id: str, age: float = DEFAULT_CHILD_AGE) -> bool:
        """Re-arm unconditionally, running a fresh check immediately."""
        self.stop()
        return self.start(child_id, age)

    def stop(self) -> None:
        """Cancel the running timer and return to Idle."""
        run = self._run
        if run is None:
            return
        self._run = None
        run.active = False
        if run.task is not None:
            run.task.cancel()
        _logger.info("Snack scheduler disarmed for child %s", run.context.child_id)

    async def aclose(self) -> None:
        """Stop and wait for the cancelled task to unwind."""
        run = self._run
        self.stop()
        if run is not None and run.task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await run.task

    def _arm(self, context: ChildContext) -> None:
        self.stop()
        run = _ArmedRun(context=context)
        run.task = asyncio.get_running_loop().create_task(
            self._tick(run), name=f"snack-scheduler-{context.child_id}"
        )
        self._run = run
        _logger.info(
            "Snack scheduler armed for child %s (age %s)",
            context.child_id,
            context.age,
        )

    async def _prune_markers(self) -> None:
        try:
            await asyncio.to_thread(
                self.marker_service.prune,
                self.clock().date(),
                self.marker_retention_days,
            )
        except Exception:
            _logger.exception("Failed to prune snack notification markers")

    async def _tick(self, run: _ArmedRun) -> None:
        loop = asyncio.get_running_loop()
        await self._prune_markers()
        next_at = loop.time()
        while run.active:
            await self.check(run.context, run)
            next_at += self.interval_seconds
            # A slow check skips missed ticks instead of bursting to catch up.
            while next_at <= loop.time():
                next_at += self.interval_seconds
            await asyncio.sleep(next_at - loop.time())

    async def check(
        self, context: ChildContext, run: _ArmedRun | None = None
    ) -> NotificationPayload | None:
        """Run one check and return the dispatched payload, if any.

        Failures are logged and swallowed so the timer keeps ticking.
        """
        try:
            return await self._check(context, run)
        except Exception:
            _logger.exception(
                "Error in snack suggestion check for child %s", context.child_id
            )
            return None

    async def _check(
        self, context: ChildContext, run: _ArmedRun | None
    ) -> NotificationPayload | None:
        now = self.clock()
        # The test window wins over a production slot at the same minute.
        is_test = self.in_test_window(now)
        slot = self.match_slot(now)
        if slot is None:
            if not is_test:
                return None
            slot = self.test_slot(now)

        today = now.date()
        if not is_test and await asyncio.to_thread(
            self.marker_service.is_marked, context.child_id, today, slot.name
        ):
            return None

        report = await self.nutrition_service.get_progress(
            context.child_id, context.age, now=now
        )
        avg_progress = report.progress.average
        if not is_test and not avg_progress < slot.threshold_percent:
            return None

        suggestion = self.suggestion_service.pick(slot.time_of_day)
        payload = NotificationPayload(
            title=self.messages.title(test=is_test),
            body=self.messages.body(suggestion),
            data=NotificationData(
                snack_suggestion=suggestion,
                child_id=context.child_id,
                type=(
                    NotificationType.TEST_SNACK_SUGGESTION
                    if is_test
                    else NotificationType.SNACK_SUGGESTION
                ),
                avg_progress=round_half_up(avg_progress),
                target_percentage=round_half_up(slot.threshold_percent),
            ),
        )
        if run is not None and not run.active:
            _logger.info("Scheduler disarmed mid-check; dropping suggestion")
            return None

        await self.notification_client.schedule_notification(
            payload.title, payload.body, payload.data.to_dict(), trigger=None
        )
        if not is_test:
            await asyncio.to_thread(
                self.marker_service.mark, context.child_id, today, slot.name
            )
        _logger.info(
            "Snack suggestion sent: %s (Progress: %s%%, Target: %s%%)",
            suggestion.name,
            payload.data.avg_progress,
            payload.data.target_percentage,
        )
        return payload

    def match_slot(self, now: datetime) -> SnackSlot | None:
        """Return the production slot whose trigger minute is ``now``."""
        for slot in self.slots:
            if slot.matches(now):
                return slot
        return None

    def in_test_window(self, now: datetime) -> bool:
        """Return True for the development-only every-5-minutes window."""
        return self.test_notifications and now.minute % TEST_WINDOW_MINUTES == 0

    def test_slot(self, now: datetime) -> SnackSlot:
        """Return the slot whose threshold a test notification borrows."""
        wanted = TimeOfDay.MORNING if now.hour < NOON_HOUR else TimeOfDay.AFTERNOON
        for slot in self.slots:
            if slot.time_of_day is wanted:
                return slot
        return self.slots[-1]
