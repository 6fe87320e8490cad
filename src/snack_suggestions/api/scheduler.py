"""Scheduler and test notification endpoints with simple token auth."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from snack_suggestions.api.schemas import ArmRequest, SchedulerStatus
from snack_suggestions.services.scheduler import (
    DEFAULT_CHILD_AGE,
    SnackSuggestionScheduler,
)

if TYPE_CHECKING:
    from snack_suggestions.containers import AppContainer

router = APIRouter(tags=["scheduler"])


class TestNotificationKind(str, Enum):
    """Manual test notification variants."""

    IMMEDIATE = "immediate"
    DELAYED = "delayed"
    SIMULATED = "simulated"


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def _status(scheduler: SnackSuggestionScheduler) -> SchedulerStatus:
    context = scheduler.context
    return SchedulerStatus(
        state=scheduler.state.value,
        child_id=context.child_id if context else None,
        age=context.age if context else None,
    )


@router.get("/scheduler", dependencies=[Depends(require_admin)])
async def scheduler_status(request: Request) -> SchedulerStatus:
    """Return whether the scheduler is armed and for which child."""
    container: AppContainer = request.app.state.container
    return _status(container.scheduler)


@router.post("/scheduler/arm", dependencies=[Depends(require_admin)])
async def arm_scheduler(payload: ArmRequest, request: Request) -> SchedulerStatus:
    """Arm the scheduler for a child, looking up the age when omitted."""
    container: AppContainer = request.app.state.container
    age = payload.age
    if age is None:
        child = container.child_service.get_child(payload.child_id)
        if child is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Child not found"
            )
        age = child.age if child.age is not None else DEFAULT_CHILD_AGE
    container.scheduler.start(payload.child_id, age)
    return _status(container.scheduler)


@router.post("/scheduler/disarm", dependencies=[Depends(require_admin)])
async def disarm_scheduler(request: Request) -> SchedulerStatus:
    """Stop the scheduler."""
    container: AppContainer = request.app.state.container
    container.scheduler.stop()
    return _status(container.scheduler)


@router.post("/notifications/test/{kind}", dependencies=[Depends(require_admin)])
async def send_test_notification(
    kind: TestNotificationKind,
    child_id: str,
    request: Request,
) -> dict[str, object]:
    """Send one of the manual test notifications."""
    container: AppContainer = request.app.state.container
    tester = container.notification_tester
    if kind is TestNotificationKind.IMMEDIATE:
        payload = await tester.send_immediate(child_id)
    elif kind is TestNotificationKind.DELAYED:
        payload = await tester.send_delayed(child_id)
    else:
        payload = await tester.simulate_snack_time(child_id)
    return {
        "dispatched": tester.notifications_supported,
        "notification": payload.to_dict(),
    }
