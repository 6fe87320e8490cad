"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from supabase import create_client

from snack_suggestions.adapters.expo_push_client import (
    ExpoPushClient,
    NotificationClient,
)
from snack_suggestions.adapters.supabase_child_repository import (
    SupabaseChildRepository,
)
from snack_suggestions.adapters.supabase_marker_store import SupabaseKeyValueStore
from snack_suggestions.adapters.supabase_meal_repository import (
    SupabaseMealRepository,
)
from snack_suggestions.config import Settings, supports_local_notifications
from snack_suggestions.services.children import ChildService
from snack_suggestions.services.markers import MarkerService
from snack_suggestions.services.messages import NotificationMessages
from snack_suggestions.services.nutrition import NutritionService
from snack_suggestions.services.scheduler import SnackSuggestionScheduler
from snack_suggestions.services.suggestions import SuggestionService
from snack_suggestions.services.tester import NotificationTester


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    notification_client: NotificationClient
    child_service: ChildService
    nutrition_service: NutritionService
    suggestion_service: SuggestionService
    marker_service: MarkerService
    scheduler: SnackSuggestionScheduler
    notification_tester: NotificationTester
    close_resources: Callable[[], Awaitable[None]]


def wall_clock(timezone_name: str) -> Callable[[], datetime]:
    """Return a clock reading the current time in a timezone."""
    tz = ZoneInfo(timezone_name)

    def now() -> datetime:
        return datetime.now(tz=tz)

    return now


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    child_service = ChildService(SupabaseChildRepository(supabase_client))
    nutrition_service = NutritionService(
        repository=SupabaseMealRepository(supabase_client),
        timezone_name=resolved_settings.timezone,
    )
    suggestion_service = SuggestionService()
    marker_service = MarkerService(SupabaseKeyValueStore(supabase_client))
    messages = NotificationMessages(resolved_settings.language)
    notifications_supported = supports_local_notifications(
        resolved_settings.platform
    )
    push_client = ExpoPushClient.create(
        push_token=resolved_settings.expo_push_token,
        push_url=resolved_settings.expo_push_url,
        access_token=resolved_settings.expo_access_token,
    )
    scheduler = SnackSuggestionScheduler(
        nutrition_service=nutrition_service,
        suggestion_service=suggestion_service,
        marker_service=marker_service,
        notification_client=push_client,
        messages=messages,
        clock=wall_clock(resolved_settings.timezone),
        interval_seconds=resolved_settings.check_interval_seconds,
        test_notifications=resolved_settings.test_notifications,
        notifications_supported=notifications_supported,
        marker_retention_days=resolved_settings.marker_retention_days,
    )
    tester = NotificationTester(
        suggestion_service=suggestion_service,
        notification_client=push_client,
        messages=messages,
        notifications_supported=notifications_supported,
    )

    async def close_resources() -> None:
        await scheduler.aclose()
        await push_client.close()

    return AppContainer(
        settings=resolved_settings,
        notification_client=push_client,
        child_service=child_service,
        nutrition_service=nutrition_service,
        suggestion_service=suggestion_service,
        marker_service=marker_service,
        scheduler=scheduler,
        notification_tester=tester,
        close_resources=close_resources,
    )
