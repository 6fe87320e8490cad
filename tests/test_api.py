"""Tests for the HTTP API."""

from datetime import UTC, datetime

from fastapi.testclient import TestClient

from snack_suggestions.api.app import create_app
from tests.conftest import FakeClock, FakeNotificationClient, InMemoryMealRepository

HEADERS = {"X-Admin-Token": "admin-token"}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_scheduler_routes_require_admin_token(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/scheduler").status_code == 401
    assert (
        client.get("/scheduler", headers={"X-Admin-Token": "wrong"}).status_code
        == 401
    )


def test_arm_and_disarm_scheduler(container, clock: FakeClock) -> None:
    clock.now = datetime(2026, 10, 18, 10, 0, tzinfo=UTC)

    with TestClient(create_app(container)) as client:
        armed = client.post(
            "/scheduler/arm", json={"child_id": "child-1", "age": 7}, headers=HEADERS
        )
        status = client.get("/scheduler", headers=HEADERS)
        disarmed = client.post("/scheduler/disarm", headers=HEADERS)

    assert armed.status_code == 200
    assert armed.json() == {"state": "armed", "child_id": "child-1", "age": 7}
    assert status.json()["state"] == "armed"
    assert disarmed.json() == {"state": "idle", "child_id": None, "age": None}


def test_arm_looks_up_child_age(container, clock: FakeClock) -> None:
    clock.now = datetime(2026, 10, 18, 10, 0, tzinfo=UTC)

    with TestClient(create_app(container)) as client:
        armed = client.post(
            "/scheduler/arm", json={"child_id": "child-1"}, headers=HEADERS
        )
        missing = client.post(
            "/scheduler/arm", json={"child_id": "nobody"}, headers=HEADERS
        )

    assert armed.json()["age"] == 4
    assert missing.status_code == 404


def test_shutdown_disarms_scheduler(container, clock: FakeClock) -> None:
    clock.now = datetime(2026, 10, 18, 10, 0, tzinfo=UTC)

    with TestClient(create_app(container)) as client:
        client.post(
            "/scheduler/arm", json={"child_id": "child-1", "age": 5}, headers=HEADERS
        )

    assert container.scheduler.state.value == "idle"


def test_progress_endpoint(
    container, meal_repository: InMemoryMealRepository
) -> None:
    meal_repository.add("child-1", datetime.now(tz=UTC), 600, 15, 75, 20)
    client = TestClient(create_app(container))

    response = client.get("/progress/child-1", params={"age": 5})

    body = response.json()
    assert response.status_code == 200
    assert body["targets"] == {
        "calories": 1200,
        "protein": 30,
        "carbs": 150,
        "fat": 40,
    }
    assert body["progress"]["calories"] == 50
    assert body["average_progress"] == 50


def test_test_notification_endpoint(
    container, notification_client: FakeNotificationClient
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/notifications/test/simulated",
        params={"child_id": "child-1"},
        headers=HEADERS,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["dispatched"] is True
    assert body["notification"]["data"]["type"] == "simulated_snack_time"
    assert notification_client.sent[0]["data"]["childId"] == "child-1"


def test_unknown_test_notification_kind(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/notifications/test/loud", params={"child_id": "c"}, headers=HEADERS
    )

    assert response.status_code == 422
