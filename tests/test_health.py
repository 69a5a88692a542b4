from datetime import UTC, datetime
from pathlib import Path

from fastapi.testclient import TestClient
from helpdesk.api.routes.health import get_health_service
from helpdesk.main import app
from helpdesk.models.schemas.health import HealthResponse, StoreHealth
from helpdesk.repositories.health_repository import HealthRepository
from helpdesk.repositories.ticket_store import JsonTicketStore


class _HealthyService:
    def get_health(self) -> HealthResponse:
        return HealthResponse(
            status="ok",
            environment="test",
            store=StoreHealth(readable=True, ticket_count=2),
            timestamp=datetime.now(UTC),
        )


class _DegradedService:
    def get_health(self) -> HealthResponse:
        return HealthResponse(
            status="degraded",
            environment="test",
            store=StoreHealth(readable=False, message="Store file is empty."),
            timestamp=datetime.now(UTC),
        )


def test_root_reports_running(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"
    assert response.json()["message"] == "HelpDesk API is running"


def test_health_ok(client: TestClient) -> None:
    app.dependency_overrides[get_health_service] = _HealthyService
    response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["store"]["ticket_count"] == 2


def test_health_degraded(client: TestClient) -> None:
    app.dependency_overrides[get_health_service] = _DegradedService
    response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "degraded"
    assert payload["store"]["readable"] is False


def test_health_repository_does_not_repair_store(data_file: Path) -> None:
    data_file.write_text("{broken", encoding="utf-8")
    repository = HealthRepository(JsonTicketStore(data_file))

    health = repository.check_store()

    assert health.readable is False
    assert data_file.read_text(encoding="utf-8") == "{broken"


def test_health_repository_counts_tickets(data_file: Path) -> None:
    store = JsonTicketStore(data_file)
    store.reset()

    assert HealthRepository(store).check_store().ticket_count == 2
