import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from helpdesk.main import app


@pytest.fixture
def integration_client(data_file: Path) -> Iterator[TestClient]:
    with TestClient(app) as client:
        yield client


def test_startup_seeds_missing_store(integration_client: TestClient, data_file: Path) -> None:
    assert data_file.exists()

    response = integration_client.get("/tickets?method=allTickets")
    assert response.status_code == 200
    tickets = response.json()
    assert [ticket["id"] for ticket in tickets] == ["1", "2"]
    assert all("description" not in ticket for ticket in tickets)


def test_ticket_end_to_end_flow(integration_client: TestClient, data_file: Path) -> None:
    created = integration_client.post("/tickets?method=createTicket", json={"name": "Printer broken"})
    assert created.status_code == 200
    ticket_id = created.json()["id"]
    assert created.json()["ticket"]["id"] == ticket_id

    loaded = integration_client.get("/tickets", params={"method": "ticketById", "id": ticket_id})
    assert loaded.status_code == 200
    assert loaded.json()["name"] == "Printer broken"
    assert loaded.json()["status"] is False
    assert loaded.json()["description"] == ""
    created_at = loaded.json()["created"]

    updated = integration_client.post(
        "/tickets?method=updateTicket",
        json={"id": ticket_id, "name": "", "description": "Tray 2 jams"},
    )
    assert updated.status_code == 200
    assert updated.json()["ticket"]["name"] == "Printer broken"
    assert updated.json()["ticket"]["description"] == "Tray 2 jams"
    assert updated.json()["ticket"]["created"] == created_at

    done = integration_client.post(
        "/tickets?method=statusTicket", json={"id": ticket_id, "status": True}
    )
    assert done.json()["ticket"]["status"] is True

    reopened = integration_client.post(
        "/tickets?method=statusTicket", json={"id": ticket_id, "status": False}
    )
    assert reopened.json()["ticket"]["status"] is False

    document = json.loads(data_file.read_text(encoding="utf-8"))
    assert [ticket["id"] for ticket in document["tickets"]][-1] == ticket_id

    deleted = integration_client.post("/tickets?method=deleteTicket", json={"id": ticket_id})
    assert deleted.json() == {"success": True}

    missing = integration_client.get("/tickets", params={"method": "ticketById", "id": ticket_id})
    assert missing.status_code == 404


def test_unknown_ids_leave_store_untouched(
    integration_client: TestClient,
    data_file: Path,
) -> None:
    before = data_file.read_bytes()

    update = integration_client.post(
        "/tickets?method=updateTicket", json={"id": "nonexistent", "name": "X"}
    )
    delete = integration_client.post("/tickets?method=deleteTicket", json={"id": "nonexistent"})
    status = integration_client.post(
        "/tickets?method=statusTicket", json={"id": "nonexistent", "status": True}
    )

    assert update.status_code == delete.status_code == status.status_code == 404
    assert data_file.read_bytes() == before


def test_corrupted_store_is_restored_on_next_request(
    integration_client: TestClient,
    data_file: Path,
) -> None:
    integration_client.post("/tickets?method=createTicket", json={"name": "Lost on reset"})
    data_file.write_text("{oops", encoding="utf-8")

    response = integration_client.get("/tickets?method=allTickets")

    assert response.status_code == 200
    assert len(response.json()) == 2
    assert len(json.loads(data_file.read_text(encoding="utf-8"))["tickets"]) == 2


def test_health_reports_store(integration_client: TestClient) -> None:
    response = integration_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["store"]["ticket_count"] == 2
