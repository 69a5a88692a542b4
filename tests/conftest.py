from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from helpdesk.core.config import get_settings
from helpdesk.main import app
from helpdesk.repositories.ticket_store import JsonTicketStore


@pytest.fixture
def data_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    path = tmp_path / "tickets.json"
    monkeypatch.setenv("DATA_FILE", str(path))
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()


@pytest.fixture
def ticket_store(data_file: Path) -> JsonTicketStore:
    return JsonTicketStore(data_file)


@pytest.fixture
def client() -> Iterator[TestClient]:
    yield TestClient(app)
    app.dependency_overrides.clear()
