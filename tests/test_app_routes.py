"""HTTP route smoke tests for the FastAPI application."""
from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from timetable.main import create_app


@pytest.fixture
def client(tmp_path: Path, monkeypatch) -> TestClient:
    monkeypatch.setenv("TIMETABLE_DATA_DIR", str(tmp_path))
    return TestClient(create_app())


def test_root_endpoint_returns_running_message(client: TestClient) -> None:
    """The root endpoint should return the expected heartbeat payload."""

    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "RUNNING TIMETABLE BACK"}


def test_status_endpoint_reports_version(client: TestClient) -> None:
    """The status endpoint should expose the application version."""

    response = client.get("/api/v1/status")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "0.1.0"}


def test_default_app_stores_data_under_configured_directory(
    client: TestClient, tmp_path: Path
) -> None:
    """Without injected repositories the JSON store lives in the data directory."""

    client.put("/api/v1/lesson-tables/thursday", json={"lessons": []})
    client.post("/api/v1/lesson-tables/thursday/backup")

    assert (tmp_path / "lesson_tables" / "lesson_table_thursday.json").exists()
    assert (tmp_path / "lesson_tables_backup" / "lesson_table_thursday.json").exists()
