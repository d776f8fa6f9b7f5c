"""Integration tests for the REST API."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from sheetcut.application.commands import CalculateLayoutCommand
from sheetcut.domain.exceptions import UnknownPackerError
from sheetcut.web import create_app
from sheetcut.web.dependencies import get_calculate_command

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh app."""
    return TestClient(create_app())


@pytest.fixture
def job() -> dict:
    return json.loads((FIXTURES_PATH / "valid_job.json").read_text(encoding="utf-8"))


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestPackEndpoint:
    """Tests for POST /api/v1/pack."""

    def test_pack_job(self, client: TestClient, job: dict) -> None:
        response = client.post("/api/v1/pack", json=job)

        assert response.status_code == 200
        data = response.json()
        assert data["packer"] == "maximal-rectangles"
        assert data["units"] == "mm"
        assert data["currency"] == "€"
        assert len(data["layouts"]) == 2
        assert sum(len(layout["cuts"]) for layout in data["layouts"]) == 6
        assert data["remaining_panels"] == []
        assert data["stats"]["estimated_cost"] == 90.0

    def test_cut_fields(self, client: TestClient) -> None:
        job = {
            "schema_version": "1.0",
            "stock": [{"length": 2440, "width": 1220}],
            "required": [{"length": 600, "width": 400, "label": "Door", "color": "red"}],
        }
        response = client.post("/api/v1/pack", json=job)

        assert response.status_code == 200
        cut = response.json()["layouts"][0]["cuts"][0]
        assert cut == {
            "x": 0,
            "y": 0,
            "width": 400,
            "length": 600,
            "label": "Door",
            "color": "red",
            "rotated": False,
        }

    def test_unplaced_pieces_reported(self, client: TestClient) -> None:
        job = {
            "schema_version": "1.0",
            "settings": {"packer": "maximal-rectangles"},
            "stock": [{"length": 500, "width": 500}],
            "required": [{"length": 600, "width": 400, "label": "Top"}],
        }
        response = client.post("/api/v1/pack", json=job)

        assert response.status_code == 200
        remaining = response.json()["remaining_panels"]
        assert [p["label"] for p in remaining] == ["Top"]

    def test_invalid_job_rejected(self, client: TestClient, job: dict) -> None:
        job["required"][0]["length"] = -1
        response = client.post("/api/v1/pack", json=job)
        assert response.status_code == 422

    def test_unknown_field_rejected(self, client: TestClient, job: dict) -> None:
        job["settings"]["blade"] = "fine"
        response = client.post("/api/v1/pack", json=job)
        assert response.status_code == 422

    def test_packing_configuration_error(self, job: dict) -> None:
        """Engine lookup failures map to a structured 422 response."""

        def failing_provider(settings):
            raise UnknownPackerError("guillotine", ["grid-heuristic"])

        app = create_app()
        app.dependency_overrides[get_calculate_command] = lambda: CalculateLayoutCommand(
            packer_provider=failing_provider
        )
        response = TestClient(app).post("/api/v1/pack", json=job)

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "packing_configuration"
        assert "Unknown packer type: guillotine" in data["error"]
        assert data["details"] == [
            {"requested": "guillotine", "available": ["grid-heuristic"]}
        ]


class TestPackersEndpoint:
    """Tests for GET /api/v1/packers."""

    def test_list_packers(self, client: TestClient) -> None:
        response = client.get("/api/v1/packers")

        assert response.status_code == 200
        data = response.json()
        assert data["packers"] == ["grid-heuristic", "maximal-rectangles"]
        assert "best-short-side-fit" in data["fit_rules"]
        assert len(data["fit_rules"]) == 5
