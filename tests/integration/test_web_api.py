"""Integration tests for the REST API."""

import json
from pathlib import Path
from typing import Any

import ezdxf
import pytest
from fastapi.testclient import TestClient

from seatplanner.web import create_app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app())


@pytest.fixture
def full_config() -> dict[str, Any]:
    """The two-venue 'christmas' project as a dictionary."""
    return json.loads((FIXTURES_PATH / "valid_full.json").read_text())


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    return json.loads((FIXTURES_PATH / "valid_minimal.json").read_text())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestLayoutEndpoint:
    """Tests for POST /api/v1/layout."""

    def test_full_project(self, client: TestClient, full_config: dict[str, Any]) -> None:
        response = client.post("/api/v1/layout", json={"config": full_config})
        assert response.status_code == 200
        data = response.json()
        assert data["project_name"] == "christmas"
        assert data["total_chairs"] == 374
        main = data["venues"][0]
        assert main["summary"]["total_chairs"] == 266
        assert main["summary"]["excluded_slots"] == 28
        assert main["wings"][0]["rect"]["x_cm"] == -300
        assert len(main["ac_units"]) == 4

    def test_chair_regions(self, client: TestClient, full_config: dict[str, Any]) -> None:
        data = client.post("/api/v1/layout", json={"config": full_config}).json()
        chairs = data["venues"][0]["chairs"]
        assert len(chairs) == 294
        assert chairs[0]["region"] == {"kind": "main", "block_index": 0}
        assert chairs[-1]["region"] == {"kind": "wing", "wing_id": "west"}

    def test_without_chairs(self, client: TestClient, minimal_config: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/layout", json={"config": minimal_config, "include_chairs": False}
        )
        assert response.status_code == 200
        assert "chairs" not in response.json()["venues"][0]

    def test_invalid_config(self, client: TestClient) -> None:
        config = {"venues": [{"name": "Tent", "width_m": -1, "length_m": 8}]}
        response = client.post("/api/v1/layout", json={"config": config})
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "venues[0].width_m"

    def test_missing_config(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout", json={})
        assert response.status_code == 422


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient, full_config: dict[str, Any]) -> None:
        response = client.post("/api/v1/validate", json={"config": full_config})
        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_warnings(self, client: TestClient) -> None:
        config = json.loads((FIXTURES_PATH / "valid_with_warnings.json").read_text())
        data = client.post("/api/v1/validate", json={"config": config}).json()
        assert data["is_valid"] is True
        assert {w["path"] for w in data["warnings"]} == {"venues[0].altar", "venues[0].wings[0]"}

    def test_schema_errors_are_reported_in_body(self, client: TestClient) -> None:
        config = json.loads((FIXTURES_PATH / "unknown_field.json").read_text())
        response = client.post("/api/v1/validate", json={"config": config})
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "venues[0].seats_per_row"

    def test_duplicate_wing_ids(self, client: TestClient) -> None:
        config = json.loads((FIXTURES_PATH / "duplicate_wing_ids.json").read_text())
        data = client.post("/api/v1/validate", json={"config": config}).json()
        assert data["is_valid"] is False
        assert data["errors"] == [
            {"message": "Value error, Duplicate id 'w' at wings[1]", "path": "venues[0]"}
        ]

    def test_layout_rejects_duplicate_wing_ids(self, client: TestClient) -> None:
        config = json.loads((FIXTURES_PATH / "duplicate_wing_ids.json").read_text())
        response = client.post("/api/v1/layout", json={"config": config})
        assert response.status_code == 422
        assert response.json()["details"][0]["path"] == "venues[0]"


class TestExportEndpoints:
    """Tests for the export endpoints."""

    def test_list_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/export/formats")
        assert response.json() == {"formats": ["csv", "dxf", "json", "svg"]}

    def test_svg(self, client: TestClient, full_config: dict[str, Any]) -> None:
        response = client.post("/api/v1/export/svg", json={"config": full_config})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="christmas_svg.svg"'
        )
        assert response.text.startswith("<svg")

    def test_csv_single_venue(self, client: TestClient, full_config: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/export/csv", json={"config": full_config, "venue_id": "overflow"}
        )
        assert response.status_code == 200
        lines = response.text.splitlines()
        assert len(lines) == 1 + 108
        assert all(line.startswith("overflow,") for line in lines[1:])

    def test_dxf(self, client: TestClient, minimal_config: dict[str, Any], tmp_path: Path) -> None:
        response = client.post("/api/v1/export/dxf", json={"config": minimal_config})
        assert response.status_code == 200
        path = tmp_path / "plan.dxf"
        path.write_text(response.text)
        msp = ezdxf.readfile(path).modelspace()
        assert len(msp.query('LWPOLYLINE[layer=="CHAIRS"]')) == 252

    def test_json(self, client: TestClient, minimal_config: dict[str, Any]) -> None:
        response = client.post("/api/v1/export/json", json={"config": minimal_config})
        assert response.json()["total_chairs"] == 252

    def test_unknown_format(self, client: TestClient, minimal_config: dict[str, Any]) -> None:
        response = client.post("/api/v1/export/pdf", json={"config": minimal_config})
        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unsupported_format"
        assert data["details"]["available"] == ["csv", "dxf", "json", "svg"]

    def test_unknown_venue(self, client: TestClient, full_config: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/export/svg", json={"config": full_config, "venue_id": "barn"}
        )
        assert response.status_code == 404
        data = response.json()
        assert data["error_type"] == "not_found"
        assert data["details"]["available"] == ["main", "overflow"]

    def test_invalid_config(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/svg", json={"config": {"venues": []}})
        assert response.status_code == 422
        assert response.json()["error_type"] == "validation"
