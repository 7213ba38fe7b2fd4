"""Integration tests for the REST API.

These tests exercise the FastAPI app through TestClient:
- Scene layout responses and error statuses
- Request validation results
- File export endpoints
"""

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from cargoscene.web.app import create_app

pytestmark = pytest.mark.integration


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh app."""
    return TestClient(create_app())


def _fixture(fixtures_path: Path, name: str) -> dict[str, Any]:
    return json.loads((fixtures_path / name).read_text())


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestLayoutEndpoint:
    """Tests for POST /api/v1/layout."""

    def test_precomputed_request(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/layout", json=_fixture(fixtures_path, "valid_precomputed.json"))
        assert response.status_code == 200
        data = response.json()
        assert data["container_name"] == "crate-12"
        assert data["upstream_utilization"] == 41.7
        assert data["mode"] == "precomputed"
        assert [b["name"] for b in data["boxes"]] == ["pallet", "tube"]
        assert len(data["annotations"]) == 3
        assert data["grid"] is None
        assert data["warnings"] == []

    def test_shelf_request_with_aliases(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/layout", json=_fixture(fixtures_path, "valid_shelf.json"))
        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "shelf"
        assert data["summary"]["placed"] == 4
        assert data["grid"]["size"] == pytest.approx(8.0)

    def test_malformed_values_are_defaulted(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/layout", json=_fixture(fixtures_path, "malformed_values.json"))
        assert response.status_code == 200
        data = response.json()
        assert data["container"] == {"length": 2.0, "width": 1.5, "height": 1.5}
        assert len(data["warnings"]) == 4
        assert "Item 'odd' length, width missing or invalid, using 0.001 m" in data["warnings"]
        assert data["boxes"][0]["position"] == [1.0, 0.0, 0.0]
        assert data["boxes"][1]["position"] == [0.5, 0.0, 0.5]

    def test_empty_body_renders_default_container(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout", json={})
        assert response.status_code == 200
        assert response.json()["boxes"] == []

    def test_unknown_field_is_422(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/layout", json=_fixture(fixtures_path, "unknown_field.json"))
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "colour"

    def test_invalid_settings_is_422(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/layout", json=_fixture(fixtures_path, "invalid_settings.json"))
        assert response.status_code == 422
        paths = {d["path"] for d in response.json()["details"]}
        assert "settings.target_max" in paths

    def test_non_object_body_is_422(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout", json=[1, 2, 3])
        assert response.status_code == 422


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid_request(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/validate", json=_fixture(fixtures_path, "valid_precomputed.json"))
        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_warnings(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/validate", json=_fixture(fixtures_path, "overlapping.json"))
        data = response.json()
        assert data["is_valid"] is True
        assert len(data["warnings"]) == 1
        assert data["warnings"][0]["path"] == "items[0]"

    def test_schema_errors_are_reported_in_body(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/validate", json=_fixture(fixtures_path, "invalid_settings.json"))
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert {e["path"] for e in data["errors"]} >= {"settings.target_max"}


class TestExportEndpoints:
    """Tests for the export endpoints."""

    def test_list_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/export/formats")
        assert response.status_code == 200
        assert response.json() == {"formats": ["json", "stl"]}

    def test_export_json(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/export/json", json=_fixture(fixtures_path, "valid_precomputed.json"))
        assert response.status_code == 200
        assert response.headers["content-disposition"] == 'attachment; filename="crate-12.json"'
        assert json.loads(response.content)["summary"]["placed"] == 2

    def test_export_stl(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/export/stl", json=_fixture(fixtures_path, "valid_precomputed.json"))
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/octet-stream"
        # binary STL: 80-byte header, 4-byte count, 50 bytes per triangle
        assert len(response.content) == 84 + 50 * 24

    def test_default_file_name(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/export/json", json=_fixture(fixtures_path, "valid_shelf.json"))
        assert 'filename="container.json"' in response.headers["content-disposition"]

    def test_name_with_separator_is_flattened(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/json", json={"container_name": "20/40ft"})
        assert response.status_code == 200
        assert response.headers["content-disposition"] == 'attachment; filename="20_40ft.json"'

    def test_absolute_path_name_writes_nothing_outside(self, client: TestClient, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere"
        response = client.post("/api/v1/export/stl", json={"container_name": str(target)})
        assert response.status_code == 200
        assert not target.with_suffix(".stl").exists()
        assert list(tmp_path.iterdir()) == []
        assert "/" not in response.headers["content-disposition"].split("filename=")[1]

    def test_unsupported_format(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/gltf", json={})
        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unsupported_format"
        assert data["details"]["available"] == ["json", "stl"]

    def test_invalid_request(self, client: TestClient, fixtures_path: Path) -> None:
        response = client.post("/api/v1/export/stl", json=_fixture(fixtures_path, "unknown_field.json"))
        assert response.status_code == 422


class TestOpenApi:
    """Tests for the generated API description."""

    def test_error_schema_is_documented(self, client: TestClient) -> None:
        response = client.get("/openapi.json")
        assert response.status_code == 200
        document = response.json()
        assert "ErrorResponseSchema" in document["components"]["schemas"]
        assert "/api/v1/layout" in document["paths"]
