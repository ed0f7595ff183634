"""Tests for API middleware."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from catalog_api.catalog.service import CatalogService


class TestRequestIdMiddleware:
    """Tests for request ID correlation."""

    def test_generates_request_id(self, client: TestClient) -> None:
        """Responses carry a generated request ID."""
        response = client.get("/health")

        assert response.headers.get("X-Request-ID")

    def test_propagates_request_id(self, client: TestClient) -> None:
        """A caller-supplied request ID is echoed back."""
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_in_error_body(self, client: TestClient) -> None:
        """Error bodies repeat the request ID."""
        response = client.get("/products/424242", headers={"X-Request-ID": "req-404"})

        assert response.status_code == 404
        assert response.json()["request_id"] == "req-404"


class TestErrorHandlerMiddleware:
    """Tests for unhandled exceptions."""

    def test_unhandled_exception(self, client: TestClient) -> None:
        """Unexpected errors become a generic 500."""
        with patch.object(
            CatalogService,
            "get_stats",
            side_effect=RuntimeError("boom"),
        ):
            response = client.get("/products/stats")

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert "boom" not in data["message"]
