"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for the application (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def schema(client: TestClient) -> dict:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_title_and_version(self, schema: dict) -> None:
        assert schema["info"]["title"] == "authgate"
        assert schema["info"]["version"] == "0.1.0"

    @pytest.mark.parametrize("path", ["/login", "/register", "/verify"])
    def test_post_endpoints_documented(self, schema: dict, path: str) -> None:
        assert "post" in schema["paths"][path]
        assert "auth" in schema["paths"][path]["post"]["tags"]

    def test_register_documents_201(self, schema: dict) -> None:
        assert "201" in schema["paths"]["/register"]["post"]["responses"]

    def test_verify_requires_bearer_token(self, schema: dict) -> None:
        assert schema["paths"]["/verify"]["post"]["security"] == [{"HTTPBearer": []}]

    def test_request_schemas(self, schema: dict) -> None:
        components = schema["components"]["schemas"]
        assert set(components["LoginRequest"]["properties"]) == {"email", "password"}
        assert {"rut", "email", "password", "name"} <= set(
            components["RegisterRequest"]["properties"]
        )
        assert set(components["VerifyRequest"]["properties"]) == {"code"}

    def test_error_response_schema(self, schema: dict) -> None:
        assert "error" in schema["components"]["schemas"]["ErrorResponse"]["properties"]


class TestUnknownRoute:
    """Framework errors use the same error shape."""

    def test_unknown_route_returns_error_body(self, client: TestClient) -> None:
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.json()["error"]["status_code"] == 404
