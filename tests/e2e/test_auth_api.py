"""End-to-end tests for the authentication API."""

import pytest
from fastapi.testclient import TestClient

from civicsync.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client backed by empty in-memory stores."""
    return TestClient(create_app(build_test_container()))


def _register(client, email="ann@example.com", password="secret1", name="Ann"):
    return client.post(
        "/api/auth/register", json={"email": email, "password": password, "name": name}
    )


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["message"] == "CivicSync API is running"
        assert "/api/issues/:id/vote" in data["endpoints"]["voting"]


class TestRegisterAndLogin:
    """Registration, login and /me."""

    def test_register_login_me(self, client):
        # Register
        response = _register(client)
        assert response.status_code == 201
        registered = response.json()
        assert registered["message"] == "User registered successfully"
        assert registered["user"]["email"] == "ann@example.com"

        # Login with different email case
        response = client.post(
            "/api/auth/login", json={"email": "ANN@example.com", "password": "secret1"}
        )
        assert response.status_code == 200
        token = response.json()["token"]

        # Me
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json() == {"user": registered["user"]}

    def test_duplicate_email(self, client):
        _register(client)

        response = _register(client, email="Ann@Example.com")

        assert response.status_code == 400
        assert response.json() == {"error": "User with this email already exists"}

    def test_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "x@example.com"})

        assert response.status_code == 400
        assert response.json() == {
            "error": "All fields (email, password, name) are required"
        }

    def test_short_password(self, client):
        response = _register(client, password="12345")

        assert response.status_code == 400
        assert "at least 6 characters" in response.json()["error"]

    def test_wrong_password(self, client):
        _register(client)

        response = client.post(
            "/api/auth/login", json={"email": "ann@example.com", "password": "nope123"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email or password"}

    def test_malformed_json(self, client):
        response = client.post(
            "/api/auth/login",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()


class TestBearerGate:
    """Protected routes reject missing and bad tokens."""

    def test_missing_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Access denied. No token provided."}

    def test_invalid_token(self, client):
        response = client.get(
            "/api/issues", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Invalid or expired token"}
