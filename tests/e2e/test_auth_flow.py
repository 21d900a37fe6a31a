"""End-to-end tests for registration, activation and tokens."""

import pytest
from fastapi.testclient import TestClient

from tests.harness import create_test_app, sign_up


@pytest.fixture
def client():
    """Create test client."""
    with TestClient(create_test_app()) as test_client:
        yield test_client


class TestAuthFlow:
    """End-to-end tests for the sign-up flow."""

    def test_register_returns_inactive_user_with_token(self, client):
        # Act
        response = client.post(
            "/v1/authentication/user",
            json={
                "username": "alice",
                "email": "alice@example.com",
                "password": "secret123",
            },
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "alice"
        assert data["is_active"] is False
        assert data["role"]["name"] == "user"
        assert data["token"]
        assert "password" not in data

    def test_inactive_user_cannot_get_token(self, client):
        client.post(
            "/v1/authentication/user",
            json={"username": "alice", "email": "alice@example.com", "password": "secret123"},
        )

        response = client.post(
            "/v1/authentication/token",
            json={"email": "alice@example.com", "password": "secret123"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "unauthorized"}

    def test_full_flow_issues_usable_token(self, client):
        # Arrange
        user_id, headers = sign_up(client, "alice")

        # Act
        response = client.get(f"/v1/users/{user_id}", headers=headers)

        # Assert
        assert response.status_code == 200
        assert response.json()["is_active"] is True

    def test_wrong_password_is_unauthorized(self, client):
        sign_up(client, "alice")

        response = client.post(
            "/v1/authentication/token",
            json={"email": "alice@example.com", "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "unauthorized"}

    def test_duplicate_email_conflicts(self, client):
        sign_up(client, "alice")

        response = client.post(
            "/v1/authentication/user",
            json={"username": "alice2", "email": "alice@example.com", "password": "secret123"},
        )

        assert response.status_code == 409

    def test_activation_token_is_single_use(self, client):
        registered = client.post(
            "/v1/authentication/user",
            json={"username": "alice", "email": "alice@example.com", "password": "secret123"},
        ).json()
        client.put(f"/v1/users/activate/{registered['token']}")

        response = client.put(f"/v1/users/activate/{registered['token']}")

        assert response.status_code == 404

    def test_invalid_body_is_bad_request(self, client):
        response = client.post(
            "/v1/authentication/user",
            json={"username": "alice", "email": "not-an-email", "password": "secret123"},
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("body.email")

    def test_missing_token_is_unauthorized(self, client):
        response = client.get("/v1/users/1")

        assert response.status_code == 401
        assert response.json() == {"error": "unauthorized"}

    def test_malformed_token_is_unauthorized(self, client):
        response = client.get("/v1/users/1", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401

    def test_password_over_72_bytes_is_bad_request(self, client):
        """72 two-byte characters fit the length limit but not bcrypt."""
        response = client.post(
            "/v1/authentication/user",
            json={"username": "alice", "email": "alice@example.com", "password": "é" * 72},
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("body.password")

    def test_password_of_72_ascii_bytes_is_accepted(self, client):
        response = client.post(
            "/v1/authentication/user",
            json={"username": "alice", "email": "alice@example.com", "password": "a" * 72},
        )

        assert response.status_code == 201
