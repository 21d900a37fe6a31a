"""End-to-end tests for health, debug and rate limiting."""

import base64

from fastapi.testclient import TestClient

from social.config import AuthSettings, BasicAuthSettings, RateLimiterSettings
from tests.harness import create_test_app, make_test_settings


def _basic(username: str, password: str) -> dict:
    encoded = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {encoded}"}


class TestHealth:
    """Health check."""

    def test_health(self):
        with TestClient(create_test_app()) as client:
            response = client.get("/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["environment"] == "test"


class TestDebugVars:
    """Basic-auth protected debug endpoint."""

    def _client(self) -> TestClient:
        settings = make_test_settings(
            auth=AuthSettings(basic=BasicAuthSettings(username="ops", password="s3cret"))
        )
        return TestClient(create_test_app(settings))

    def test_missing_credentials_get_a_challenge(self):
        with self._client() as client:
            response = client.get("/v1/debug/vars")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"].startswith("Basic realm=")

    def test_wrong_credentials_are_rejected(self):
        with self._client() as client:
            response = client.get("/v1/debug/vars", headers=_basic("ops", "guess"))

        assert response.status_code == 401

    def test_right_credentials_see_switches(self):
        with self._client() as client:
            response = client.get("/v1/debug/vars", headers=_basic("ops", "s3cret"))

        assert response.status_code == 200
        data = response.json()
        assert data["environment"] == "test"
        assert data["rate_limiter_enabled"] is False

    def test_unconfigured_credentials_are_an_internal_error(self):
        settings = make_test_settings(
            auth=AuthSettings(basic=BasicAuthSettings(username="", password=""))
        )
        with TestClient(create_test_app(settings), raise_server_exceptions=False) as client:
            response = client.get("/v1/debug/vars", headers=_basic("ops", "s3cret"))

        assert response.status_code == 500
        assert response.json() == {
            "error": "the server encountered a problem and could not process your request"
        }


class TestRateLimit:
    """Fixed-window rate limiting."""

    def test_requests_over_budget_are_rejected(self):
        # Arrange
        settings = make_test_settings(
            rate_limiter=RateLimiterSettings(
                enabled=True, requests_per_time_frame=2, time_frame_seconds=60
            )
        )

        # Act
        with TestClient(create_test_app(settings)) as client:
            responses = [client.get("/v1/health") for _ in range(3)]

        # Assert
        assert [r.status_code for r in responses] == [200, 200, 429]
        assert int(responses[2].headers["Retry-After"]) >= 1
        assert "error" in responses[2].json()
