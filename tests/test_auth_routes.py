"""
Tests for the /api/auth endpoints.

These tests verify:
- Google sign-in sets the session cookie and echoes the profile
- Missing token → 400, rejected token → 401
- Raw calendar proxy requires a session
- Logout clears the session
"""

from fastapi.testclient import TestClient

from calendar_backend.environments.base import APIError


class TestGoogleAuth:
    """Tests for POST /api/auth/google."""

    def test_success(self, client: TestClient, store):
        response = client.post("/api/auth/google", json={"access_token": "valid-token"})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Authentication successful",
            "user": {"email": "ada@example.com", "name": "Ada Lovelace"},
        }
        assert client.cookies.get("session") == "google-sub-123"
        assert store.get("google-sub-123").access_token == "valid-token"

    def test_cookie_attributes(self, client: TestClient):
        response = client.post("/api/auth/google", json={"access_token": "valid-token"})

        set_cookie = response.headers["set-cookie"].lower()
        assert "session=google-sub-123" in set_cookie
        assert "httponly" in set_cookie
        assert "samesite=none" in set_cookie
        assert "max-age=86400" in set_cookie

    def test_missing_token(self, client: TestClient, auth_provider):
        response = client.post("/api/auth/google", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "Access token is required"
        assert auth_provider.calls == []
        assert "session" not in client.cookies

    def test_no_body(self, client: TestClient):
        response = client.post("/api/auth/google")

        assert response.status_code == 400

    def test_malformed_json_body(self, client: TestClient, auth_provider):
        response = client.post(
            "/api/auth/google",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Invalid request body"
        assert "details" in data  # development mode
        assert "detail" not in data
        assert auth_provider.calls == []

    def test_non_string_token(self, client: TestClient, auth_provider, store):
        response = client.post("/api/auth/google", json={"access_token": 123})

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Invalid request body"
        assert "access_token" in data["details"]
        assert auth_provider.calls == []
        assert len(store) == 0

    def test_invalid_body_hides_details_in_production(self, client: TestClient, monkeypatch):
        from calendar_backend.core.config import settings

        monkeypatch.setattr(settings, "ENVIRONMENT", "production")

        response = client.post("/api/auth/google", json={"access_token": ["a", "b"]})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request body"}

    def test_rejected_token(self, client: TestClient, store):
        response = client.post("/api/auth/google", json={"access_token": "bogus"})

        assert response.status_code == 401
        data = response.json()
        assert data["message"] == "Authentication failed"
        assert "details" in data  # development mode
        assert len(store) == 0

    def test_rejected_token_hides_details_in_production(self, client: TestClient, monkeypatch):
        from calendar_backend.core.config import settings

        monkeypatch.setattr(settings, "ENVIRONMENT", "production")

        response = client.post("/api/auth/google", json={"access_token": "bogus"})

        assert response.status_code == 401
        assert response.json() == {"message": "Authentication failed"}

    def test_reauth_keeps_single_session(self, client: TestClient, store):
        client.post("/api/auth/google", json={"access_token": "valid-token"})
        client.post("/api/auth/google", json={"access_token": "valid-token"})

        assert len(store) == 1


class TestRawCalendarEvents:
    """Tests for GET /api/auth/calendar/events."""

    def test_requires_session(self, client: TestClient, calendar_backend):
        response = client.get("/api/auth/calendar/events")

        assert response.status_code == 401
        assert response.json()["message"] == "Not authenticated"
        assert calendar_backend.raw_calls == []

    def test_returns_google_payload(self, signed_in_client: TestClient, calendar_backend, sample_items):
        response = signed_in_client.get("/api/auth/calendar/events")

        assert response.status_code == 200
        assert response.json() == {"kind": "calendar#events", "items": sample_items}
        assert calendar_backend.created_for == ["valid-token"]

    def test_upstream_failure(self, signed_in_client: TestClient, calendar_backend):
        calendar_backend.error = APIError("Unauthorized", status_code=401)

        response = signed_in_client.get("/api/auth/calendar/events")

        assert response.status_code == 500
        assert response.json()["message"] == "Failed to fetch calendar events"


class TestLogout:
    """Tests for POST /api/auth/logout."""

    def test_logout_clears_session(self, signed_in_client: TestClient, store):
        response = signed_in_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out"}
        assert store.has("google-sub-123") is False

        follow_up = signed_in_client.get("/api/calendar/events")
        assert follow_up.status_code == 401

    def test_logout_without_session(self, client: TestClient):
        response = client.post("/api/auth/logout")

        assert response.status_code == 200
