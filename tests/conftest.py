"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- A fresh token store per test
- Fake Google identity provider and calendar client (no network)
- Test client (FastAPI TestClient) wired to the fakes
- Sample Google event payloads
"""

from typing import Dict, Generator, List, Optional
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from calendar_backend.deps import (
    get_auth_provider,
    get_calendar_service,
    get_token_store,
)
from calendar_backend.environments.base import (
    APIError,
    AuthenticationError,
    EnvironmentProvider,
    UserInfo,
)
from calendar_backend.environments.google.calendar import CalendarEvent
from calendar_backend.main import app
from calendar_backend.services.calendar_service import CalendarQueryService
from calendar_backend.services.token_store import TokenStore


UTC = ZoneInfo("UTC")


# ---------------------------------------------------------------------------
# FAKE GOOGLE COLLABORATORS
# ---------------------------------------------------------------------------


class FakeAuthProvider(EnvironmentProvider):
    """Identity provider that knows a fixed set of tokens."""

    provider_name = "fake-google"

    def __init__(self, users: Optional[Dict[str, UserInfo]] = None):
        self.users = users or {}
        self.calls: List[str] = []

    async def get_user_info(self, access_token: str) -> UserInfo:
        self.calls.append(access_token)
        if access_token not in self.users:
            raise AuthenticationError("Failed to get user info")
        return self.users[access_token]


class FakeCalendarBackend:
    """
    Stands in for Google Calendar.

    Acts as the client factory handed to CalendarQueryService and records
    every call so tests can assert on tokens and parameters.
    """

    def __init__(self, items: Optional[List[dict]] = None):
        self.items = items or []
        self.error: Optional[APIError] = None
        self.created_for: List[str] = []
        self.list_calls: List[dict] = []
        self.raw_calls: List[dict] = []

    def __call__(self, access_token: str) -> "FakeCalendarClient":
        self.created_for.append(access_token)
        return FakeCalendarClient(self, access_token)


class FakeCalendarClient:
    def __init__(self, backend: FakeCalendarBackend, access_token: str):
        self.backend = backend
        self.access_token = access_token

    async def list_events(self, **kwargs) -> List[CalendarEvent]:
        self.backend.list_calls.append(kwargs)
        if self.backend.error:
            raise self.backend.error
        return [CalendarEvent.model_validate(item) for item in self.backend.items]

    async def get_events_raw(self, **kwargs) -> dict:
        self.backend.raw_calls.append(kwargs)
        if self.backend.error:
            raise self.backend.error
        return {"kind": "calendar#events", "items": self.backend.items}


# ---------------------------------------------------------------------------
# SAMPLE DATA
# ---------------------------------------------------------------------------


@pytest.fixture
def google_user() -> UserInfo:
    return UserInfo(
        provider_user_id="google-sub-123",
        email="ada@example.com",
        name="Ada Lovelace",
    )


@pytest.fixture
def sample_items() -> List[dict]:
    """Google Events.list items, already ordered by start time."""
    return [
        {
            "id": "evt-1",
            "summary": "Team Sync",
            "description": "",
            "location": "",
            "attendees": [],
            "start": {"dateTime": "2024-03-15T09:00:00Z"},
            "end": {"dateTime": "2024-03-15T09:30:00Z"},
        },
        {
            "id": "evt-2",
            "summary": "Budget review",
            "description": "Q2 numbers",
            "location": "Room 4",
            "organizer": {"email": "cfo@example.com"},
            "start": {"dateTime": "2024-03-15T11:00:00Z"},
            "end": {"dateTime": "2024-03-15T12:00:00Z"},
        },
        {
            "id": "evt-3",
            "summary": "Dentist",
            "attendees": [{"email": "dr.smith@clinic.example"}],
            "start": {"date": "2024-03-16"},
            "end": {"date": "2024-03-17"},
            "colorId": "5",
        },
    ]


# ---------------------------------------------------------------------------
# STORE / FAKES / CLIENT
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> TokenStore:
    return TokenStore(ttl_seconds=3600)


@pytest.fixture
def auth_provider(google_user: UserInfo) -> FakeAuthProvider:
    return FakeAuthProvider({"valid-token": google_user})


@pytest.fixture
def calendar_backend(sample_items: List[dict]) -> FakeCalendarBackend:
    return FakeCalendarBackend(items=sample_items)


@pytest.fixture
def client(
    store: TokenStore,
    auth_provider: FakeAuthProvider,
    calendar_backend: FakeCalendarBackend,
) -> Generator[TestClient, None, None]:
    """
    Create a test client with the fake Google collaborators.

    Overrides the store, provider and calendar service dependencies.
    """
    app.dependency_overrides[get_token_store] = lambda: store
    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_calendar_service] = lambda: CalendarQueryService(
        store=store,
        client_factory=calendar_backend,
        tz=UTC,
    )

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def signed_in_client(client: TestClient) -> TestClient:
    """Test client that already holds a session cookie."""
    response = client.post("/api/auth/google", json={"access_token": "valid-token"})
    assert response.status_code == 200
    return client
