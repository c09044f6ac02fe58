"""
Dependencies module - reusable FastAPI dependencies for route handlers.

Services are built per request from the process-wide token store, so tests
can swap any piece through app.dependency_overrides.
"""

from typing import Optional

from fastapi import Depends, Request

from calendar_backend.core.config import settings
from calendar_backend.environments.base import EnvironmentProvider
from calendar_backend.environments.google import GoogleAuthClient
from calendar_backend.services.auth_service import AuthService
from calendar_backend.services.calendar_service import CalendarQueryService
from calendar_backend.services.token_store import TokenStore, token_store


_auth_provider: Optional[EnvironmentProvider] = None


def get_token_store() -> TokenStore:
    """The process-wide session store."""
    return token_store


def get_auth_provider() -> EnvironmentProvider:
    """Get or create the Google identity provider (lazy initialization)."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = GoogleAuthClient()
    return _auth_provider


def get_auth_service(
    store: TokenStore = Depends(get_token_store),
    provider: EnvironmentProvider = Depends(get_auth_provider),
) -> AuthService:
    return AuthService(provider=provider, store=store)


def get_calendar_service(
    store: TokenStore = Depends(get_token_store),
) -> CalendarQueryService:
    return CalendarQueryService(store=store)


def get_session_id(request: Request) -> Optional[str]:
    """
    Read the session id from the session cookie.

    Returns None when the cookie is missing; the services decide whether
    that is an error.
    """
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or None
