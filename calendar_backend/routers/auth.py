"""
Auth Router - Google sign-in and session endpoints.

Endpoints:
==========
- POST /api/auth/google           → Verify a Google access token, start a session
- GET  /api/auth/calendar/events  → Raw Google events list for the session owner
- POST /api/auth/logout           → Forget the session

Sessions:
=========
The session id (the Google account's 'sub') travels in an http-only cookie.
The cookie is SameSite=None so the separately hosted frontend can send it,
and Secure only in production.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Response

from calendar_backend.core.config import settings
from calendar_backend.deps import (
    get_auth_service,
    get_calendar_service,
    get_session_id,
)
from calendar_backend.schemas.auth import (
    AuthResponse,
    AuthUser,
    GoogleAuthRequest,
    MessageResponse,
)
from calendar_backend.services.auth_service import AuthService
from calendar_backend.services.calendar_service import CalendarQueryService


logger = logging.getLogger("calendar_backend.routers.auth")


router = APIRouter(prefix="/api/auth", tags=["auth"])


def _set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.is_production,
        samesite="none",
    )


@router.post("/google", response_model=AuthResponse)
async def google_auth(
    response: Response,
    payload: Optional[GoogleAuthRequest] = Body(None),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange a Google access token for a backend session.

    Returns:
        200 with the user's email and name, plus the session cookie

    Errors:
        400 if access_token is missing
        401 if Google rejects the token
    """
    access_token = payload.access_token if payload else None

    result = await auth_service.authenticate(access_token)

    _set_session_cookie(response, result.session_id)

    return AuthResponse(
        message="Authentication successful",
        user=AuthUser(email=result.email, name=result.display_name),
    )


@router.get("/calendar/events")
async def raw_calendar_events(
    session_id: Optional[str] = Depends(get_session_id),
    calendar_service: CalendarQueryService = Depends(get_calendar_service),
):
    """
    Return the primary calendar's events exactly as Google lists them.

    Errors:
        401 if there is no valid session
        500 if Google fails
    """
    return await calendar_service.list_raw_events(session_id)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    End the current session.

    Always succeeds; the cookie is cleared even if no session was stored.
    The Google token is not revoked.
    """
    auth_service.logout(session_id)

    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="none",
    )

    return MessageResponse(message="Logged out")
