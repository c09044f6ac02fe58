"""
Calendar Router - event listing with date and keyword filters.

Endpoints:
==========
- GET /api/calendar/events?date=YYYY-MM-DD&searchQuery=words

Without a date the window is one month back to six months ahead.
searchQuery keeps events where any word appears in the title,
description, location, organizer or attendee emails.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from calendar_backend.deps import get_calendar_service, get_session_id
from calendar_backend.schemas.calendar import EventsResponse
from calendar_backend.services.calendar_service import CalendarQueryService


router = APIRouter(prefix="/api/calendar", tags=["calendar"])


@router.get("/events", response_model=EventsResponse)
async def list_events(
    date: Optional[str] = Query(None, description="Restrict to one day (YYYY-MM-DD)"),
    search_query: Optional[str] = Query(None, alias="searchQuery", description="Free-text filter"),
    session_id: Optional[str] = Depends(get_session_id),
    calendar_service: CalendarQueryService = Depends(get_calendar_service),
):
    """
    List the signed-in user's primary-calendar events.

    Errors:
        400 if date is not a valid ISO date
        401 if there is no valid session, or Google needs re-authorization
            (body has needsReauth: true)
        500 if Google fails for any other reason
    """
    result = await calendar_service.query_events(
        session_id,
        date=date,
        search_query=search_query,
    )

    return EventsResponse(
        events=[event.to_api_dict() for event in result.events],
        date=result.date,
    )
