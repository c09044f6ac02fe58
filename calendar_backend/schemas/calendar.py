"""
Calendar schemas - response models for the calendar endpoints.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class EventsResponse(BaseModel):
    """
    Schema for GET /api/calendar/events response.

    events are Google Calendar event resources in Google's own JSON shape,
    ordered by start time. date echoes the ?date filter, or null.
    """
    events: List[Dict[str, Any]] = Field(default_factory=list)
    date: str | None = None
