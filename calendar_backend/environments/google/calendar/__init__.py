"""
Google Calendar Module - Calendar API Integration

Lists events from a user's primary calendar for the calendar query service.
"""

from calendar_backend.environments.google.calendar.client import GoogleCalendarClient
from calendar_backend.environments.google.calendar.schemas import (
    CalendarEvent,
    CalendarEventsResponse,
    EventAttendee,
    EventPerson,
    EventTime,
)

__all__ = [
    "GoogleCalendarClient",
    "CalendarEvent",
    "CalendarEventsResponse",
    "EventAttendee",
    "EventPerson",
    "EventTime",
]
