"""
Google Environment Module

google/
├── __init__.py           # Module exports
├── auth/                 # Access-token verification (userinfo)
│   ├── client.py
│   └── schemas.py
└── calendar/             # Google Calendar Events API
    ├── client.py
    └── schemas.py

Usage:
======
    from calendar_backend.environments.google import GoogleAuthClient, GoogleCalendarClient

    user_info = await GoogleAuthClient().get_user_info(access_token)
    events = await GoogleCalendarClient(access_token).list_events(start, end)
"""

from calendar_backend.environments.google.auth import GoogleAuthClient
from calendar_backend.environments.google.calendar import GoogleCalendarClient, CalendarEvent

__all__ = [
    "GoogleAuthClient",
    "GoogleCalendarClient",
    "CalendarEvent",
]
