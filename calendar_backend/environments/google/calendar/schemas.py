"""
Google Calendar Schemas - Data structures for calendar operations.

These Pydantic models represent Google Calendar API responses. Unknown
fields are kept (extra="allow") so an event can be handed back to the
frontend exactly as Google described it.

Reference: https://developers.google.com/calendar/api/v3/reference
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EventTime(BaseModel):
    """
    Event start or end time.

    Google Calendar API returns times in one of two formats:
    - dateTime: For timed events (e.g., "2024-01-15T10:00:00-05:00")
    - date: For all-day events (e.g., "2024-01-15")
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    date_time: Optional[datetime] = Field(None, alias="dateTime")
    date: Optional[str] = Field(None)
    time_zone: Optional[str] = Field(None, alias="timeZone")


class EventAttendee(BaseModel):
    """A person (or resource) invited to a calendar event."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    email: Optional[str] = Field(None, description="Attendee's email address")
    display_name: Optional[str] = Field(None, alias="displayName")
    organizer: Optional[bool] = Field(False, description="Is this person the organizer?")
    self_: Optional[bool] = Field(False, alias="self", description="Is this the current user?")
    response_status: Optional[str] = Field(None, alias="responseStatus")


class EventPerson(BaseModel):
    """Creator or organizer of an event."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = Field(None)
    email: Optional[str] = Field(None)
    display_name: Optional[str] = Field(None, alias="displayName")
    self_: Optional[bool] = Field(False, alias="self")


class CalendarEvent(BaseModel):
    """
    A Google Calendar event.

    Only the fields the backend reads are declared; everything else Google
    sends is preserved as extra data.

    Reference: https://developers.google.com/calendar/api/v3/reference/events
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., description="Unique event identifier")
    summary: Optional[str] = Field(None, description="Event title")
    description: Optional[str] = Field(None, description="Event description")
    location: Optional[str] = Field(None, description="Event location")

    start: Optional[EventTime] = Field(None, description="Event start time")
    end: Optional[EventTime] = Field(None, description="Event end time")

    status: Optional[str] = Field(None, description="confirmed, tentative, cancelled")
    html_link: Optional[str] = Field(None, alias="htmlLink")
    recurring_event_id: Optional[str] = Field(None, alias="recurringEventId")

    creator: Optional[EventPerson] = Field(None)
    organizer: Optional[EventPerson] = Field(None)
    attendees: Optional[List[EventAttendee]] = Field(None)

    def get_organizer_email(self) -> Optional[str]:
        """Organizer email, falling back to the creator when no organizer is set."""
        if self.organizer and self.organizer.email:
            return self.organizer.email
        if self.creator and self.creator.email:
            return self.creator.email
        return None

    def get_attendee_emails(self) -> List[str]:
        """Emails of all attendees that have one."""
        if not self.attendees:
            return []
        return [attendee.email for attendee in self.attendees if attendee.email]

    def to_api_dict(self) -> Dict[str, Any]:
        """Serialize back to Google's JSON shape (camelCase, only fields Google sent)."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class CalendarEventsResponse(BaseModel):
    """
    Response from the Calendar Events list API.

    Contains a list of events and pagination info.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    kind: Optional[str] = Field(None)
    summary: Optional[str] = Field(None, description="Calendar title")
    time_zone: Optional[str] = Field(None, alias="timeZone")
    items: List[CalendarEvent] = Field(default_factory=list)
    next_page_token: Optional[str] = Field(None, alias="nextPageToken")
