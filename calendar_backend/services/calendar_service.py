"""
Calendar Query Service - lists a user's events and applies keyword search.

Given a session id, the service looks up the cached Google token, picks the
time window (one day, or a sliding window around today), asks Google for the
events in it and filters them locally by free text.

The window computation and the search predicate are plain functions so they
can be tested without any network or session state.

Search semantics:
=================
- The query is split on whitespace and lowercased
- An event's haystack is its summary, description, location, organizer
  email and attendee emails, lowercased and joined with spaces
- An event matches if ANY query word is a substring of its haystack
"""

import logging
from dataclasses import dataclass, field
from datetime import date as date_type, datetime, time, tzinfo
from typing import Callable, Iterable, List, Optional
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from calendar_backend.core.config import settings
from calendar_backend.environments.base import APIError
from calendar_backend.environments.google.calendar import CalendarEvent, GoogleCalendarClient
from calendar_backend.services.errors import (
    InvalidInputError,
    ReauthRequiredError,
    UnauthenticatedError,
    UpstreamFailureError,
)
from calendar_backend.services.token_store import SessionRecord, TokenStore


logger = logging.getLogger("calendar_backend.services.calendar")


# Window used when no date is given
DEFAULT_MONTHS_BEFORE = 1
DEFAULT_MONTHS_AFTER = 6

# Last representable millisecond of a day
END_OF_DAY = time(23, 59, 59, 999000)

# Upstream error text that means the stored credential is no longer usable
REAUTH_MARKERS = ("invalid_grant", "No access")


# ---------------------------------------------------------------------------
# TIME WINDOW
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimeWindow:
    """Start/end instants (timezone-aware) bounding a calendar listing."""
    start: datetime
    end: datetime


def resolve_timezone() -> Optional[tzinfo]:
    """Configured TIMEZONE as a ZoneInfo, or None for the server's local zone."""
    if settings.TIMEZONE:
        return ZoneInfo(settings.TIMEZONE)
    return None


def _localize(naive: datetime, tz: Optional[tzinfo]) -> datetime:
    if tz is None:
        # astimezone() on a naive datetime interprets it as server local time
        return naive.astimezone()
    return naive.replace(tzinfo=tz)


def parse_query_date(value: str, tz: Optional[tzinfo] = None) -> date_type:
    """
    Parse the ?date parameter into a calendar day.

    Accepts an ISO date ("2024-03-15") or an ISO datetime; for an aware
    datetime the day is taken in the local zone.

    Raises:
        InvalidInputError: If the value is not ISO-8601
    """
    try:
        parsed = isoparse(value.strip())
    except (ValueError, OverflowError):
        raise InvalidInputError(
            "Invalid date",
            details=f"Expected YYYY-MM-DD, got: {value!r}",
        )

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz) if tz is not None else parsed.astimezone()
    return parsed.date()


def compute_time_window(
    day: Optional[date_type] = None,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> TimeWindow:
    """
    Compute the listing window.

    - With a day: [00:00:00.000, 23:59:59.999] of that day in local time
    - Without: [now - 1 month, now + 6 months]

    Args:
        day: Calendar day to restrict to
        now: Current instant (defaults to the real clock)
        tz: Local zone (defaults to the server's zone)
    """
    if day is not None:
        return TimeWindow(
            start=_localize(datetime.combine(day, time.min), tz),
            end=_localize(datetime.combine(day, END_OF_DAY), tz),
        )

    if now is None:
        now = datetime.now(tz) if tz is not None else datetime.now().astimezone()

    return TimeWindow(
        start=now - relativedelta(months=DEFAULT_MONTHS_BEFORE),
        end=now + relativedelta(months=DEFAULT_MONTHS_AFTER),
    )


# ---------------------------------------------------------------------------
# KEYWORD FILTER
# ---------------------------------------------------------------------------


def tokenize_query(search_query: Optional[str]) -> List[str]:
    """Split a free-text query into lowercase words."""
    if not search_query:
        return []
    return search_query.lower().split()


def build_haystack(event: CalendarEvent) -> str:
    """Searchable text of one event; missing fields contribute nothing."""
    parts = [
        event.summary,
        event.description,
        event.location,
        event.get_organizer_email(),
        *event.get_attendee_emails(),
    ]
    return " ".join(part for part in parts if part).lower()


def event_matches_query(event: CalendarEvent, words: List[str]) -> bool:
    """True if any word occurs in the event's haystack (or there are no words)."""
    if not words:
        return True
    haystack = build_haystack(event)
    return any(word in haystack for word in words)


def filter_events(events: Iterable[CalendarEvent], search_query: Optional[str]) -> List[CalendarEvent]:
    """Keep the events matching search_query, preserving order."""
    words = tokenize_query(search_query)
    if not words:
        return list(events)
    return [event for event in events if event_matches_query(event, words)]


def requires_reauth(error: APIError) -> bool:
    """Whether an upstream failure means the user has to sign in again."""
    if error.status_code == 401:
        return True
    text = f"{error} {error.response or ''}"
    return any(marker in text for marker in REAUTH_MARKERS)


# ---------------------------------------------------------------------------
# SERVICE
# ---------------------------------------------------------------------------


@dataclass
class EventQueryResult:
    """Events returned to the client plus the echoed date filter."""
    events: List[CalendarEvent] = field(default_factory=list)
    date: Optional[str] = None


class CalendarQueryService:
    """
    Resolves sessions to credentials and queries Google Calendar.

    Args:
        store: Token store holding session records
        client_factory: Builds a calendar client for an access token
        tz: Local zone for day windows (defaults to settings / server zone)
        clock: Returns the current instant; overridable in tests
    """

    def __init__(
        self,
        store: TokenStore,
        client_factory: Callable[[str], GoogleCalendarClient] = GoogleCalendarClient,
        tz: Optional[tzinfo] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.client_factory = client_factory
        self.tz = tz if tz is not None else resolve_timezone()
        self.clock = clock

    def _require_session(self, session_id: Optional[str]) -> SessionRecord:
        record = self.store.get(session_id)
        if record is None:
            logger.info("No valid session found", extra={"session_id": session_id})
            raise UnauthenticatedError("Not authenticated")
        return record

    def _log_upstream_error(self, session_id: Optional[str], error: Exception) -> None:
        token_exists = self.store.has(session_id)
        logger.error(
            f"Calendar API Error: {error} (token_exists={token_exists})",
            extra={
                "error": str(error),
                "token_exists": token_exists,
            },
        )

    async def query_events(
        self,
        session_id: Optional[str],
        date: Optional[str] = None,
        search_query: Optional[str] = None,
    ) -> EventQueryResult:
        """
        List the session owner's primary-calendar events, optionally filtered.

        Args:
            session_id: Value of the session cookie
            date: Optional day (YYYY-MM-DD) restricting the window
            search_query: Optional free-text filter

        Raises:
            UnauthenticatedError: Unknown or expired session (Google is not called)
            InvalidInputError: Unparseable date
            ReauthRequiredError: Google rejected the stored token
            UpstreamFailureError: Any other Google failure
        """
        record = self._require_session(session_id)

        day = parse_query_date(date, self.tz) if date else None
        now = self.clock() if self.clock else None
        window = compute_time_window(day, now=now, tz=self.tz)

        logger.info(
            "Fetching events for range",
            extra={"start": window.start.isoformat(), "end": window.end.isoformat()},
        )

        client = self.client_factory(record.access_token)
        try:
            events = await client.list_events(
                time_min=window.start,
                time_max=window.end,
                calendar_id="primary",
                max_results=settings.CALENDAR_MAX_RESULTS,
                single_events=True,
                order_by="startTime",
            )
        except APIError as e:
            self._log_upstream_error(session_id, e)
            if requires_reauth(e):
                raise ReauthRequiredError("Calendar access needed", details=str(e))
            raise UpstreamFailureError("Error fetching calendar events", details=str(e))

        filtered = filter_events(events, search_query)

        logger.info(
            f"Returning {len(filtered)} of {len(events)} events",
            extra={"search_query": search_query},
        )

        return EventQueryResult(events=filtered, date=date or None)

    async def list_raw_events(self, session_id: Optional[str]) -> dict:
        """
        Proxy Google's events list for the primary calendar unchanged.

        Raises:
            UnauthenticatedError: Unknown or expired session
            UpstreamFailureError: Any Google failure
        """
        record = self._require_session(session_id)

        client = self.client_factory(record.access_token)
        try:
            return await client.get_events_raw(calendar_id="primary")
        except APIError as e:
            self._log_upstream_error(session_id, e)
            raise UpstreamFailureError("Failed to fetch calendar events", details=str(e))
