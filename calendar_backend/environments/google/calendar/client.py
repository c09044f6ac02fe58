"""
Google Calendar API Client - Fetch calendar events.

API Reference:
==============
- Events API: https://developers.google.com/calendar/api/v3/reference/events

Usage Example:
==============
    from calendar_backend.environments.google.calendar import GoogleCalendarClient

    client = GoogleCalendarClient(access_token="ya29.xxx")
    events = await client.list_events(time_min=start, time_max=end)
"""

import logging
from datetime import datetime
from typing import List, Optional

import httpx

from calendar_backend.core.config import settings
from calendar_backend.environments.base import APIError
from calendar_backend.environments.google.calendar.schemas import (
    CalendarEvent,
    CalendarEventsResponse,
)


logger = logging.getLogger("calendar_backend.environments.google.calendar")


class GoogleCalendarClient:
    """
    Google Calendar API client.

    Requires a valid access token with calendar.readonly scope.

    Attributes:
        access_token: Google OAuth access token with calendar scope
    """

    BASE_URL = "https://www.googleapis.com/calendar/v3"

    def __init__(
        self,
        access_token: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Calendar client.

        Args:
            access_token: Valid Google OAuth access token with calendar scope
            timeout: Request timeout in seconds (defaults to settings)
            transport: Optional httpx transport (used by tests)
        """
        self.access_token = access_token
        self.timeout = timeout if timeout is not None else settings.GOOGLE_API_TIMEOUT_SECONDS
        self._transport = transport

    # -------------------------------------------------------------------------
    # HTTP CLIENT MANAGEMENT
    # -------------------------------------------------------------------------

    def _get_headers(self) -> dict:
        """Get authorization headers for API requests."""
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
        }

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
    ) -> dict:
        """
        Make an authenticated request to the Calendar API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path (e.g., "/calendars/primary/events")
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            APIError: If the request fails
        """
        url = f"{self.BASE_URL}{endpoint}"

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=self._get_headers(),
                    params=params,
                    timeout=self.timeout,
                )
            except httpx.TimeoutException as e:
                logger.error(f"Timeout calling Calendar API: {e}")
                raise APIError(f"Timeout: {e}")
            except httpx.RequestError as e:
                logger.error(f"Network error in Calendar API: {e}")
                raise APIError(f"Network error: {e}")

        if response.status_code == 401:
            logger.error("Calendar API: Unauthorized (token may be expired)")
            raise APIError(
                "Unauthorized - access token may be expired",
                status_code=401,
                response=response.text,
            )

        if response.status_code == 403:
            logger.error("Calendar API: Forbidden (scope may be missing)")
            raise APIError(
                "Forbidden - calendar scope may not be granted",
                status_code=403,
                response=response.text,
            )

        if response.status_code != 200:
            error_detail = response.text
            logger.error(f"Calendar API error: {response.status_code} - {error_detail}")
            raise APIError(
                f"API request failed: {error_detail}",
                status_code=response.status_code,
                response=error_detail,
            )

        try:
            return response.json()
        except ValueError:
            logger.error("Calendar API returned a non-JSON body")
            raise APIError(
                "Invalid JSON in Calendar API response",
                status_code=response.status_code,
                response=response.text,
            )

    # -------------------------------------------------------------------------
    # CALENDAR EVENTS
    # -------------------------------------------------------------------------

    async def list_events(
        self,
        time_min: datetime,
        time_max: datetime,
        calendar_id: str = "primary",
        max_results: Optional[int] = None,
        single_events: bool = True,
        order_by: str = "startTime",
    ) -> List[CalendarEvent]:
        """
        List events from a calendar within a time window.

        Args:
            time_min: Start of time range (inclusive, timezone-aware)
            time_max: End of time range (timezone-aware)
            calendar_id: Calendar identifier ("primary" for user's main calendar)
            max_results: Maximum number of events to return (capped at 2500)
            single_events: Expand recurring events into individual instances
            order_by: Sort order ("startTime" or "updated")

        Returns:
            List of CalendarEvent objects in the order Google returned them
        """
        if max_results is None:
            max_results = settings.CALENDAR_MAX_RESULTS

        params = {
            "timeMin": time_min.isoformat(),
            "timeMax": time_max.isoformat(),
            "maxResults": min(max_results, 2500),
            "singleEvents": str(single_events).lower(),
            "orderBy": order_by,
        }

        logger.info(
            "Fetching calendar events",
            extra={
                "calendar_id": calendar_id,
                "time_min": params["timeMin"],
                "time_max": params["timeMax"],
            },
        )

        response_data = await self._make_request(
            method="GET",
            endpoint=f"/calendars/{calendar_id}/events",
            params=params,
        )

        try:
            events_response = CalendarEventsResponse.model_validate(response_data)
        except ValueError as e:
            logger.error(f"Unexpected Calendar API payload: {e}")
            raise APIError("Unexpected Calendar API response format", response=response_data)

        logger.info(f"Fetched {len(events_response.items)} calendar events")

        return events_response.items

    async def get_events_raw(self, calendar_id: str = "primary") -> dict:
        """
        Fetch the events list exactly as Google returns it.

        No time window or paging parameters are sent, so Google applies its
        own defaults.

        Args:
            calendar_id: Calendar identifier

        Returns:
            The raw Events.list JSON payload
        """
        logger.info("Fetching raw calendar events", extra={"calendar_id": calendar_id})

        return await self._make_request(
            method="GET",
            endpoint=f"/calendars/{calendar_id}/events",
        )
