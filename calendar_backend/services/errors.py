"""
Service error taxonomy.

Each error carries the HTTP status it maps to and a user-safe message.
`details` holds diagnostic text that is only exposed outside production.
The exception handler in main.py turns these into JSON responses.
"""

from typing import Optional


class ServiceError(Exception):
    """Base class for errors raised by the auth and calendar services."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class MissingInputError(ServiceError):
    """A required request field was not supplied."""
    status_code = 400
    default_message = "Missing required input"


class InvalidInputError(ServiceError):
    """A request field could not be parsed."""
    status_code = 400
    default_message = "Invalid input"


class ProviderRejectedError(ServiceError):
    """The identity provider refused the access token (or could not be reached)."""
    status_code = 401
    default_message = "Authentication failed"


class UnauthenticatedError(ServiceError):
    """No valid session for this request."""
    status_code = 401
    default_message = "Not authenticated"


class ReauthRequiredError(ServiceError):
    """The stored credential was rejected by Google; the user must sign in again."""
    status_code = 401
    default_message = "Calendar access needed"
    needs_reauth = True


class UpstreamFailureError(ServiceError):
    """The calendar service failed for a reason other than authorization."""
    status_code = 500
    default_message = "Error fetching calendar events"
