"""
Base classes and interfaces for external provider integrations.

- EnvironmentProvider: identity provider (access token -> profile)
- EnvironmentError and subclasses: failures talking to a provider

The auth service depends only on EnvironmentProvider, so the identity
provider can be replaced (or faked in tests) without touching it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


# ---------------------------------------------------------------------------
# CUSTOM EXCEPTIONS
# ---------------------------------------------------------------------------


class EnvironmentError(Exception):
    """Base exception for all provider-related errors."""
    pass


class AuthenticationError(EnvironmentError):
    """Raised when the identity provider rejects a token or cannot be reached."""
    pass


class APIError(EnvironmentError):
    """Raised when an API call to the provider fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


# ---------------------------------------------------------------------------
# DATA STRUCTURES
# ---------------------------------------------------------------------------


@dataclass
class UserInfo:
    """
    Basic user information from an OAuth provider.

    provider_user_id is the provider's stable subject id (Google's 'sub')
    and doubles as our session identifier.
    """
    provider_user_id: str
    email: Optional[str] = None
    name: Optional[str] = None


# ---------------------------------------------------------------------------
# ABSTRACT BASE CLASSES
# ---------------------------------------------------------------------------


class EnvironmentProvider(ABC):
    """Abstract base class for identity providers."""

    provider_name: str = ""

    @abstractmethod
    async def get_user_info(self, access_token: str) -> UserInfo:
        """
        Verify an access token and return the profile it belongs to.

        Raises:
            AuthenticationError: If the provider rejects the token
        """
        pass
