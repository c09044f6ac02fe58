"""
Google Auth Module - access-token verification against Google's userinfo endpoint.
"""

from calendar_backend.environments.google.auth.client import GoogleAuthClient
from calendar_backend.environments.google.auth.schemas import (
    GoogleAuthConfig,
    GoogleUserInfo,
)

__all__ = [
    "GoogleAuthClient",
    "GoogleAuthConfig",
    "GoogleUserInfo",
]
