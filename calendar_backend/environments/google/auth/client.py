"""
Google OAuth Client - verifies access tokens issued to the frontend.

The browser runs Google's consent flow and hands us the resulting access
token. We never exchange codes or refresh tokens here: the only call we
make is the userinfo endpoint, which both validates the token and tells us
which Google account it belongs to.

References:
===========
- OAuth 2.0: https://developers.google.com/identity/protocols/oauth2
- Userinfo: https://www.googleapis.com/oauth2/v3/userinfo
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from calendar_backend.core.config import settings
from calendar_backend.environments.base import (
    EnvironmentProvider,
    UserInfo,
    AuthenticationError,
)
from calendar_backend.environments.google.auth.schemas import (
    GoogleAuthConfig,
    GoogleUserInfo,
)


logger = logging.getLogger("calendar_backend.environments.google.auth")


class GoogleAuthClient(EnvironmentProvider):
    """
    Google identity provider.

    Example Usage:
        client = GoogleAuthClient()
        user_info = await client.get_user_info("ya29.xxx")
        user_info.provider_user_id  # Google 'sub'
    """

    provider_name = "google"

    USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Google OAuth client.

        Args:
            client_id: Google OAuth Client ID (defaults to settings)
            client_secret: Google OAuth Client Secret (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            transport: Optional httpx transport (used by tests)
        """
        self.config = GoogleAuthConfig(
            client_id=client_id or settings.GOOGLE_CLIENT_ID,
            client_secret=client_secret or settings.GOOGLE_CLIENT_SECRET,
        )
        self.timeout = timeout if timeout is not None else settings.GOOGLE_API_TIMEOUT_SECONDS
        self._transport = transport

        if not self.config.is_configured():
            logger.warning(
                "Google OAuth not configured. Set GOOGLE_CLIENT_ID and "
                "GOOGLE_CLIENT_SECRET in environment variables."
            )

    @property
    def client_id(self) -> str:
        return self.config.client_id

    async def get_user_info(self, access_token: str) -> UserInfo:
        """
        Get user information from Google.

        Args:
            access_token: Access token obtained by the frontend

        Returns:
            UserInfo with the Google account details

        Raises:
            AuthenticationError: On non-200 status, unreadable payload or network error
        """
        logger.info("Fetching user info from Google")

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.get(
                    self.USERINFO_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout,
                )
            except httpx.RequestError as e:
                logger.error(f"Network error fetching user info: {e}")
                raise AuthenticationError(f"Network error: {e}")

        if response.status_code != 200:
            logger.error(
                f"Failed to fetch user info: {response.status_code}",
                extra={"status_code": response.status_code},
            )
            raise AuthenticationError("Failed to get user info")

        try:
            google_user = GoogleUserInfo.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unexpected userinfo payload: {e}")
            raise AuthenticationError("Failed to get user info")

        logger.info(
            "Successfully fetched Google user info",
            extra={"email": google_user.email},
        )

        return UserInfo(
            provider_user_id=google_user.sub,
            email=google_user.email,
            name=google_user.name,
        )
