"""
Auth Service - turns a Google access token into a backend session.

Flow:
1. Frontend completes Google sign-in and posts the access token
2. We ask Google's userinfo endpoint who the token belongs to
3. The account's 'sub' becomes the session id
4. The token is cached in the token store under that id
5. The router sets the session id as a cookie
"""

import logging
from dataclasses import dataclass
from typing import Optional

from calendar_backend.environments.base import AuthenticationError, EnvironmentProvider
from calendar_backend.services.errors import MissingInputError, ProviderRejectedError
from calendar_backend.services.token_store import SessionRecord, TokenStore


logger = logging.getLogger("calendar_backend.services.auth")


@dataclass
class AuthResult:
    """Outcome of a successful sign-in."""
    session_id: str
    email: Optional[str] = None
    display_name: Optional[str] = None


class AuthService:
    """
    Exchanges client access tokens for sessions.

    Args:
        provider: Identity provider used to verify tokens
        store: Token store that receives the session record
    """

    def __init__(self, provider: EnvironmentProvider, store: TokenStore):
        self.provider = provider
        self.store = store

    async def authenticate(self, client_access_token: Optional[str]) -> AuthResult:
        """
        Verify the token with the provider and store a session for it.

        Re-authenticating the same account replaces its record.

        Raises:
            MissingInputError: No token supplied
            ProviderRejectedError: The provider refused the token or was unreachable
        """
        if not client_access_token or not client_access_token.strip():
            logger.warning("Authentication request without access token")
            raise MissingInputError("Access token is required")

        try:
            user_info = await self.provider.get_user_info(client_access_token)
        except AuthenticationError as e:
            logger.error(
                f"Provider rejected access token: {e}",
                extra={"provider": self.provider.provider_name},
            )
            raise ProviderRejectedError("Authentication failed", details=str(e))

        session_id = user_info.provider_user_id

        self.store.purge_expired()
        self.store.put(
            session_id,
            SessionRecord(
                session_id=session_id,
                access_token=client_access_token,
                email=user_info.email,
                display_name=user_info.name,
            ),
        )

        logger.info(
            "Authenticated Google user",
            extra={"session_id": session_id, "email": user_info.email},
        )

        return AuthResult(
            session_id=session_id,
            email=user_info.email,
            display_name=user_info.name,
        )

    def logout(self, session_id: Optional[str]) -> bool:
        """
        Forget the session locally.

        The Google token itself is not revoked.

        Returns:
            True if a session was removed
        """
        removed = self.store.delete(session_id)
        if removed:
            logger.info("Session logged out", extra={"session_id": session_id})
        return removed
