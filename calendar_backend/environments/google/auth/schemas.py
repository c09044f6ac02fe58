"""
Google OAuth Schemas - Data structures for Google authentication.
"""

from typing import Optional

from pydantic import BaseModel, Field


class GoogleAuthConfig(BaseModel):
    """OAuth client configuration, loaded from Settings."""
    client_id: str = Field("", description="Google OAuth Client ID")
    client_secret: str = Field("", description="Google OAuth Client Secret")

    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)


class GoogleUserInfo(BaseModel):
    """
    User information from Google's userinfo endpoint.

    Example:
    {
        "sub": "123456789",
        "email": "user@gmail.com",
        "email_verified": true,
        "name": "John Doe",
        "picture": "https://lh3.googleusercontent.com/a/..."
    }

    Only the fields a session needs are read; the rest are ignored.
    """
    sub: str = Field(..., description="Unique Google user ID")
    email: Optional[str] = Field(None, description="User's email address")
    name: Optional[str] = Field(None, description="User's display name")
