"""
Auth schemas - Pydantic models for the Google sign-in endpoints.
"""

from pydantic import BaseModel


class GoogleAuthRequest(BaseModel):
    """
    Schema for POST /api/auth/google request body.

    Example request body:
    {
        "access_token": "ya29.a0AfB_byC..."
    }
    """
    # access_token: token the frontend received from Google's sign-in popup
    # - Optional here so a missing token yields our 400 instead of a 422
    access_token: str | None = None


class AuthUser(BaseModel):
    """Profile fields echoed back after sign-in."""
    email: str | None = None
    name: str | None = None


class AuthResponse(BaseModel):
    """
    Schema for POST /api/auth/google response.

    Example response:
    {
        "message": "Authentication successful",
        "user": {"email": "user@gmail.com", "name": "John Doe"}
    }
    """
    message: str
    user: AuthUser


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after logout."""
    message: str
