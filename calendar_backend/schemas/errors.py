"""
Error response schema shared by every endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    Standard error body.

    details is only filled outside production. needs_reauth is set when the
    client should send the user through Google sign-in again.

    Example:
    {
        "message": "Calendar access needed",
        "needsReauth": true
    }
    """
    model_config = ConfigDict(populate_by_name=True)

    message: str
    details: str | None = None
    needs_reauth: bool | None = Field(None, alias="needsReauth")

    def to_content(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
