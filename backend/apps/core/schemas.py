"""
Core schemas - shared Pydantic models for API responses.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    detail: str = Field(..., description="Human-readable error message")

    model_config = {"json_schema_extra": {"example": {"detail": "Report not found."}}}


class RedirectResponse(BaseModel):
    """Body of a 303 returned when the authorization gate redirects."""

    redirect_to: str = Field(..., description="Where the client should navigate next")

    model_config = {"json_schema_extra": {"example": {"redirect_to": "/sign-in"}}}


class MessageResponse(BaseModel):
    """Generic success message."""

    message: str
