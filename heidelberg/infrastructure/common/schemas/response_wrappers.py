"""Common response wrapper schemas for API responses."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
