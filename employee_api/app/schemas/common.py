"""
Response models shared across endpoints.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    success: bool = False
    message: str = Field(..., examples=["Employee not found"])


class MessageResponse(BaseModel):
    message: str
