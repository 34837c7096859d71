"""
Pydantic models for user responses.

Users themselves are plain strings, so request and success bodies need
no model.  These schemas describe the error body and the service
information payload for the OpenAPI document.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned with 4xx responses."""

    detail: str = Field(..., examples=["User not found at index 7"])


class ServiceInfo(BaseModel):
    """General information about the running service."""

    name: str = Field(..., examples=["User Registry API"])
    version: str = Field(..., examples=["1.0.0"])
    users: int = Field(..., ge=0, description="Number of users currently stored")
