"""
Pydantic schemas for users API request/response validation.

These schemas check the shape of the payload only (presence and type
of fields). Business rules such as email format live in the domain
and are enforced by the use cases.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from app.application.users.dtos import UserResult


class UserCreateRequest(BaseModel):
    """Request schema for creating a user.

    Attributes:
        name: Display name, non-empty.
        email: Email address, unique across users.
    """

    name: str = Field(..., description="Display name", examples=["John Doe"])
    email: str = Field(..., description="Email address", examples=["john@example.com"])


class UserUpdateRequest(UserCreateRequest):
    """Request schema for a full update. Same shape as creation."""


class UserPatchRequest(BaseModel):
    """Request schema for a partial update. At least one field is required."""

    name: Optional[str] = Field(default=None, description="New display name")
    email: Optional[str] = Field(default=None, description="New email address")


class UserResponse(BaseModel):
    """A user resource."""

    id: UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_result(cls, result: UserResult) -> "UserResponse":
        return cls(
            id=result.id,
            name=result.name,
            email=result.email,
            created_at=result.created_at,
            updated_at=result.updated_at,
        )


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    service: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: Optional[str] = None
    field: Optional[str] = None
