"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from app.domain.users.entities import User


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Attributes:
        name: Display name, trimmed before storage.
        email: Email address, must be unique.
    """

    name: str
    email: str


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for fetching a single user."""

    user_id: UUID


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for replacing a user's name and email."""

    user_id: UUID
    name: str
    email: str


@dataclass(frozen=True)
class PatchUserCommand:
    """Input DTO for a partial update.

    Attributes:
        user_id: Target user.
        name: New name, or None to keep the current one.
        email: New email, or None to keep the current one.
    """

    user_id: UUID
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input DTO for deleting a user."""

    user_id: UUID


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a single user."""

    id: UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResult":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class UserListResult:
    """Output DTO for the list of all users."""

    users: list[UserResult]
    total: int
