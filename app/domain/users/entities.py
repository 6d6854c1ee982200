"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class User:
    """A registered user.

    The id is assigned by the persistence layer at creation time and
    never changes. Only name and email are mutable, through an update.
    """

    id: UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
