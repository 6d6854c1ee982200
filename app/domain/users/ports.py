"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from app.domain.users.entities import User


class UserRepository(ABC):
    """Port for persisting and retrieving users.

    Every operation is atomic at the storage layer. Implementations
    raise the errors defined in app.domain.users.errors and never
    retry on their own.
    """

    @abstractmethod
    def create(self, name: str, email: str) -> User:
        """Insert a new user and return it with its generated id.

        Raises:
            ConflictError: If the email is already taken.
            StorageError: For any other storage failure.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: UUID) -> User:
        """Return the user with the given id.

        Raises:
            NotFoundError: If no user has this id.
            StorageError: For any other storage failure.
        """
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every stored user, oldest first."""
        raise NotImplementedError

    @abstractmethod
    def update(self, user_id: UUID, name: str, email: str) -> User:
        """Replace name and email of an existing user.

        Raises:
            NotFoundError: If no user has this id.
            ConflictError: If the email belongs to a different user.
            StorageError: For any other storage failure.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: UUID) -> None:
        """Remove a user.

        Raises:
            NotFoundError: If no user has this id.
            StorageError: For any other storage failure.
        """
        raise NotImplementedError
