"""
Domain-specific errors for the users bounded context.

Two families live here:
- Repository errors, raised by storage adapters behind the UserRepository port.
- Domain errors, raised by use cases and mapped to HTTP responses
  at the interface layer.

No framework imports allowed.
"""

from uuid import UUID


# ── Repository errors ────────────────────────────────────────────


class RepositoryError(Exception):
    """Base error for all storage-layer failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConflictError(RepositoryError):
    """Raised when a write violates the email uniqueness constraint."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already exists: {email}")
        self.email = email


class NotFoundError(RepositoryError):
    """Raised when no stored row matches the requested id."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"No row for id: {user_id}")
        self.user_id = user_id


class StorageError(RepositoryError):
    """Raised for any other storage failure (connectivity, unexpected constraint)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Storage failure: {reason}")
        self.reason = reason


# ── Domain errors ────────────────────────────────────────────────


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(UserDomainError):
    """Raised when client input fails a business rule."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Validation failed for field '{field}': {reason}")
        self.field = field
        self.reason = reason


class UserNotFoundError(UserDomainError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"User with ID {user_id} not found")
        self.user_id = user_id


class DuplicateEmailError(UserDomainError):
    """Raised when another user already owns the email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"User with email '{email}' already exists")
        self.email = email


class InternalError(UserDomainError):
    """Raised when storage fails unexpectedly. Details stay server-side."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Internal error: {reason}")
        self.reason = reason
