"""
Use case: Replace a user's name and email.

Input: UpdateUserCommand (user_id, name, email)
Output: UserResult
Side effects: Updates one row in the users table.
Failure cases: ValidationError, UserNotFoundError, DuplicateEmailError,
    InternalError.
"""

import logging

from app.application.users.dtos import UpdateUserCommand, UserResult
from app.application.users.error_mapping import repository_errors
from app.domain.users.ports import UserRepository
from app.domain.users.validation import validate_email, validate_name

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Validates the new values, then delegates the update to the repository."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: UpdateUserCommand) -> UserResult:
        """Update an existing user.

        Args:
            command: Target id plus the new name and email.

        Returns:
            The updated user. Its id and created_at are unchanged.

        Raises:
            ValidationError: If name or email is invalid. Storage is not touched.
            UserNotFoundError: If the user does not exist.
            DuplicateEmailError: If another user owns the new email.
            InternalError: If storage fails.
        """
        name = validate_name(command.name)
        email = validate_email(command.email)

        with repository_errors():
            user = self._user_repo.update(command.user_id, name=name, email=email)

        logger.info("Updated user id=%s", user.id)
        return UserResult.from_entity(user)
