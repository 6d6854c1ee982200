"""
Use case: Create a user.

Input: CreateUserCommand (name, email)
Output: UserResult
Side effects: Inserts one row into the users table.
Failure cases: ValidationError, DuplicateEmailError, InternalError.
"""

import logging

from app.application.users.dtos import CreateUserCommand, UserResult
from app.application.users.error_mapping import repository_errors
from app.domain.users.ports import UserRepository
from app.domain.users.validation import validate_email, validate_name

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Validates input, then delegates the insert to the repository."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: CreateUserCommand) -> UserResult:
        """Create a new user.

        Args:
            command: Name and email of the new user.

        Returns:
            The created user, including its generated id.

        Raises:
            ValidationError: If name or email is invalid. Storage is not touched.
            DuplicateEmailError: If the email is already taken.
            InternalError: If storage fails.
        """
        name = validate_name(command.name)
        email = validate_email(command.email)

        with repository_errors():
            user = self._user_repo.create(name=name, email=email)

        logger.info("Created user id=%s", user.id)
        return UserResult.from_entity(user)
