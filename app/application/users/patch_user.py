"""
Use case: Partially update a user.

Input: PatchUserCommand (user_id, optional name, optional email)
Output: UserResult
Side effects: Updates one row in the users table.
Failure cases: ValidationError (including an empty patch),
    UserNotFoundError, DuplicateEmailError, InternalError.
"""

import logging

from app.application.users.dtos import PatchUserCommand, UserResult
from app.application.users.error_mapping import repository_errors
from app.domain.users.errors import ValidationError
from app.domain.users.ports import UserRepository
from app.domain.users.validation import validate_email, validate_name

logger = logging.getLogger(__name__)


class PatchUserUseCase:
    """Merges the supplied fields into the stored user.

    Reads the current row, then writes the merged values with a
    regular repository update. The two calls are not one transaction;
    a concurrent delete between them surfaces as UserNotFoundError.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: PatchUserCommand) -> UserResult:
        """Apply a partial update.

        Raises:
            ValidationError: If no field is supplied or a supplied value is invalid.
            UserNotFoundError: If the user does not exist.
            DuplicateEmailError: If another user owns the new email.
            InternalError: If storage fails.
        """
        if command.name is None and command.email is None:
            raise ValidationError(
                "body", "At least one field must be provided for update"
            )

        name = validate_name(command.name) if command.name is not None else None
        email = validate_email(command.email) if command.email is not None else None

        with repository_errors():
            current = self._user_repo.get_by_id(command.user_id)
            user = self._user_repo.update(
                command.user_id,
                name=name if name is not None else current.name,
                email=email if email is not None else current.email,
            )

        logger.info("Patched user id=%s", user.id)
        return UserResult.from_entity(user)
