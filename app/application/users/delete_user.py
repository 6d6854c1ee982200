"""
Use case: Delete a user.

Input: DeleteUserCommand (user_id)
Output: None
Side effects: Removes one row from the users table.
Failure cases: UserNotFoundError, InternalError.
"""

import logging

from app.application.users.dtos import DeleteUserCommand
from app.application.users.error_mapping import repository_errors
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Removes a user through the repository."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: DeleteUserCommand) -> None:
        """Delete the user identified by ``command.user_id``.

        Raises:
            UserNotFoundError: If the user does not exist (including a second delete).
            InternalError: If storage fails.
        """
        with repository_errors():
            self._user_repo.delete(command.user_id)

        logger.info("Deleted user id=%s", command.user_id)
