"""
Use case: Fetch a single user by id.

Input: GetUserQuery (user_id)
Output: UserResult
Side effects: None.
Failure cases: UserNotFoundError, InternalError.
"""

import logging

from app.application.users.dtos import GetUserQuery, UserResult
from app.application.users.error_mapping import repository_errors
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Looks up one user through the repository."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: GetUserQuery) -> UserResult:
        """Return the user identified by ``query.user_id``.

        Raises:
            UserNotFoundError: If the user does not exist.
            InternalError: If storage fails.
        """
        logger.debug("Fetching user id=%s", query.user_id)

        with repository_errors():
            user = self._user_repo.get_by_id(query.user_id)

        return UserResult.from_entity(user)
