"""
Use case: List every user.

Input: None
Output: UserListResult
Side effects: None.
Failure cases: InternalError.
"""

import logging

from app.application.users.dtos import UserListResult, UserResult
from app.application.users.error_mapping import repository_errors
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Returns all users in repository order."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> UserListResult:
        with repository_errors():
            users = self._user_repo.list_all()

        results = [UserResult.from_entity(user) for user in users]
        logger.info("Listed %d users.", len(results))
        return UserListResult(users=results, total=len(results))
