"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire the repository adapter
into use cases via constructor injection. Tests replace
``get_user_repository`` through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from app.application.users.create_user import CreateUserUseCase
from app.application.users.delete_user import DeleteUserUseCase
from app.application.users.get_user import GetUserUseCase
from app.application.users.list_users import ListUsersUseCase
from app.application.users.patch_user import PatchUserUseCase
from app.application.users.update_user import UpdateUserUseCase
from app.domain.users.ports import UserRepository
from app.infrastructure.users.user_repository import UserRepositoryAdapter


def get_engine(request: Request) -> Engine:
    """Return the process-wide engine created in the application lifespan."""
    return request.app.state.engine


def get_user_repository(engine: Engine = Depends(get_engine)) -> UserRepository:
    """Build the SQLAlchemy-backed user repository."""
    return UserRepositoryAdapter(engine=engine)


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with its infrastructure dependencies."""
    return CreateUserUseCase(user_repo=user_repo)


def get_get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=user_repo)


def get_list_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersUseCase:
    """Build ListUsersUseCase with its infrastructure dependencies."""
    return ListUsersUseCase(user_repo=user_repo)


def get_update_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UpdateUserUseCase:
    """Build UpdateUserUseCase with its infrastructure dependencies."""
    return UpdateUserUseCase(user_repo=user_repo)


def get_patch_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> PatchUserUseCase:
    """Build PatchUserUseCase with its infrastructure dependencies."""
    return PatchUserUseCase(user_repo=user_repo)


def get_delete_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    """Build DeleteUserUseCase with its infrastructure dependencies."""
    return DeleteUserUseCase(user_repo=user_repo)
