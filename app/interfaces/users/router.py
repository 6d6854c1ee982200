"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Payload shape is checked by Pydantic schemas; business rules by use cases.
Error mapping is handled by centralized error handlers.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.application.users.create_user import CreateUserUseCase
from app.application.users.delete_user import DeleteUserUseCase
from app.application.users.dtos import (
    CreateUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    PatchUserCommand,
    UpdateUserCommand,
)
from app.application.users.get_user import GetUserUseCase
from app.application.users.list_users import ListUsersUseCase
from app.application.users.patch_user import PatchUserUseCase
from app.application.users.update_user import UpdateUserUseCase
from app.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_patch_user_use_case,
    get_update_user_use_case,
)
from app.interfaces.users.schemas import (
    ErrorResponse,
    UserCreateRequest,
    UserPatchRequest,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["users"])

_BAD_REQUEST = {400: {"model": ErrorResponse}}
_NOT_FOUND = {404: {"model": ErrorResponse}}
_CONFLICT = {409: {"model": ErrorResponse}}
_INTERNAL = {500: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_CONFLICT, **_INTERNAL},
    summary="Create a user",
)
def create_user(
    request: UserCreateRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """Create a user and return it with its generated id."""
    result = use_case.execute(
        CreateUserCommand(name=request.name, email=request.email)
    )
    return UserResponse.from_result(result)


@router.get(
    "",
    response_model=list[UserResponse],
    responses=_INTERNAL,
    summary="List users",
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    """Return every user, oldest first."""
    result = use_case.execute()
    return [UserResponse.from_result(user) for user in result.users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL},
    summary="Get a user",
)
def get_user(
    user_id: UUID,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    """Return a single user."""
    result = use_case.execute(GetUserQuery(user_id=user_id))
    return UserResponse.from_result(result)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT, **_INTERNAL},
    summary="Replace a user's name and email",
)
def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    """Update both fields of an existing user."""
    result = use_case.execute(
        UpdateUserCommand(user_id=user_id, name=request.name, email=request.email)
    )
    return UserResponse.from_result(result)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT, **_INTERNAL},
    summary="Partially update a user",
)
def patch_user(
    user_id: UUID,
    request: UserPatchRequest,
    use_case: PatchUserUseCase = Depends(get_patch_user_use_case),
) -> UserResponse:
    """Update only the supplied fields."""
    result = use_case.execute(
        PatchUserCommand(user_id=user_id, name=request.name, email=request.email)
    )
    return UserResponse.from_result(result)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL},
    summary="Delete a user",
)
def delete_user(
    user_id: UUID,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> Response:
    """Delete a user. Responds with an empty body."""
    use_case.execute(DeleteUserCommand(user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
