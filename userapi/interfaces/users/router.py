"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Every field arrives as a path segment; there are no request bodies.
Error mapping is handled by the centralized response mapper.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from userapi.application.users.create_user import CreateUserUseCase
from userapi.application.users.delete_user import DeleteUserUseCase
from userapi.application.users.dtos import (
    CreateUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    UpdateUserCommand,
    UserResult,
)
from userapi.application.users.get_user import GetUserUseCase
from userapi.application.users.list_users import ListUsersUseCase
from userapi.application.users.partially_update_user import PartiallyUpdateUserUseCase
from userapi.application.users.update_user import UpdateUserUseCase
from userapi.interfaces.schemas import ErrorResponse
from userapi.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_partially_update_user_use_case,
    get_update_user_use_case,
)
from userapi.interfaces.users.schemas import CreateUserResponse, UserResponse

# A PATCH segment equal to this keeps the stored value.
KEEP_SENTINEL = "pass"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    418: {"model": ErrorResponse},
}

router = APIRouter(prefix="/users", tags=["users"])


def _to_response(result: UserResult) -> UserResponse:
    return UserResponse(id=result.id, email=result.email, username=result.username)


def _unless_kept(value: str) -> Optional[str]:
    return None if value == KEEP_SENTINEL else value


@router.get(
    "",
    response_model=list[UserResponse],
    responses=ERROR_RESPONSES,
    summary="List users",
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    """Return every user; an empty collection yields ``[]``."""
    return [_to_response(r) for r in use_case.execute()]


@router.post(
    "/{email}/{username}/{password}",
    status_code=201,
    response_model=CreateUserResponse,
    responses=ERROR_RESPONSES,
    summary="Create a user",
    description="Creates a user and echoes the submitted fields. The new id is not returned.",
)
def create_user(
    email: str,
    username: str,
    password: str,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> CreateUserResponse:
    """Create a user from path segments."""
    result = use_case.execute(
        CreateUserCommand(email=email, username=username, password=password)
    )
    return CreateUserResponse(
        email=result.email, username=result.username, password=result.password
    )


@router.get(
    "/{uuid}",
    response_model=UserResponse,
    responses=ERROR_RESPONSES,
    summary="Get a user",
)
def get_user(
    uuid: str,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    """Return one user by id."""
    return _to_response(use_case.execute(GetUserQuery(user_id=uuid)))


@router.put(
    "/{uuid}/{email}/{username}/{password}",
    response_model=UserResponse,
    responses=ERROR_RESPONSES,
    summary="Replace a user",
)
def update_user(
    uuid: str,
    email: str,
    username: str,
    password: str,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    """Overwrite email, username and password."""
    command = UpdateUserCommand(
        user_id=uuid, email=email, username=username, password=password
    )
    return _to_response(use_case.execute(command))


@router.patch(
    "/{uuid}/{email}/{username}/{password}",
    response_model=UserResponse,
    responses=ERROR_RESPONSES,
    summary="Partially update a user",
    description=f'Segments equal to "{KEEP_SENTINEL}" leave the stored value unchanged.',
)
def partially_update_user(
    uuid: str,
    email: str,
    username: str,
    password: str,
    use_case: PartiallyUpdateUserUseCase = Depends(get_partially_update_user_use_case),
) -> UserResponse:
    """Overwrite only the segments not set to the keep sentinel."""
    command = UpdateUserCommand(
        user_id=uuid,
        email=_unless_kept(email),
        username=_unless_kept(username),
        password=_unless_kept(password),
    )
    return _to_response(use_case.execute(command))


@router.delete(
    "/{uuid}",
    response_class=PlainTextResponse,
    responses=ERROR_RESPONSES,
    summary="Delete a user",
)
def delete_user(
    uuid: str,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> PlainTextResponse:
    """Delete one user and confirm in plain text."""
    user_id = use_case.execute(DeleteUserCommand(user_id=uuid))
    return PlainTextResponse(f"User with ID: {user_id} deleted successfully!")
