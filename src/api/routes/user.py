from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import to_http_error
from src.app.services.hashing import CredentialHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, Page
from src.app.use_cases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserResponse,
)
from src.depends import get_current_user, get_hasher, get_unit_of_work

router = APIRouter(
    prefix="/users", tags=["User"], dependencies=[Depends(get_current_user)]
)


class CreateUserRequest(BaseModel):
    """Create user HTTP request payload"""

    email: EmailStr
    full_name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=8, max_length=255)
    is_active: bool = True


class UpdateUserRequest(BaseModel):
    """Update user HTTP request payload; omitted fields are left unchanged"""

    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    password: Optional[str] = Field(None, min_length=8, max_length=255)
    is_active: Optional[bool] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def create_user(
    request: CreateUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: CredentialHasher = Depends(get_hasher),
):
    """
    Create User

    Raises:
        - 409 Conflict: Email already used
        - 422 Unprocessable Entity: Invalid input
    """
    use_case = CreateUserUseCase(uow, hasher)
    result = await use_case.execute(CreateUserCommand(**request.model_dump()))

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=Page[UserResponse])
async def list_users(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List users, newest first"""
    result = await ListUsersUseCase(uow).execute(page, limit)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_user(user_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get User

    Raises:
        - 404 Not Found: User does not exist
    """
    result = await GetUserUseCase(uow).execute(user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.put("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: CredentialHasher = Depends(get_hasher),
):
    """
    Update User

    A new password is re-hashed; is_active=false deactivates the account.

    Raises:
        - 404 Not Found: User does not exist
        - 409 Conflict: Email already used by another user
    """
    use_case = UpdateUserUseCase(uow, hasher)
    result = await use_case.execute(
        user_id, UpdateUserCommand(**request.model_dump(exclude_unset=True))
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete User

    Sessions of the user are removed with it.

    Raises:
        - 404 Not Found: User does not exist
    """
    result = await DeleteUserUseCase(uow).execute(user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
