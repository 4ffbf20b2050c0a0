from datetime import timedelta

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import to_http_error
from src.api.utils.jwt import TokenService
from src.app.services.hashing import CredentialHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    CurrentUserUseCase,
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    UserInfo,
)
from src.depends import (
    get_current_user,
    get_hasher,
    get_session_ttl,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, max_length=255, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
    hasher: CredentialHasher = Depends(get_hasher),
    session_ttl: timedelta = Depends(get_session_ttl),
):
    """
    User Login

    Authenticates the user and returns an access token and a refresh token.
    The refresh token is stored hashed on a new 7-day session.

    Raises:
        - 401 Unauthorized: Invalid email or password
        - 403 Forbidden: Account inactive
        - 422 Unprocessable Entity: Invalid input
    """
    command = LoginCommand(
        email=request.email,
        password=request.password,
        user_agent=http_request.headers.get("user-agent"),
        ip_address=http_request.client.host if http_request.client else None,
    )

    use_case = LoginUseCase(uow, tokens, hasher, session_ttl=session_ttl)
    result = await use_case.execute(command)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


class RefreshRequest(BaseModel):
    """
    Refresh token HTTP request payload
    """

    refresh_token: str = Field(..., min_length=1, description="Refresh token")


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse)
async def refresh(
    request: RefreshRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Refresh Access Token

    Issues a new access token for a live session. The refresh token is not
    rotated and remains usable until logout or expiry.

    Raises:
        - 401 Unauthorized: Invalid/expired token, or revoked/expired session
        - 403 Forbidden: Account inactive
    """
    use_case = RefreshTokenUseCase(uow, tokens)
    result = await use_case.execute(request.refresh_token)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Logout

    Revokes every active session of the caller (all devices).
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(current_user["user_id"])

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User

    Returns the public profile of the token holder.

    Raises:
        - 401 Unauthorized: Token missing/expired, or user no longer exists
        - 403 Forbidden: Invalid token or account inactive
    """
    use_case = CurrentUserUseCase(uow)
    result = await use_case.execute(current_user["user_id"])

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
