"""
Authentication Use Cases

All authentication-related business logic.
"""

from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutUseCase
from .current_user_use_case import CurrentUserUseCase
from .dtos import (
    LoginCommand,
    LoginResponse,
    LogoutResponse,
    RefreshTokenResponse,
    UserInfo,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "CurrentUserUseCase",
    # DTOs - Commands
    "LoginCommand",
    # DTOs - Responses
    "LoginResponse",
    "RefreshTokenResponse",
    "LogoutResponse",
    "UserInfo",
]
