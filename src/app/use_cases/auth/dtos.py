"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class LoginCommand(BaseModel):
    """Credentials plus client metadata stored on the session"""

    email: str
    password: str
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public view of a user (no password hash)"""

    id: str
    email: str
    full_name: str
    is_active: bool

    @classmethod
    def from_entity(cls, user) -> "UserInfo":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            is_active=bool(user.is_active),
        )


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    refresh_token: str
    user: UserInfo


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case (refresh token is not rotated)"""

    access_token: str
    user: UserInfo


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    message: str
    revoked_count: int
