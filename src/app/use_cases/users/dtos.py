"""
User Administration DTOs (Data Transfer Objects)

Command and Response classes for the user resource.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class CreateUserCommand(BaseModel):
    email: str
    full_name: str
    password: str
    is_active: bool = True


class UpdateUserCommand(BaseModel):
    """Only fields that are set are applied"""

    email: Optional[str] = None
    full_name: Optional[str] = None
    password: Optional[str] = None
    is_active: Optional[bool] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserResponse(BaseModel):
    """Stored user without the password hash"""

    id: str
    email: str
    full_name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            is_active=bool(user.is_active),
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login_at=user.last_login_at,
        )
