"""
User Management Use Cases

All user-administration business logic.
"""

from .create_user_use_case import CreateUserUseCase
from .get_user_use_case import GetUserUseCase, ListUsersUseCase
from .update_user_use_case import UpdateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import CreateUserCommand, UpdateUserCommand, UserResponse

__all__ = [
    # Use Cases
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    # DTOs
    "CreateUserCommand",
    "UpdateUserCommand",
    "UserResponse",
]
