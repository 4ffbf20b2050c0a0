"""
Update User Use Case
"""

import logging

from src.app.error_codes import ErrorCode
from src.app.services.hashing import CredentialHasher
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .create_user_use_case import EMAIL_TAKEN_MESSAGE
from .dtos import UpdateUserCommand, UserResponse

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Use case for editing a user.

    Business Rules:
    - Email uniqueness is re-checked only when the email changes
    - A new password is re-hashed
    - Deactivation (is_active=False) keeps the account and its records
    """

    def __init__(self, uow: UnitOfWork, hasher: CredentialHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, user_id: str, command: UpdateUserCommand) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "User not found"))

            if command.email is not None:
                email = command.email.lower()
                if email != user.email:
                    if await self.uow.users.email_exists(email, exclude_id=user_id):
                        return Return.err(Error(ErrorCode.CONFLICT, EMAIL_TAKEN_MESSAGE))
                    user.email = email

            if command.full_name is not None:
                user.full_name = command.full_name

            if command.password is not None:
                user.password_hash = await self.hasher.hash_async(command.password)

            if command.is_active is not None:
                user.is_active = command.is_active

            user = await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(f"User {user_id} updated")
            return Return.ok(UserResponse.from_entity(user))
