"""
Create User Use Case
"""

import logging

from src.app.error_codes import ErrorCode
from src.app.services.hashing import CredentialHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.libs.result import Error, Result, Return
from .dtos import CreateUserCommand, UserResponse

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "Email is already used by another user"


class CreateUserUseCase:
    """
    Use case for creating an administrator account.

    Business Rules:
    - Email must be unique (case-insensitive)
    - Password is stored as a bcrypt hash
    - Accounts are active unless stated otherwise
    """

    def __init__(self, uow: UnitOfWork, hasher: CredentialHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: CreateUserCommand) -> Result[UserResponse]:
        email = command.email.lower()

        async with self.uow:
            if await self.uow.users.email_exists(email):
                return Return.err(Error(ErrorCode.CONFLICT, EMAIL_TAKEN_MESSAGE))

            user = User(
                email=email,
                full_name=command.full_name,
                password_hash=await self.hasher.hash_async(command.password),
                is_active=command.is_active,
            )
            user = await self.uow.users.create(user)
            await self.uow.commit()

            logger.info(f"User {user.id} created")
            return Return.ok(UserResponse.from_entity(user))
