"""
Current User Use Case

Loads the user behind an access token, re-checking that it still exists
and is active.
"""

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .dtos import UserInfo


class CurrentUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.UNAUTHORIZED, "User not found"))

            if not user.is_active:
                return Return.err(Error(ErrorCode.FORBIDDEN, "Your account is inactive"))

            return Return.ok(UserInfo.from_entity(user))
