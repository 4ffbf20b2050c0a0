"""
Delete User Use Case

Hard delete; the user's sessions go with it.
"""

import logging

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "User not found"))

            await self.uow.users.delete(user)
            await self.uow.commit()

        logger.info(f"User {user_id} deleted")
        return Return.ok()
