"""
Logout Use Case

Revokes every active session of the user (all devices).
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Result, Return
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[LogoutResponse]:
        async with self.uow:
            count = await self.uow.sessions.revoke_all_by_user_id(user_id, utcnow())
            await self.uow.commit()

        logger.info(f"User {user_id} logged out, {count} session(s) revoked")
        return Return.ok(
            LogoutResponse(
                message=f"Logged out. {count} session(s) revoked",
                revoked_count=count,
            )
        )
