"""
Use Case: Sweep Expired Sessions

Maintenance job that hard-deletes sessions past their expiry.
Revoked sessions that have also expired are removed too.
"""

import logging

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)


class SweepExpiredSessionsResponse(BaseModel):
    """Response DTO for SweepExpiredSessionsUseCase"""

    status: str
    sessions_deleted: int


class SweepExpiredSessionsUseCase:
    """
    Delete every session whose expires_at is in the past.

    Business Logic:
    1. Delete sessions with expires_at < now, revoked or not
    2. Active sessions are never touched
    3. Return the number of rows removed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[SweepExpiredSessionsResponse]:
        async with self.uow:
            deleted = await self.uow.sessions.delete_expired(utcnow())
            await self.uow.commit()

        logger.info(f"Session sweep removed {deleted} expired session(s)")
        return Return.ok(
            SweepExpiredSessionsResponse(status="completed", sessions_deleted=deleted)
        )
