import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.app.services.hashing import CredentialHasher, HashFormatError
from src.domain.entities import Session

logger = logging.getLogger(__name__)


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession, hasher: Optional[CredentialHasher] = None):
        self.session = session
        self.hasher = hasher or CredentialHasher()

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def find_active_by_refresh_token(
        self, refresh_token: str, now: datetime
    ) -> Optional[Session]:
        """
        Find session by verifying refresh token hash.

        NOTE: bcrypt hashes are salted and cannot be looked up by value, so
        every active session is checked in turn. Cost is O(active sessions);
        each check runs in a worker thread.
        """
        stmt = select(Session).where(
            Session.revoked_at.is_(None),
            Session.expires_at > now,
        )
        result = await self.session.exec(stmt)
        candidates = list(result.all())

        for session_obj in candidates:
            try:
                if await self.hasher.verify_async(refresh_token, session_obj.refresh_token_hash):
                    return session_obj
            except HashFormatError:
                logger.warning(f"Skipping session {session_obj.id} with malformed token hash")
                continue

        return None

    async def revoke_by_id(self, session_id: int, now: datetime) -> bool:
        """Revoke a specific session by ID"""
        stmt = (
            update(Session)
            .where(Session.id == session_id, Session.revoked_at.is_(None))
            .values(revoked_at=now, updated_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def revoke_all_by_user_id(self, user_id: str, now: datetime) -> int:
        """Revoke all active sessions for a user"""
        stmt = (
            update(Session)
            .where(
                Session.user_id == user_id,
                Session.revoked_at.is_(None),
                Session.expires_at > now,
            )
            .values(revoked_at=now, updated_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        stmt = delete(Session).where(Session.expires_at < now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
