from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def find_active_by_refresh_token(
        self, refresh_token: str, now: datetime
    ) -> Optional[Session]:
        """
        Find the active session whose stored hash matches the raw refresh token.

        Hashes are salted, so this compares against every active session.
        """
        pass

    @abstractmethod
    async def revoke_by_id(self, session_id: int, now: datetime) -> bool:
        """Revoke a specific session. Returns True if it was active."""
        pass

    @abstractmethod
    async def revoke_all_by_user_id(self, user_id: str, now: datetime) -> int:
        """Revoke all active sessions for a user. Returns count of revoked sessions."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Hard-delete sessions past expires_at, revoked or not. Returns count."""
        pass
