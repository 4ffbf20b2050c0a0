from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def list(self, offset: int, limit: int) -> List[User]:
        """List users, newest first"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        """True if another user already uses this email"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete user (sessions cascade)"""
        pass
