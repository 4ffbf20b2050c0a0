from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import IdCard


class IIdCardRepository(ABC):
    """ID card repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, id_card_id: str) -> Optional[IdCard]:
        pass

    @abstractmethod
    async def list(self, offset: int, limit: int) -> List[IdCard]:
        """List ID cards, newest first"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def national_id_exists(
        self, national_id: str, exclude_id: Optional[str] = None
    ) -> bool:
        pass

    @abstractmethod
    async def create(self, id_card: IdCard) -> IdCard:
        pass

    @abstractmethod
    async def update(self, id_card: IdCard) -> IdCard:
        pass

    @abstractmethod
    async def delete(self, id_card: IdCard) -> None:
        pass
