from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.id_card_repository import IIdCardRepository
from src.domain.base import utcnow
from src.domain.entities import IdCard


class IdCardRepository(IIdCardRepository):
    """ID card repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id_card_id: str) -> Optional[IdCard]:
        stmt = select(IdCard).where(IdCard.id == id_card_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(self, offset: int, limit: int) -> List[IdCard]:
        stmt = select(IdCard).order_by(IdCard.created_at.desc()).offset(offset).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(IdCard))
        return result.one()

    async def national_id_exists(
        self, national_id: str, exclude_id: Optional[str] = None
    ) -> bool:
        stmt = select(IdCard.id).where(IdCard.national_id == national_id)
        if exclude_id:
            stmt = stmt.where(IdCard.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def create(self, id_card: IdCard) -> IdCard:
        self.session.add(id_card)
        await self.session.flush()
        await self.session.refresh(id_card)
        return id_card

    async def update(self, id_card: IdCard) -> IdCard:
        id_card.updated_at = utcnow()
        self.session.add(id_card)
        await self.session.flush()
        await self.session.refresh(id_card)
        return id_card

    async def delete(self, id_card: IdCard) -> None:
        await self.session.delete(id_card)
        await self.session.flush()
