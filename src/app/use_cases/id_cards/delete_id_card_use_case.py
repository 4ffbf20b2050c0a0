"""
Delete ID Card Use Case
"""

import logging

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .get_id_card_use_case import NOT_FOUND_MESSAGE

logger = logging.getLogger(__name__)


class DeleteIdCardUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, id_card_id: str) -> Result[None]:
        async with self.uow:
            id_card = await self.uow.id_cards.get_by_id(id_card_id)
            if id_card is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, NOT_FOUND_MESSAGE))

            await self.uow.id_cards.delete(id_card)
            await self.uow.commit()

        logger.info(f"ID card {id_card_id} deleted")
        return Return.ok()
