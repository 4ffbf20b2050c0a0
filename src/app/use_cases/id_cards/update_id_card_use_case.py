"""
Update ID Card Use Case
"""

import logging

from sqlalchemy.exc import IntegrityError

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .create_id_card_use_case import NATIONAL_ID_TAKEN_MESSAGE
from .dtos import IdCardResponse, UpdateIdCardCommand
from .get_id_card_use_case import NOT_FOUND_MESSAGE

logger = logging.getLogger(__name__)


class UpdateIdCardUseCase:
    """
    Use case for editing an ID card.

    Business Rules:
    - National ID uniqueness is re-checked only when it changes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, id_card_id: str, command: UpdateIdCardCommand) -> Result[IdCardResponse]:
        changes = command.model_dump(exclude_none=True)

        async with self.uow:
            id_card = await self.uow.id_cards.get_by_id(id_card_id)
            if id_card is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, NOT_FOUND_MESSAGE))

            new_national_id = changes.get("national_id")
            if new_national_id and new_national_id != id_card.national_id:
                if await self.uow.id_cards.national_id_exists(
                    new_national_id, exclude_id=id_card_id
                ):
                    return Return.err(Error(ErrorCode.CONFLICT, NATIONAL_ID_TAKEN_MESSAGE))

            for field, value in changes.items():
                setattr(id_card, field, value)

            try:
                id_card = await self.uow.id_cards.update(id_card)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(Error(ErrorCode.CONFLICT, NATIONAL_ID_TAKEN_MESSAGE))

            logger.info(f"ID card {id_card_id} updated")
            return Return.ok(IdCardResponse.from_entity(id_card))
