"""
Create ID Card Use Case
"""

import logging

from sqlalchemy.exc import IntegrityError

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import IdCard
from src.libs.result import Error, Result, Return
from .dtos import CreateIdCardCommand, IdCardResponse

logger = logging.getLogger(__name__)

NATIONAL_ID_TAKEN_MESSAGE = "National ID already registered"


class CreateIdCardUseCase:
    """
    Use case for registering an ID card.

    Business Rules:
    - One ID card per national ID
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateIdCardCommand, issuer_id: str) -> Result[IdCardResponse]:
        async with self.uow:
            if await self.uow.id_cards.national_id_exists(command.national_id):
                return Return.err(Error(ErrorCode.CONFLICT, NATIONAL_ID_TAKEN_MESSAGE))

            id_card = IdCard(**command.model_dump(), issuer_id=issuer_id)

            try:
                id_card = await self.uow.id_cards.create(id_card)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(Error(ErrorCode.CONFLICT, NATIONAL_ID_TAKEN_MESSAGE))

            logger.info(f"ID card {id_card.id} registered by {issuer_id}")
            return Return.ok(IdCardResponse.from_entity(id_card))
