"""
Get / List ID Cards Use Cases
"""

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.pagination import Page, PaginationInfo, offset_of, validate_window
from src.libs.result import Error, Result, Return
from .dtos import IdCardResponse

NOT_FOUND_MESSAGE = "ID card not found"


class GetIdCardUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, id_card_id: str) -> Result[IdCardResponse]:
        async with self.uow:
            id_card = await self.uow.id_cards.get_by_id(id_card_id)
            if id_card is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, NOT_FOUND_MESSAGE))
            return Return.ok(IdCardResponse.from_entity(id_card))


class ListIdCardsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, page: int, limit: int) -> Result[Page[IdCardResponse]]:
        error = validate_window(page, limit)
        if error:
            return Return.err(error)

        async with self.uow:
            total = await self.uow.id_cards.count()
            id_cards = await self.uow.id_cards.list(offset_of(page, limit), limit)

            return Return.ok(
                Page[IdCardResponse](
                    data=[IdCardResponse.from_entity(card) for card in id_cards],
                    pagination=PaginationInfo.build(total, page, limit),
                )
            )
