"""
Get / List Users Use Cases
"""

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.pagination import Page, PaginationInfo, offset_of, validate_window
from src.libs.result import Error, Result, Return
from .dtos import UserResponse


class GetUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "User not found"))
            return Return.ok(UserResponse.from_entity(user))


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, page: int, limit: int) -> Result[Page[UserResponse]]:
        error = validate_window(page, limit)
        if error:
            return Return.err(error)

        async with self.uow:
            total = await self.uow.users.count()
            users = await self.uow.users.list(offset_of(page, limit), limit)

            return Return.ok(
                Page[UserResponse](
                    data=[UserResponse.from_entity(u) for u in users],
                    pagination=PaginationInfo.build(total, page, limit),
                )
            )
