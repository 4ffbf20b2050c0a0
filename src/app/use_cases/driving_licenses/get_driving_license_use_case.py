"""
Get / List Driving Licenses Use Cases
"""

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.pagination import Page, PaginationInfo, offset_of, validate_window
from src.libs.result import Error, Result, Return
from .dtos import DrivingLicenseResponse

NOT_FOUND_MESSAGE = "Driving license not found"


class GetDrivingLicenseUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, license_id: str) -> Result[DrivingLicenseResponse]:
        async with self.uow:
            driving_license = await self.uow.driving_licenses.get_by_id(license_id)
            if driving_license is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, NOT_FOUND_MESSAGE))
            return Return.ok(DrivingLicenseResponse.from_entity(driving_license))


class ListDrivingLicensesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, page: int, limit: int) -> Result[Page[DrivingLicenseResponse]]:
        error = validate_window(page, limit)
        if error:
            return Return.err(error)

        async with self.uow:
            total = await self.uow.driving_licenses.count()
            licenses = await self.uow.driving_licenses.list(offset_of(page, limit), limit)

            return Return.ok(
                Page[DrivingLicenseResponse](
                    data=[DrivingLicenseResponse.from_entity(dl) for dl in licenses],
                    pagination=PaginationInfo.build(total, page, limit),
                )
            )
