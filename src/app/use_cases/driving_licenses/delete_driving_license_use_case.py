"""
Delete Driving License Use Case
"""

import logging

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .get_driving_license_use_case import NOT_FOUND_MESSAGE

logger = logging.getLogger(__name__)


class DeleteDrivingLicenseUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, license_id: str) -> Result[None]:
        async with self.uow:
            driving_license = await self.uow.driving_licenses.get_by_id(license_id)
            if driving_license is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, NOT_FOUND_MESSAGE))

            await self.uow.driving_licenses.delete(driving_license)
            await self.uow.commit()

        logger.info(f"Driving license {license_id} deleted")
        return Return.ok()
