"""
Update Driving License Use Case
"""

import logging

from sqlalchemy.exc import IntegrityError

from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.domain.license_number import BASE_PATTERN_LENGTH, InvalidLicenseInput, base_pattern
from src.domain.license_rules import minimum_age_violation
from src.libs.result import Error, Result, Return
from .create_driving_license_use_case import HOLDER_CLASS_TAKEN_MESSAGE
from .dtos import DrivingLicenseResponse, UpdateDrivingLicenseCommand
from .get_driving_license_use_case import NOT_FOUND_MESSAGE

logger = logging.getLogger(__name__)

ENCODED_FIELDS_MESSAGE = (
    "National ID region, sex and birth date are encoded in the license number "
    "and cannot be changed"
)


class UpdateDrivingLicenseUseCase:
    """
    Use case for editing a driving license.

    Business Rules:
    - (national_id, license_class) uniqueness is re-checked only when either changes
    - Minimum age is re-checked when birth_date or license_class changes
    - The license number is never regenerated or edited, so changes to the
      fields it encodes (national ID region, sex, birth date) are rejected
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, license_id: str, command: UpdateDrivingLicenseCommand
    ) -> Result[DrivingLicenseResponse]:
        changes = command.model_dump(exclude_none=True)

        async with self.uow:
            driving_license = await self.uow.driving_licenses.get_by_id(license_id)
            if driving_license is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, NOT_FOUND_MESSAGE))

            national_id = changes.get("national_id", driving_license.national_id)
            license_class = changes.get("license_class", driving_license.license_class)
            birth_date = changes.get("birth_date", driving_license.birth_date)

            if "birth_date" in changes or "license_class" in changes:
                violation = minimum_age_violation(birth_date, license_class)
                if violation:
                    return Return.err(Error(ErrorCode.INVALID_INPUT, violation))

            try:
                pattern = base_pattern(
                    national_id,
                    changes.get("sex", driving_license.sex),
                    birth_date,
                )
            except InvalidLicenseInput as exc:
                return Return.err(Error(ErrorCode.INVALID_INPUT, str(exc)))
            if pattern != driving_license.license_number[:BASE_PATTERN_LENGTH]:
                return Return.err(Error(ErrorCode.INVALID_INPUT, ENCODED_FIELDS_MESSAGE))

            if (
                national_id != driving_license.national_id
                or license_class != driving_license.license_class
            ):
                if await self.uow.driving_licenses.holder_class_exists(
                    national_id, license_class, exclude_id=license_id
                ):
                    return Return.err(Error(ErrorCode.CONFLICT, HOLDER_CLASS_TAKEN_MESSAGE))

            for field, value in changes.items():
                setattr(driving_license, field, value)

            try:
                driving_license = await self.uow.driving_licenses.update(driving_license)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(Error(ErrorCode.CONFLICT, HOLDER_CLASS_TAKEN_MESSAGE))

            logger.info(f"Driving license {license_id} updated")
            return Return.ok(DrivingLicenseResponse.from_entity(driving_license))
