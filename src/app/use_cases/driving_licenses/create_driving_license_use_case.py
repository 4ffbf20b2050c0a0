"""
Create Driving License Use Case

Issues a license and generates its number from the holder's national ID,
birth date and sex plus the next free sequence for that pattern.
"""

import logging

from sqlalchemy.exc import IntegrityError

from src.app.error_codes import ErrorCode
from src.app.services.sequence_allocator import LicenseSequenceAllocator, SequenceExhaustedError
from src.app.services.unit_of_work import UnitOfWork
from src.domain import license_number
from src.domain.entities import DrivingLicense
from src.domain.license_number import InvalidLicenseInput
from src.domain.license_rules import minimum_age_violation
from src.libs.result import Error, Result, Return
from .dtos import CreateDrivingLicenseCommand, DrivingLicenseResponse

logger = logging.getLogger(__name__)

HOLDER_CLASS_TAKEN_MESSAGE = "This national ID already holds a license of this class"


class CreateDrivingLicenseUseCase:
    """
    Use case for issuing a driving license.

    Business Rules:
    - Holder must have reached the minimum age of the class today
    - One license per (national_id, license_class)
    - license_number = base pattern + next sequence (1..9999)
    - Sequence allocation is optimistic: the generated number is re-checked
      and the unique index on license_number is the last guard
    - A store-level unique violation is reported as a conflict
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateDrivingLicenseCommand, issuer_id: str
    ) -> Result[DrivingLicenseResponse]:
        """
        Execute create driving license use case.

        Args:
            command: holder and license data
            issuer_id: ID of the user issuing the license

        Returns:
            Result with the stored DrivingLicenseResponse, or Error
        """
        violation = minimum_age_violation(command.birth_date, command.license_class)
        if violation:
            return Return.err(Error(ErrorCode.INVALID_INPUT, violation))

        async with self.uow:
            if await self.uow.driving_licenses.holder_class_exists(
                command.national_id, command.license_class
            ):
                return Return.err(Error(ErrorCode.CONFLICT, HOLDER_CLASS_TAKEN_MESSAGE))

            try:
                pattern = license_number.base_pattern(
                    command.national_id, command.sex, command.birth_date
                )
                sequence = await LicenseSequenceAllocator(
                    self.uow.driving_licenses
                ).next_sequence(pattern)
                number = license_number.encode(
                    command.national_id, command.sex, command.birth_date, sequence
                )
            except InvalidLicenseInput as exc:
                return Return.err(Error(ErrorCode.INVALID_INPUT, str(exc)))
            except SequenceExhaustedError as exc:
                return Return.err(Error(ErrorCode.CAPACITY_EXHAUSTED, str(exc)))

            if await self.uow.driving_licenses.license_number_exists(number):
                logger.error(f"Generated license number collided for pattern {pattern}")
                return Return.err(
                    Error(ErrorCode.INTERNAL_ERROR, "Could not generate a unique license number")
                )

            driving_license = DrivingLicense(
                **command.model_dump(),
                license_number=number,
                issuer_id=issuer_id,
            )

            try:
                driving_license = await self.uow.driving_licenses.create(driving_license)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                logger.warning(f"Concurrent issuance conflict for pattern {pattern}")
                return Return.err(
                    Error(
                        ErrorCode.CONFLICT,
                        "License could not be issued because a conflicting record was stored concurrently",
                    )
                )

            logger.info(f"Driving license {driving_license.id} issued by {issuer_id}")
            return Return.ok(DrivingLicenseResponse.from_entity(driving_license))
