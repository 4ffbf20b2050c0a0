"""
Decode License Number Use Case

Splits a license number into region, birth date parts, sex and sequence.
Pure; no store access.
"""

from src.app.error_codes import ErrorCode
from src.domain import license_number
from src.domain.license_number import InvalidLicenseInput
from src.libs.result import Error, Result, Return
from .dtos import DecodedLicenseNumberResponse


class DecodeLicenseNumberUseCase:
    def execute(self, number: str) -> Result[DecodedLicenseNumberResponse]:
        try:
            decoded = license_number.decode(number)
        except InvalidLicenseInput as exc:
            return Return.err(Error(ErrorCode.INVALID_INPUT, str(exc)))

        return Return.ok(
            DecodedLicenseNumberResponse(
                license_number=number,
                region=decoded.region,
                day=decoded.day,
                month=decoded.month,
                year=decoded.year,
                sex=decoded.sex,
                sequence=decoded.sequence,
            )
        )
