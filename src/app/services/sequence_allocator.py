"""
License number sequence allocation.

The allocation is advisory: two concurrent requests can read the same
maximum. Callers must re-check uniqueness of the encoded number before
inserting, and the unique index on license_number is the final guard.
"""

import logging

from src.app.repositories.driving_license_repository import IDrivingLicenseRepository
from src.domain import license_number
from src.domain.license_number import BASE_PATTERN_LENGTH, MAX_SEQUENCE

logger = logging.getLogger(__name__)


class SequenceExhaustedError(Exception):
    """Raised when all 9999 sequence numbers of a base pattern are taken."""


class LicenseSequenceAllocator:
    def __init__(self, licenses: IDrivingLicenseRepository):
        self.licenses = licenses

    async def next_sequence(self, base_pattern: str) -> int:
        """
        Next free sequence number for a base pattern.

        Args:
            base_pattern: 12-digit prefix (region, day, month, 2-digit year)

        Returns:
            Highest existing sequence + 1, or 1 when none exists

        Raises:
            ValueError: base_pattern has the wrong shape
            SequenceExhaustedError: the pattern already holds sequence 9999
        """
        if len(base_pattern) != BASE_PATTERN_LENGTH or not base_pattern.isdigit():
            raise ValueError(f"Base pattern must be {BASE_PATTERN_LENGTH} digits")

        highest = await self.licenses.max_license_number_with_prefix(base_pattern)
        current = license_number.sequence_of(highest) if highest else 0
        next_value = current + 1

        if next_value > MAX_SEQUENCE:
            logger.error(f"License sequence exhausted for pattern {base_pattern}")
            raise SequenceExhaustedError(
                f"All {MAX_SEQUENCE} license numbers for this region and birth date are in use"
            )
        return next_value
