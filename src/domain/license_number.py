"""
Driving license number codec.

A license number is 16 digits::

    RRRRRR DD MM YY SSSS

- ``RRRRRR`` first 6 digits of the holder's national ID (province, regency,
  district), copied verbatim
- ``DD`` day of birth, plus 40 when the holder is female
- ``MM`` month of birth
- ``YY`` year of birth modulo 100
- ``SSSS`` sequence number, unique among holders sharing the first 12 digits

The first 12 digits are the *base pattern*. Encoding is pure and has no
checksum; ``decode`` is its inverse except for the century, which is not
stored and is always read back as 20YY.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

from src.domain.entities.enums import Sex

LICENSE_NUMBER_LENGTH = 16
BASE_PATTERN_LENGTH = 12
REGION_LENGTH = 6
MIN_SEQUENCE = 1
MAX_SEQUENCE = 9999
FEMALE_DAY_OFFSET = 40

_SIXTEEN_DIGITS = re.compile(r"[0-9]{16}")


class InvalidLicenseInput(ValueError):
    """Raised when codec input cannot be encoded or decoded."""


@dataclass(frozen=True)
class DecodedLicenseNumber:
    region: str
    day: int
    month: int
    year2digit: int
    sex: Sex
    sequence: int

    @property
    def year(self) -> int:
        # Century is not encoded; holders born before 2000 decode wrongly.
        return 2000 + self.year2digit

    @property
    def base_pattern(self) -> str:
        day = self.day + FEMALE_DAY_OFFSET if self.sex == Sex.female else self.day
        return f"{self.region}{day:02d}{self.month:02d}{self.year2digit:02d}"


def _coerce_sex(sex) -> Sex:
    try:
        return Sex(sex)
    except ValueError:
        raise InvalidLicenseInput(
            f"Sex must be one of {', '.join(s.value for s in Sex)}"
        ) from None


def base_pattern(national_id: str, sex, birth_date: date) -> str:
    """Return the 12-digit prefix shared by holders with the same region, birth date and sex."""
    if not isinstance(national_id, str) or not _SIXTEEN_DIGITS.fullmatch(national_id):
        raise InvalidLicenseInput("National ID must be exactly 16 digits")
    sex = _coerce_sex(sex)
    # datetime is a date subclass but carries a time part we do not encode
    if not isinstance(birth_date, date) or isinstance(birth_date, datetime):
        raise InvalidLicenseInput("Birth date must be a valid calendar date")

    day = birth_date.day + FEMALE_DAY_OFFSET if sex == Sex.female else birth_date.day
    return (
        f"{national_id[:REGION_LENGTH]}"
        f"{day:02d}{birth_date.month:02d}{birth_date.year % 100:02d}"
    )


def encode(national_id: str, sex, birth_date: date, sequence: int) -> str:
    """
    Build a license number.

    Args:
        national_id: 16-digit national ID of the holder
        sex: Sex (or its string value)
        birth_date: date of birth
        sequence: 1..9999, unique within the base pattern

    Raises:
        InvalidLicenseInput: on any malformed argument
    """
    prefix = base_pattern(national_id, sex, birth_date)
    if (
        isinstance(sequence, bool)
        or not isinstance(sequence, int)
        or not MIN_SEQUENCE <= sequence <= MAX_SEQUENCE
    ):
        raise InvalidLicenseInput(
            f"Sequence must be an integer between {MIN_SEQUENCE} and {MAX_SEQUENCE}"
        )

    number = f"{prefix}{sequence:04d}"
    if len(number) != LICENSE_NUMBER_LENGTH:
        raise InvalidLicenseInput(
            f"Generated license number has length {len(number)}, expected {LICENSE_NUMBER_LENGTH}"
        )
    return number


def decode(license_number: str) -> DecodedLicenseNumber:
    """Split a license number back into its parts."""
    if not isinstance(license_number, str) or not _SIXTEEN_DIGITS.fullmatch(license_number):
        raise InvalidLicenseInput("License number must be exactly 16 digits")

    day = int(license_number[6:8])
    sex = Sex.female if day > FEMALE_DAY_OFFSET else Sex.male
    if sex == Sex.female:
        day -= FEMALE_DAY_OFFSET

    return DecodedLicenseNumber(
        region=license_number[:REGION_LENGTH],
        day=day,
        month=int(license_number[8:10]),
        year2digit=int(license_number[10:12]),
        sex=sex,
        sequence=int(license_number[12:16]),
    )


def is_valid(license_number: str) -> bool:
    try:
        decode(license_number)
    except InvalidLicenseInput:
        return False
    return True


def sequence_of(license_number: str) -> int:
    return decode(license_number).sequence
