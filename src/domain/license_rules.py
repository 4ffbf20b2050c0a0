"""
Business rules for driving license classes.
"""

from datetime import date
from typing import Optional

from src.domain.entities.enums import LicenseClass

# Minimum holder age (years) per license class.
MINIMUM_AGE: dict[LicenseClass, int] = {
    LicenseClass.A: 17,
    LicenseClass.C: 17,
    LicenseClass.D: 17,
    LicenseClass.DI: 17,
    LicenseClass.CI: 18,
    LicenseClass.CII: 19,
    LicenseClass.A_UMUM: 20,
    LicenseClass.BI: 20,
    LicenseClass.BII: 21,
    LicenseClass.BI_UMUM: 22,
    LicenseClass.BII_UMUM: 23,
}


def age_on(birth_date: date, today: Optional[date] = None) -> int:
    """Completed years between birth_date and today."""
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def minimum_age_violation(
    birth_date: date, license_class: LicenseClass, today: Optional[date] = None
) -> Optional[str]:
    """
    Check the minimum-age rule.

    Returns:
        None when the holder is old enough, otherwise a message naming the
        current age, the required minimum and the class.
    """
    license_class = LicenseClass(license_class)
    age = age_on(birth_date, today)
    minimum = MINIMUM_AGE[license_class]
    if age < minimum:
        return (
            f"Holder is {age} years old; license class {license_class.value} "
            f"requires a minimum age of {minimum}"
        )
    return None
