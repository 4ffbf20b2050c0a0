"""
Civil Registry Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Sex(str, Enum):
    """Sex as recorded on civil documents"""

    male = "male"
    female = "female"


class Religion(str, Enum):
    """Religion field of the ID card"""

    islam = "islam"
    protestant = "protestant"
    catholic = "catholic"
    hindu = "hindu"
    buddhism = "buddhism"
    confucianism = "confucianism"
    other = "other"


class MaritalStatus(str, Enum):
    """Marital status field of the ID card"""

    single = "single"
    married = "married"
    divorced = "divorced"
    widowed = "widowed"


class BloodType(str, Enum):
    """Blood type"""

    a = "a"
    b = "b"
    ab = "ab"
    o = "o"
    unknown = "unknown"


class LicenseClass(str, Enum):
    """Driving license class. *_UMUM classes are the commercial variants."""

    A = "A"
    A_UMUM = "A_UMUM"
    BI = "BI"
    BI_UMUM = "BI_UMUM"
    BII = "BII"
    BII_UMUM = "BII_UMUM"
    C = "C"
    CI = "CI"
    CII = "CII"
    D = "D"
    DI = "DI"
