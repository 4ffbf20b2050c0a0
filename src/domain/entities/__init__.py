"""
Civil Registry Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    BloodType,
    LicenseClass,
    MaritalStatus,
    Religion,
    Sex,
)

# Export all entities
from .user import User
from .session import Session
from .driving_license import DrivingLicense
from .id_card import IdCard

__all__ = [
    # Enums
    "BloodType",
    "LicenseClass",
    "MaritalStatus",
    "Religion",
    "Sex",
    # Entities
    "User",
    "Session",
    "DrivingLicense",
    "IdCard",
]
