"""
Driving License Use Cases

Issuance, maintenance and number decoding for driving licenses.
"""

from .create_driving_license_use_case import CreateDrivingLicenseUseCase
from .get_driving_license_use_case import GetDrivingLicenseUseCase, ListDrivingLicensesUseCase
from .update_driving_license_use_case import UpdateDrivingLicenseUseCase
from .delete_driving_license_use_case import DeleteDrivingLicenseUseCase
from .decode_license_number_use_case import DecodeLicenseNumberUseCase
from .dtos import (
    CreateDrivingLicenseCommand,
    DecodedLicenseNumberResponse,
    DrivingLicenseResponse,
    UpdateDrivingLicenseCommand,
)

__all__ = [
    # Use Cases
    "CreateDrivingLicenseUseCase",
    "GetDrivingLicenseUseCase",
    "ListDrivingLicensesUseCase",
    "UpdateDrivingLicenseUseCase",
    "DeleteDrivingLicenseUseCase",
    "DecodeLicenseNumberUseCase",
    # DTOs
    "CreateDrivingLicenseCommand",
    "UpdateDrivingLicenseCommand",
    "DrivingLicenseResponse",
    "DecodedLicenseNumberResponse",
]
