"""
Driving License DTOs (Data Transfer Objects)

Command and Response classes for the driving license resource.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import LicenseClass, Sex


# ============================================================================
# Command DTOs
# ============================================================================


class CreateDrivingLicenseCommand(BaseModel):
    """Holder data; license_number is generated and never supplied"""

    full_name: str
    national_id: str
    rt: str
    rw: str
    district: str
    regency: str
    province: str
    license_class: LicenseClass
    expiry_date: date
    sex: Sex
    blood_type: str
    birth_place: str
    birth_date: date
    occupation: str
    picture_path: str


class UpdateDrivingLicenseCommand(BaseModel):
    """Only fields that are set are applied. license_number is not editable."""

    full_name: Optional[str] = None
    national_id: Optional[str] = None
    rt: Optional[str] = None
    rw: Optional[str] = None
    district: Optional[str] = None
    regency: Optional[str] = None
    province: Optional[str] = None
    license_class: Optional[LicenseClass] = None
    expiry_date: Optional[date] = None
    sex: Optional[Sex] = None
    blood_type: Optional[str] = None
    birth_place: Optional[str] = None
    birth_date: Optional[date] = None
    occupation: Optional[str] = None
    picture_path: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class DrivingLicenseResponse(BaseModel):
    id: str
    license_number: str
    full_name: str
    national_id: str
    rt: str
    rw: str
    district: str
    regency: str
    province: str
    license_class: LicenseClass
    expiry_date: date
    sex: Sex
    blood_type: str
    birth_place: str
    birth_date: date
    occupation: str
    picture_path: str
    issuer_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, driving_license) -> "DrivingLicenseResponse":
        return cls.model_validate(driving_license, from_attributes=True)


class DecodedLicenseNumberResponse(BaseModel):
    license_number: str
    region: str
    day: int
    month: int
    year: int
    sex: Sex
    sequence: int
