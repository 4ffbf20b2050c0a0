"""
ID Card DTOs (Data Transfer Objects)

Command and Response classes for the ID card resource.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import BloodType, MaritalStatus, Religion, Sex


# ============================================================================
# Command DTOs
# ============================================================================


class CreateIdCardCommand(BaseModel):
    national_id: str
    address: str
    birth_place: str
    birth_date: date
    sex: Sex
    religion: Religion
    marital_status: MaritalStatus
    blood_type: BloodType
    occupation: str
    nationality: str


class UpdateIdCardCommand(BaseModel):
    """Only fields that are set are applied"""

    national_id: Optional[str] = None
    address: Optional[str] = None
    birth_place: Optional[str] = None
    birth_date: Optional[date] = None
    sex: Optional[Sex] = None
    religion: Optional[Religion] = None
    marital_status: Optional[MaritalStatus] = None
    blood_type: Optional[BloodType] = None
    occupation: Optional[str] = None
    nationality: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class IdCardResponse(BaseModel):
    id: str
    national_id: str
    address: str
    birth_place: str
    birth_date: date
    sex: Sex
    religion: Religion
    marital_status: MaritalStatus
    blood_type: BloodType
    occupation: str
    nationality: str
    issuer_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, id_card) -> "IdCardResponse":
        return cls.model_validate(id_card, from_attributes=True)
