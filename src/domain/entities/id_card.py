"""
ID Card Entity

National identity card, one per national ID number.
"""

from datetime import date, datetime

from sqlalchemy import ForeignKey, String
from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import generate_id, utcnow

from .enums import BloodType, MaritalStatus, Religion, Sex


class IdCard(SQLModel, table=True):
    """
    IdCard entity.

    Business Rules:
    - national_id (16 digits) is unique
    """

    __tablename__ = "id_cards"

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=21)
    national_id: str = Field(unique=True, index=True, min_length=16, max_length=16)
    address: str = Field(max_length=1000)
    birth_place: str = Field(max_length=100)
    birth_date: date = Field(index=True)
    sex: Sex = Field(index=True)
    religion: Religion = Field(index=True)
    marital_status: MaritalStatus = Field(index=True)
    blood_type: BloodType
    occupation: str = Field(max_length=100)
    nationality: str = Field(max_length=50)

    issuer_id: str = Field(
        sa_column=Column(
            String(21),
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
