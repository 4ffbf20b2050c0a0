"""
Driving License Entity

A driving license issued to a person, keyed by a generated license number.
"""

from datetime import date, datetime

from sqlalchemy import ForeignKey, String
from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.domain.base import generate_id, utcnow

from .enums import LicenseClass, Sex


class DrivingLicense(SQLModel, table=True):
    """
    DrivingLicense entity.

    Business Rules:
    - license_number is generated from the national ID, birth date, sex and a
      per-pattern sequence; it is globally unique and never edited
    - A person holds at most one license per class (national_id, license_class)
    - Holder must have reached the minimum age of the class when issued
    """

    __tablename__ = "driving_licenses"

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=21)
    license_number: str = Field(unique=True, index=True, min_length=16, max_length=16)

    full_name: str = Field(max_length=255)
    national_id: str = Field(index=True, min_length=16, max_length=16)
    rt: str = Field(max_length=3)
    rw: str = Field(max_length=3)
    district: str = Field(max_length=255)
    regency: str = Field(max_length=255)
    province: str = Field(max_length=255)
    license_class: LicenseClass = Field(index=True)
    expiry_date: date
    sex: Sex
    blood_type: str = Field(max_length=10)
    birth_place: str = Field(max_length=100)
    birth_date: date
    occupation: str = Field(max_length=255)
    picture_path: str = Field(max_length=255)

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

    __table_args__ = (
        UniqueConstraint(
            "national_id", "license_class", name="uq_driving_license_holder_class"
        ),
        Index("idx_driving_license_expiry_date", "expiry_date"),
    )
