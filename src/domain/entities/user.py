"""
User Entity

An account that can log in and issue civil records.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import generate_id, utcnow


class User(SQLModel, table=True):
    """
    User entity - an administrator account.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash
    - Deactivation is a flag (is_active=False); records issued by the user are kept
    """

    __tablename__ = "users"

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=21)
    email: str = Field(unique=True, index=True, max_length=255)
    full_name: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    is_active: bool = Field(default=True, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
