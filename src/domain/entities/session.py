"""
Session Entity

Stores hashed refresh tokens for authentication.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - one issued refresh token.

    Business Rules:
    - Refresh tokens are stored hashed (bcrypt), never raw
    - Active iff revoked_at is unset and expires_at is in the future
    - Tokens are not rotated on refresh
    - Expires 7 days after login; expired rows are swept by maintenance
    """

    __tablename__ = "sessions"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: str = Field(
        sa_column=Column(
            String(21),
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )

    refresh_token_hash: str = Field(max_length=60)  # Bcrypt output
    user_agent: Optional[str] = Field(default=None, max_length=255)
    ip_address: Optional[str] = Field(default=None, max_length=45)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_session_expires_at", "expires_at"),
        Index("idx_session_revoked_at", "revoked_at"),
    )

    def is_active(self, now: Optional[datetime] = None) -> bool:
        now = now or utcnow()
        return self.revoked_at is None and self.expires_at > now
