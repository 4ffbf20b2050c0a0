import secrets
from datetime import UTC, datetime


ID_LENGTH = 21


def generate_id() -> str:
    """Short opaque primary key (URL-safe, 21 chars)."""
    return secrets.token_urlsafe(16)[:ID_LENGTH]


def utcnow() -> datetime:
    # Naive UTC: DateTime columns are stored without tzinfo.
    return datetime.now(UTC).replace(tzinfo=None)
