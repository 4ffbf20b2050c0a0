"""
Access and refresh token signing.

Access and refresh tokens are signed with different secrets so one can never
be accepted in place of the other.
"""

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel, ConfigDict

ALGORITHM = "HS256"
SESSION_TYPE_WEB = "web"


class TokenConfig(BaseModel):
    """Signing configuration, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    access_secret: str
    refresh_secret: str
    access_expires: timedelta = timedelta(minutes=15)
    refresh_expires: timedelta = timedelta(days=7)
    algorithm: str = ALGORITHM

    @classmethod
    def from_app_config(cls, app_config) -> "TokenConfig":
        return cls(
            access_secret=app_config.JWT_ACCESS_SECRET,
            refresh_secret=app_config.JWT_REFRESH_SECRET,
            access_expires=timedelta(minutes=app_config.JWT_ACCESS_EXPIRES_MINUTES),
            refresh_expires=timedelta(days=app_config.JWT_REFRESH_EXPIRES_DAYS),
        )


@dataclass(frozen=True)
class TokenVerification:
    valid: bool
    expired: bool
    claims: Optional[dict] = None
    error: Optional[str] = None


def access_claims(user) -> dict:
    """Claims needed to authorize a request without a database round-trip."""
    return {
        "user_id": user.id,
        "email": user.email,
        "full_name": user.full_name,
        "is_active": user.is_active,
    }


def refresh_claims(user_id: str) -> dict:
    return {"user_id": user_id, "session_type": SESSION_TYPE_WEB}


class TokenService:
    def __init__(self, config: TokenConfig):
        self.config = config

    def _sign(self, claims: dict, secret: str, expires: timedelta, **extra: Any) -> str:
        now = datetime.now(UTC)
        payload = {**claims, **extra, "exp": now + expires, "iat": now}
        return jwt.encode(payload, secret, algorithm=self.config.algorithm)

    def _verify(self, token: str, secret: str) -> TokenVerification:
        try:
            claims = jwt.decode(token, secret, algorithms=[self.config.algorithm])
        except ExpiredSignatureError as exc:
            return TokenVerification(valid=False, expired=True, error=str(exc))
        except JWTError as exc:
            return TokenVerification(valid=False, expired=False, error=str(exc))
        return TokenVerification(valid=True, expired=False, claims=claims)

    def sign_access(self, claims: dict) -> str:
        """
        Sign an access token.

        Args:
            claims: user_id, email, full_name, is_active

        Returns:
            JWT string (HS256, short expiry)
        """
        return self._sign(claims, self.config.access_secret, self.config.access_expires)

    def sign_refresh(self, claims: dict) -> str:
        """
        Sign a refresh token.

        A random jti makes every issued token distinct, even for two logins of
        the same user within the same second.
        """
        return self._sign(
            claims,
            self.config.refresh_secret,
            self.config.refresh_expires,
            jti=secrets.token_urlsafe(16),
        )

    def verify_access(self, token: str) -> TokenVerification:
        return self._verify(token, self.config.access_secret)

    def verify_refresh(self, token: str) -> TokenVerification:
        return self._verify(token, self.config.refresh_secret)
