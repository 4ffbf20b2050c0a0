"""
Refresh Token Use Case

Issues a new access token for a live session. The refresh token itself is
not rotated and stays valid until logout or its 7-day expiry.
"""

import logging

from src.api.utils.jwt import TokenService, access_claims
from src.app.error_codes import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Error, Result, Return
from .dtos import RefreshTokenResponse, UserInfo

logger = logging.getLogger(__name__)

INVALID_REFRESH_MESSAGE = "Refresh token is invalid or has expired"


class RefreshTokenUseCase:
    """
    Use case for refreshing JWT access tokens.

    Business Rules:
    - Refresh token signature must verify (never trusted alone)
    - A matching session must exist that is neither revoked nor expired
    - Session lookup compares against bcrypt hashes of active sessions
    - User must still exist and be active
    - Only the access token is reissued
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService):
        self.uow = uow
        self.tokens = tokens

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        """
        Execute refresh token use case.

        Args:
            refresh_token: raw refresh token issued at login

        Returns:
            Result with RefreshTokenResponse containing a new access token, or Error
        """
        verification = self.tokens.verify_refresh(refresh_token)
        if not verification.valid:
            logger.info(f"Refresh rejected: {verification.error}")
            return Return.err(Error(ErrorCode.UNAUTHORIZED, INVALID_REFRESH_MESSAGE))

        async with self.uow:
            session = await self.uow.sessions.find_active_by_refresh_token(
                refresh_token, utcnow()
            )
            if session is None:
                return Return.err(Error(ErrorCode.UNAUTHORIZED, INVALID_REFRESH_MESSAGE))

            if verification.claims.get("user_id") != session.user_id:
                logger.warning(f"Refresh token subject does not match session {session.id}")
                return Return.err(Error(ErrorCode.UNAUTHORIZED, INVALID_REFRESH_MESSAGE))

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None:
                return Return.err(Error(ErrorCode.UNAUTHORIZED, "User not found"))

            if not user.is_active:
                # FORBIDDEN like login: the token is fine, the account is disabled
                return Return.err(Error(ErrorCode.FORBIDDEN, "Your account is inactive"))

            access_token = self.tokens.sign_access(access_claims(user))

            return Return.ok(
                RefreshTokenResponse(
                    access_token=access_token,
                    user=UserInfo.from_entity(user),
                )
            )
