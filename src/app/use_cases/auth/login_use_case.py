"""
Login Use Case

Verifies credentials, issues access and refresh tokens and records a session.
"""

import logging
from datetime import timedelta

from src.api.utils.jwt import TokenService, access_claims, refresh_claims
from src.app.error_codes import ErrorCode
from src.app.services.hashing import CredentialHasher, HashFormatError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Session
from src.libs.result import Error, Result, Return
from .dtos import LoginCommand, LoginResponse, UserInfo

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
SESSION_TTL = timedelta(days=7)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password fail with the same message
    - A dummy hash check runs for unknown emails to keep timing similar
    - Inactive users are refused
    - Refresh token is stored hashed on a new session valid for 7 days
    - Updates user.last_login_at
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tokens: TokenService,
        hasher: CredentialHasher,
        session_ttl: timedelta = SESSION_TTL,
    ):
        self.uow = uow
        self.tokens = tokens
        self.hasher = hasher
        self.session_ttl = session_ttl

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: email, password and optional client metadata

        Returns:
            Result with LoginResponse containing tokens and user info, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email.lower())

            if user is None:
                await self.hasher.burn_verify_async(command.password)
                logger.info("Login failed: unknown email")
                return Return.err(
                    Error(ErrorCode.UNAUTHORIZED, INVALID_CREDENTIALS_MESSAGE)
                )

            if not user.is_active:
                logger.info(f"Login refused for inactive user {user.id}")
                return Return.err(
                    Error(
                        ErrorCode.FORBIDDEN,
                        "Your account is inactive. Please contact an administrator.",
                    )
                )

            try:
                password_valid = await self.hasher.verify_async(
                    command.password, user.password_hash
                )
            except HashFormatError:
                logger.error(f"User {user.id} has a malformed password hash")
                return Return.err(
                    Error(ErrorCode.INTERNAL_ERROR, "Stored credentials are corrupted")
                )

            if not password_valid:
                logger.info(f"Login failed: wrong password for user {user.id}")
                return Return.err(
                    Error(ErrorCode.UNAUTHORIZED, INVALID_CREDENTIALS_MESSAGE)
                )

            access_token = self.tokens.sign_access(access_claims(user))
            refresh_token = self.tokens.sign_refresh(refresh_claims(user.id))

            now = utcnow()
            session = Session(
                user_id=user.id,
                refresh_token_hash=await self.hasher.hash_async(refresh_token),
                user_agent=command.user_agent[:255] if command.user_agent else None,
                ip_address=command.ip_address,
                expires_at=now + self.session_ttl,
            )
            await self.uow.sessions.create(session)

            user.last_login_at = now
            await self.uow.users.update(user)

            await self.uow.commit()
            logger.info(f"User {user.id} logged in (session {session.id})")

            return Return.ok(
                LoginResponse(
                    access_token=access_token,
                    refresh_token=refresh_token,
                    user=UserInfo.from_entity(user),
                )
            )
