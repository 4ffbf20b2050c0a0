from datetime import timedelta

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import TokenConfig, TokenService
from src.app.error_codes import ErrorCode
from src.app.services.hashing import CredentialHasher
from src.libs.result import Error


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores ON DELETE CASCADE unless the pragma is set per connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
enable_sqlite_foreign_keys(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Built once; both are read-only after startup
token_service = TokenService(TokenConfig.from_app_config(ApplicationConfig))
hasher = CredentialHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
session_ttl = timedelta(days=ApplicationConfig.SESSION_TTL_DAYS)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session, hasher)


def get_token_service() -> TokenService:
    return token_service


def get_hasher() -> CredentialHasher:
    return hasher


def get_session_ttl() -> timedelta:
    return session_ttl


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> dict:
    """
    Dependency to extract and verify JWT access token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id, email, full_name, is_active

    Raises:
        ClientError: 401 if the token is missing or expired, 403 if it is invalid
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error(ErrorCode.UNAUTHORIZED, "Access token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    verification = tokens.verify_access(credentials.credentials)

    if verification.expired:
        raise ClientError(
            Error(ErrorCode.UNAUTHORIZED, "Token expired, please log in again"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not verification.valid:
        raise ClientError(
            Error(ErrorCode.FORBIDDEN, "Invalid access token"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    claims = verification.claims
    if not isinstance(claims.get("user_id"), str) or not isinstance(claims.get("email"), str):
        raise ClientError(
            Error(ErrorCode.FORBIDDEN, "Invalid token payload"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    return claims
