"""
Create the database tables and the bootstrap administrator.

Usage: python seed.py
"""

import asyncio
import logging

from sqlmodel import SQLModel

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.users import CreateUserCommand, CreateUserUseCase
from src.depends import AsyncSessionLocal, engine, hasher

logger = logging.getLogger(__name__)


async def seed_admin() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUnitOfWork(session, hasher)
        async with uow:
            if await uow.users.email_exists(ApplicationConfig.SEED_ADMIN_EMAIL.lower()):
                logger.info("Bootstrap admin already exists")
                return

        result = await CreateUserUseCase(uow, hasher).execute(
            CreateUserCommand(
                email=ApplicationConfig.SEED_ADMIN_EMAIL,
                full_name=ApplicationConfig.SEED_ADMIN_NAME,
                password=ApplicationConfig.SEED_ADMIN_PASSWORD,
            )
        )
        if result.is_err():
            raise RuntimeError(result.error.message)
        logger.info(f"Bootstrap admin {result.value.email} created")


if __name__ == "__main__":
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL.upper())
    asyncio.run(seed_admin())
