from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.driving_license_repository import IDrivingLicenseRepository
from src.domain.base import utcnow
from src.domain.entities import DrivingLicense, LicenseClass


class DrivingLicenseRepository(IDrivingLicenseRepository):
    """Driving license repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, license_id: str) -> Optional[DrivingLicense]:
        stmt = select(DrivingLicense).where(DrivingLicense.id == license_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(self, offset: int, limit: int) -> List[DrivingLicense]:
        stmt = (
            select(DrivingLicense)
            .order_by(DrivingLicense.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(DrivingLicense))
        return result.one()

    async def holder_class_exists(
        self,
        national_id: str,
        license_class: LicenseClass,
        exclude_id: Optional[str] = None,
    ) -> bool:
        stmt = select(DrivingLicense.id).where(
            DrivingLicense.national_id == national_id,
            DrivingLicense.license_class == license_class,
        )
        if exclude_id:
            stmt = stmt.where(DrivingLicense.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def license_number_exists(self, license_number: str) -> bool:
        stmt = select(DrivingLicense.id).where(
            DrivingLicense.license_number == license_number
        )
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def max_license_number_with_prefix(self, prefix: str) -> Optional[str]:
        """
        Numbers sharing a prefix have the same fixed width, so the string
        maximum is also the highest sequence.
        """
        stmt = select(func.max(DrivingLicense.license_number)).where(
            DrivingLicense.license_number.startswith(prefix, autoescape=True)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, driving_license: DrivingLicense) -> DrivingLicense:
        self.session.add(driving_license)
        await self.session.flush()
        await self.session.refresh(driving_license)
        return driving_license

    async def update(self, driving_license: DrivingLicense) -> DrivingLicense:
        driving_license.updated_at = utcnow()
        self.session.add(driving_license)
        await self.session.flush()
        await self.session.refresh(driving_license)
        return driving_license

    async def delete(self, driving_license: DrivingLicense) -> None:
        await self.session.delete(driving_license)
        await self.session.flush()
