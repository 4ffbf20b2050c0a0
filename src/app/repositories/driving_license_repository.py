from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import DrivingLicense, LicenseClass


class IDrivingLicenseRepository(ABC):
    """Driving license repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, license_id: str) -> Optional[DrivingLicense]:
        pass

    @abstractmethod
    async def list(self, offset: int, limit: int) -> List[DrivingLicense]:
        """List licenses, newest first"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def holder_class_exists(
        self,
        national_id: str,
        license_class: LicenseClass,
        exclude_id: Optional[str] = None,
    ) -> bool:
        """True if the person already holds a license of this class"""
        pass

    @abstractmethod
    async def license_number_exists(self, license_number: str) -> bool:
        pass

    @abstractmethod
    async def max_license_number_with_prefix(self, prefix: str) -> Optional[str]:
        """Highest license number starting with prefix, or None"""
        pass

    @abstractmethod
    async def create(self, driving_license: DrivingLicense) -> DrivingLicense:
        pass

    @abstractmethod
    async def update(self, driving_license: DrivingLicense) -> DrivingLicense:
        pass

    @abstractmethod
    async def delete(self, driving_license: DrivingLicense) -> None:
        pass
