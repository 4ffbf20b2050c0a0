"""
Use Cases

Organized into domain folders:
- auth/: Login, token refresh, logout, current user
- users/: User administration
- driving_licenses/: License issuance and maintenance
- id_cards/: ID card registration and maintenance
- admin/: Maintenance jobs

Import from subdirectories for better organization.
"""

from .auth import (
    CurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
)
from .users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from .driving_licenses import (
    CreateDrivingLicenseUseCase,
    DecodeLicenseNumberUseCase,
    DeleteDrivingLicenseUseCase,
    GetDrivingLicenseUseCase,
    ListDrivingLicensesUseCase,
    UpdateDrivingLicenseUseCase,
)
from .id_cards import (
    CreateIdCardUseCase,
    DeleteIdCardUseCase,
    GetIdCardUseCase,
    ListIdCardsUseCase,
    UpdateIdCardUseCase,
)
from .admin import SweepExpiredSessionsUseCase

__all__ = [
    # Auth
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "CurrentUserUseCase",
    # Users
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    # Driving licenses
    "CreateDrivingLicenseUseCase",
    "GetDrivingLicenseUseCase",
    "ListDrivingLicensesUseCase",
    "UpdateDrivingLicenseUseCase",
    "DeleteDrivingLicenseUseCase",
    "DecodeLicenseNumberUseCase",
    # ID cards
    "CreateIdCardUseCase",
    "GetIdCardUseCase",
    "ListIdCardsUseCase",
    "UpdateIdCardUseCase",
    "DeleteIdCardUseCase",
    # Admin
    "SweepExpiredSessionsUseCase",
]
