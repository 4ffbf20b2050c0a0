from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import to_http_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.driving_licenses import (
    CreateDrivingLicenseCommand,
    CreateDrivingLicenseUseCase,
    DecodedLicenseNumberResponse,
    DecodeLicenseNumberUseCase,
    DeleteDrivingLicenseUseCase,
    DrivingLicenseResponse,
    GetDrivingLicenseUseCase,
    ListDrivingLicensesUseCase,
    UpdateDrivingLicenseCommand,
    UpdateDrivingLicenseUseCase,
)
from src.app.use_cases.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, Page
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import LicenseClass, Sex

router = APIRouter(prefix="/driving-licenses", tags=["Driving License"])

NATIONAL_ID_PATTERN = r"^[0-9]{16}$"


def _future_expiry(value: Optional[date]) -> Optional[date]:
    if value is not None and value <= date.today():
        raise ValueError("Expiry date must be in the future")
    return value


def _past_birth_date(value: Optional[date]) -> Optional[date]:
    if value is not None and value > date.today():
        raise ValueError("Birth date cannot be in the future")
    return value


class CreateDrivingLicenseRequest(BaseModel):
    """
    Create driving license HTTP request payload

    The license number is generated and cannot be supplied.
    """

    full_name: str = Field(..., min_length=1, max_length=255)
    national_id: str = Field(..., pattern=NATIONAL_ID_PATTERN, description="16-digit national ID")
    rt: str = Field(..., min_length=1, max_length=3)
    rw: str = Field(..., min_length=1, max_length=3)
    district: str = Field(..., min_length=1, max_length=255)
    regency: str = Field(..., min_length=1, max_length=255)
    province: str = Field(..., min_length=1, max_length=255)
    license_class: LicenseClass
    expiry_date: date
    sex: Sex
    blood_type: str = Field(..., min_length=1, max_length=10)
    birth_place: str = Field(..., min_length=1, max_length=100)
    birth_date: date
    occupation: str = Field(..., min_length=1, max_length=255)
    picture_path: str = Field(..., min_length=1, max_length=255)

    @field_validator("expiry_date")
    @classmethod
    def expiry_in_future(cls, value):
        return _future_expiry(value)

    @field_validator("birth_date")
    @classmethod
    def birth_date_not_in_future(cls, value):
        return _past_birth_date(value)


class UpdateDrivingLicenseRequest(BaseModel):
    """Update driving license HTTP request payload; omitted fields are left unchanged"""

    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    national_id: Optional[str] = Field(None, pattern=NATIONAL_ID_PATTERN)
    rt: Optional[str] = Field(None, min_length=1, max_length=3)
    rw: Optional[str] = Field(None, min_length=1, max_length=3)
    district: Optional[str] = Field(None, min_length=1, max_length=255)
    regency: Optional[str] = Field(None, min_length=1, max_length=255)
    province: Optional[str] = Field(None, min_length=1, max_length=255)
    license_class: Optional[LicenseClass] = None
    expiry_date: Optional[date] = None
    sex: Optional[Sex] = None
    blood_type: Optional[str] = Field(None, min_length=1, max_length=10)
    birth_place: Optional[str] = Field(None, min_length=1, max_length=100)
    birth_date: Optional[date] = None
    occupation: Optional[str] = Field(None, min_length=1, max_length=255)
    picture_path: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator("expiry_date")
    @classmethod
    def expiry_in_future(cls, value):
        return _future_expiry(value)

    @field_validator("birth_date")
    @classmethod
    def birth_date_not_in_future(cls, value):
        return _past_birth_date(value)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DrivingLicenseResponse)
async def create_driving_license(
    request: CreateDrivingLicenseRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Issue Driving License

    Generates the license number from the national ID region, birth date,
    sex and the next free sequence.

    Raises:
        - 400 Bad Request: Holder below the minimum age of the class
        - 409 Conflict: National ID already holds this class, concurrent
          issuance conflict, or all sequence numbers of the pattern used
        - 422 Unprocessable Entity: Invalid input
        - 500 Internal Server Error: Generated number collided
    """
    use_case = CreateDrivingLicenseUseCase(uow)
    result = await use_case.execute(
        CreateDrivingLicenseCommand(**request.model_dump()),
        issuer_id=current_user["user_id"],
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=Page[DrivingLicenseResponse])
async def list_driving_licenses(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List driving licenses, newest first"""
    result = await ListDrivingLicensesUseCase(uow).execute(page, limit)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/numbers/{license_number}",
    status_code=status.HTTP_200_OK,
    response_model=DecodedLicenseNumberResponse,
)
async def decode_license_number(
    license_number: str,
    current_user: dict = Depends(get_current_user),
):
    """
    Decode License Number

    Splits a 16-digit license number into region, birth date parts, sex
    and sequence. The century is not encoded and is read as 20YY.

    Raises:
        - 400 Bad Request: Not a 16-digit number
    """
    result = DecodeLicenseNumberUseCase().execute(license_number)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/{license_id}", status_code=status.HTTP_200_OK, response_model=DrivingLicenseResponse)
async def get_driving_license(
    license_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Driving License

    Raises:
        - 404 Not Found: License does not exist
    """
    result = await GetDrivingLicenseUseCase(uow).execute(license_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.put("/{license_id}", status_code=status.HTTP_200_OK, response_model=DrivingLicenseResponse)
async def update_driving_license(
    license_id: str,
    request: UpdateDrivingLicenseRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Driving License

    The license number is never changed.

    Raises:
        - 400 Bad Request: Holder below the minimum age of the class
        - 404 Not Found: License does not exist
        - 409 Conflict: National ID already holds this class
    """
    use_case = UpdateDrivingLicenseUseCase(uow)
    result = await use_case.execute(
        license_id, UpdateDrivingLicenseCommand(**request.model_dump(exclude_unset=True))
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete("/{license_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_driving_license(
    license_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Driving License

    Raises:
        - 404 Not Found: License does not exist
    """
    result = await DeleteDrivingLicenseUseCase(uow).execute(license_id)

    if result.is_err():
        raise to_http_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
