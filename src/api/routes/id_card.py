from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import to_http_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.id_cards import (
    CreateIdCardCommand,
    CreateIdCardUseCase,
    DeleteIdCardUseCase,
    GetIdCardUseCase,
    IdCardResponse,
    ListIdCardsUseCase,
    UpdateIdCardCommand,
    UpdateIdCardUseCase,
)
from src.app.use_cases.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, Page
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import BloodType, MaritalStatus, Religion, Sex

router = APIRouter(
    prefix="/id-cards", tags=["ID Card"], dependencies=[Depends(get_current_user)]
)

NATIONAL_ID_PATTERN = r"^[0-9]{16}$"


class CreateIdCardRequest(BaseModel):
    """Create ID card HTTP request payload"""

    national_id: str = Field(..., pattern=NATIONAL_ID_PATTERN, description="16-digit national ID")
    address: str = Field(..., min_length=1, max_length=1000)
    birth_place: str = Field(..., min_length=1, max_length=100)
    birth_date: date
    sex: Sex
    religion: Religion
    marital_status: MaritalStatus
    blood_type: BloodType
    occupation: str = Field(..., min_length=1, max_length=100)
    nationality: str = Field(..., min_length=1, max_length=50)

    @field_validator("birth_date")
    @classmethod
    def birth_date_not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError("Birth date cannot be in the future")
        return value


class UpdateIdCardRequest(BaseModel):
    """Update ID card HTTP request payload; omitted fields are left unchanged"""

    national_id: Optional[str] = Field(None, pattern=NATIONAL_ID_PATTERN)
    address: Optional[str] = Field(None, min_length=1, max_length=1000)
    birth_place: Optional[str] = Field(None, min_length=1, max_length=100)
    birth_date: Optional[date] = None
    sex: Optional[Sex] = None
    religion: Optional[Religion] = None
    marital_status: Optional[MaritalStatus] = None
    blood_type: Optional[BloodType] = None
    occupation: Optional[str] = Field(None, min_length=1, max_length=100)
    nationality: Optional[str] = Field(None, min_length=1, max_length=50)

    @field_validator("birth_date")
    @classmethod
    def birth_date_not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > date.today():
            raise ValueError("Birth date cannot be in the future")
        return value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=IdCardResponse)
async def create_id_card(
    request: CreateIdCardRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register ID Card

    Raises:
        - 409 Conflict: National ID already registered
        - 422 Unprocessable Entity: Invalid input
    """
    use_case = CreateIdCardUseCase(uow)
    result = await use_case.execute(
        CreateIdCardCommand(**request.model_dump()), issuer_id=current_user["user_id"]
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=Page[IdCardResponse])
async def list_id_cards(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List ID cards, newest first"""
    result = await ListIdCardsUseCase(uow).execute(page, limit)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/{id_card_id}", status_code=status.HTTP_200_OK, response_model=IdCardResponse)
async def get_id_card(id_card_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get ID Card

    Raises:
        - 404 Not Found: ID card does not exist
    """
    result = await GetIdCardUseCase(uow).execute(id_card_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.put("/{id_card_id}", status_code=status.HTTP_200_OK, response_model=IdCardResponse)
async def update_id_card(
    id_card_id: str,
    request: UpdateIdCardRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update ID Card

    Raises:
        - 404 Not Found: ID card does not exist
        - 409 Conflict: New national ID already registered
    """
    use_case = UpdateIdCardUseCase(uow)
    result = await use_case.execute(
        id_card_id, UpdateIdCardCommand(**request.model_dump(exclude_unset=True))
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete("/{id_card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_id_card(id_card_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete ID Card

    Raises:
        - 404 Not Found: ID card does not exist
    """
    result = await DeleteIdCardUseCase(uow).execute(id_card_id)

    if result.is_err():
        raise to_http_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
