from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from src.app.error_codes import ErrorCode
from src.app.use_cases.id_cards import (
    CreateIdCardCommand,
    CreateIdCardUseCase,
    DeleteIdCardUseCase,
    GetIdCardUseCase,
    ListIdCardsUseCase,
    UpdateIdCardCommand,
    UpdateIdCardUseCase,
)
from src.domain.entities import BloodType, IdCard, MaritalStatus, Religion, Sex
from tests.fixtures.json_loader import TestDataLoader


def make_command(**overrides) -> CreateIdCardCommand:
    payload = TestDataLoader.record("id_cards", "citizen")
    payload.update(overrides)
    return CreateIdCardCommand(**payload)


@pytest.fixture
def stored_card():
    command = make_command()
    return IdCard(id="card-1", issuer_id="admin-1", **command.model_dump())


@pytest.mark.asyncio
async def test_create_id_card(mock_uow):
    result = await CreateIdCardUseCase(mock_uow).execute(make_command(), issuer_id="admin-1")

    assert result.is_ok()
    card = result.value
    assert card.national_id == "3171011201880003"
    assert card.religion == Religion.islam
    assert card.marital_status == MaritalStatus.married
    assert card.blood_type == BloodType.b
    assert card.issuer_id == "admin-1"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_duplicate_national_id(mock_uow):
    mock_uow.id_cards.national_id_exists.return_value = True

    result = await CreateIdCardUseCase(mock_uow).execute(make_command(), issuer_id="admin-1")

    assert result.is_err()
    assert result.error.code == ErrorCode.CONFLICT
    assert result.error.message == "National ID already registered"
    mock_uow.id_cards.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_store_unique_violation(mock_uow):
    mock_uow.id_cards.create.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE"))

    result = await CreateIdCardUseCase(mock_uow).execute(make_command(), issuer_id="admin-1")

    assert result.is_err()
    assert result.error.code == ErrorCode.CONFLICT


@pytest.mark.asyncio
async def test_get_and_missing(mock_uow, stored_card):
    missing = await GetIdCardUseCase(mock_uow).execute("nope")
    assert missing.error.code == ErrorCode.NOT_FOUND

    mock_uow.id_cards.get_by_id.return_value = stored_card
    found = await GetIdCardUseCase(mock_uow).execute("card-1")
    assert found.value.id == "card-1"


@pytest.mark.asyncio
async def test_list_id_cards(mock_uow, stored_card):
    mock_uow.id_cards.count.return_value = 1
    mock_uow.id_cards.list.return_value = [stored_card]

    result = await ListIdCardsUseCase(mock_uow).execute(page=1, limit=10)

    assert result.is_ok()
    assert len(result.value.data) == 1
    assert result.value.pagination.total_pages == 1
    assert result.value.pagination.has_next is False


@pytest.mark.asyncio
async def test_update_same_national_id_skips_uniqueness_check(mock_uow, stored_card):
    mock_uow.id_cards.get_by_id.return_value = stored_card

    result = await UpdateIdCardUseCase(mock_uow).execute(
        "card-1",
        UpdateIdCardCommand(national_id=stored_card.national_id, marital_status=MaritalStatus.divorced),
    )

    assert result.is_ok()
    assert result.value.marital_status == MaritalStatus.divorced
    mock_uow.id_cards.national_id_exists.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_to_taken_national_id(mock_uow, stored_card):
    mock_uow.id_cards.get_by_id.return_value = stored_card
    mock_uow.id_cards.national_id_exists.return_value = True

    result = await UpdateIdCardUseCase(mock_uow).execute(
        "card-1", UpdateIdCardCommand(national_id="3171019999999999")
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.CONFLICT
    mock_uow.id_cards.national_id_exists.assert_awaited_once_with(
        "3171019999999999", exclude_id="card-1"
    )


@pytest.mark.asyncio
async def test_update_changes_fields(mock_uow, stored_card):
    mock_uow.id_cards.get_by_id.return_value = stored_card

    result = await UpdateIdCardUseCase(mock_uow).execute(
        "card-1", UpdateIdCardCommand(sex=Sex.female, birth_date=date(1989, 2, 3))
    )

    assert result.value.sex == Sex.female
    assert result.value.birth_date == date(1989, 2, 3)
    assert result.value.address == stored_card.address


@pytest.mark.asyncio
async def test_delete_id_card(mock_uow, stored_card):
    missing = await DeleteIdCardUseCase(mock_uow).execute("nope")
    assert missing.error.code == ErrorCode.NOT_FOUND

    mock_uow.id_cards.get_by_id.return_value = stored_card
    result = await DeleteIdCardUseCase(mock_uow).execute("card-1")

    assert result.is_ok()
    mock_uow.id_cards.delete.assert_awaited_once_with(stored_card)
