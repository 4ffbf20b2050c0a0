import pytest
from unittest.mock import AsyncMock, MagicMock

from src.api.utils.jwt import TokenConfig, TokenService
from src.app.services.hashing import CredentialHasher


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.email_exists = AsyncMock(return_value=False)
    uow.users.count = AsyncMock(return_value=0)
    uow.users.list = AsyncMock(return_value=[])
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.find_active_by_refresh_token = AsyncMock(return_value=None)
    uow.sessions.revoke_all_by_user_id = AsyncMock(return_value=0)
    uow.sessions.delete_expired = AsyncMock(return_value=0)

    uow.driving_licenses = MagicMock()
    uow.driving_licenses.get_by_id = AsyncMock(return_value=None)
    uow.driving_licenses.count = AsyncMock(return_value=0)
    uow.driving_licenses.list = AsyncMock(return_value=[])
    uow.driving_licenses.holder_class_exists = AsyncMock(return_value=False)
    uow.driving_licenses.license_number_exists = AsyncMock(return_value=False)
    uow.driving_licenses.max_license_number_with_prefix = AsyncMock(return_value=None)
    uow.driving_licenses.create = AsyncMock(side_effect=lambda dl: dl)
    uow.driving_licenses.update = AsyncMock(side_effect=lambda dl: dl)
    uow.driving_licenses.delete = AsyncMock()

    uow.id_cards = MagicMock()
    uow.id_cards.get_by_id = AsyncMock(return_value=None)
    uow.id_cards.count = AsyncMock(return_value=0)
    uow.id_cards.list = AsyncMock(return_value=[])
    uow.id_cards.national_id_exists = AsyncMock(return_value=False)
    uow.id_cards.create = AsyncMock(side_effect=lambda card: card)
    uow.id_cards.update = AsyncMock(side_effect=lambda card: card)
    uow.id_cards.delete = AsyncMock()
    return uow


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return CredentialHasher(rounds=4)


@pytest.fixture
def token_config():
    return TokenConfig(access_secret="unit-access-secret", refresh_secret="unit-refresh-secret")


@pytest.fixture
def tokens(token_config):
    return TokenService(token_config)
