from datetime import timedelta

from src.api.utils.jwt import (
    SESSION_TYPE_WEB,
    TokenConfig,
    TokenService,
    access_claims,
    refresh_claims,
)
from src.domain.entities import User


def make_user():
    return User(
        id="user-1",
        email="officer@example.com",
        full_name="Siti Rahma",
        password_hash="x",
        is_active=True,
    )


def test_access_token_round_trip(tokens):
    token = tokens.sign_access(access_claims(make_user()))

    verification = tokens.verify_access(token)

    assert verification.valid is True
    assert verification.expired is False
    assert verification.claims["user_id"] == "user-1"
    assert verification.claims["email"] == "officer@example.com"
    assert verification.claims["full_name"] == "Siti Rahma"
    assert verification.claims["is_active"] is True
    assert "exp" in verification.claims and "iat" in verification.claims


def test_refresh_claims_carry_no_profile_data(tokens):
    token = tokens.sign_refresh(refresh_claims("user-1"))

    claims = tokens.verify_refresh(token).claims

    assert claims["user_id"] == "user-1"
    assert claims["session_type"] == SESSION_TYPE_WEB
    assert "jti" in claims
    assert "is_active" not in claims
    assert "email" not in claims


def test_refresh_tokens_are_distinct(tokens):
    first = tokens.sign_refresh(refresh_claims("user-1"))
    second = tokens.sign_refresh(refresh_claims("user-1"))

    assert first != second


def test_secrets_are_not_interchangeable(tokens):
    access = tokens.sign_access(access_claims(make_user()))
    refresh = tokens.sign_refresh(refresh_claims("user-1"))

    assert tokens.verify_refresh(access).valid is False
    assert tokens.verify_access(refresh).valid is False


def test_expired_token_is_reported_separately(token_config):
    expired_config = token_config.model_copy(update={"access_expires": timedelta(seconds=-1)})
    service = TokenService(expired_config)

    verification = service.verify_access(service.sign_access(access_claims(make_user())))

    assert verification.valid is False
    assert verification.expired is True
    assert verification.claims is None


def test_garbage_token_is_invalid_not_expired(tokens):
    verification = tokens.verify_access("not.a.jwt")

    assert verification.valid is False
    assert verification.expired is False
    assert verification.error


def test_config_from_application_config():
    class Settings:
        JWT_ACCESS_SECRET = "a"
        JWT_REFRESH_SECRET = "r"
        JWT_ACCESS_EXPIRES_MINUTES = 15
        JWT_REFRESH_EXPIRES_DAYS = 7

    config = TokenConfig.from_app_config(Settings)

    assert config.access_expires == timedelta(minutes=15)
    assert config.refresh_expires == timedelta(days=7)
    assert config.algorithm == "HS256"
