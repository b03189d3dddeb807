"""
ⒸAngelaMos | 2025
test_security.py
"""

import asyncio
import hashlib
from datetime import UTC, datetime, timedelta

import jwt
import pytest
from sqlalchemy.exc import IntegrityError
from uuid6 import uuid7

from socialhub.config import settings
from socialhub.core.exceptions import (
    ConflictError,
    ExpiredTokenError,
    InvalidTokenError,
    ServiceUnavailable,
    ValidationError,
    translate_exception,
)
from socialhub.core.security import (
    create_access_token,
    create_password_reset_token,
    decode_access_token,
    hash_password,
    hash_token,
    verify_password,
    verify_password_with_timing_safety,
)


async def test_hash_is_salted_and_verifies():
    first = await hash_password("Password123")
    second = await hash_password("Password123")

    assert first != second
    assert first.startswith("$argon2id$")
    assert (await verify_password("Password123", first))[0] is True
    assert (await verify_password("password123", first))[0] is False


async def test_overlong_password_rejected():
    with pytest.raises(ValidationError):
        await hash_password("x" * 65)

    digest = await hash_password("Password123")
    assert await verify_password("x" * 65, digest) == (False, None)


async def test_unknown_digest_does_not_verify():
    assert await verify_password("Password123", "not-a-hash") == (False, None)


async def test_missing_user_still_spends_a_verification():
    assert await verify_password_with_timing_safety("Password123", None) == (
        False,
        None,
    )


async def test_hash_timeout_surfaces_as_timeout(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_OPERATION_TIMEOUT_SECONDS", 0.0001)
    with pytest.raises(TimeoutError):
        await hash_password("Password123")
    # let the worker thread finish before the next test
    await asyncio.sleep(0.5)


def test_token_round_trip_carries_only_subject_and_times():
    user_id = uuid7()
    token = create_access_token(user_id)

    claims = decode_access_token(token)
    assert claims.subject_id == user_id
    assert claims.issued_at.tzinfo is not None

    payload = jwt.decode(token, options = {"verify_signature": False})
    assert set(payload) == {"sub", "iat", "exp"}


def test_expired_token_reported_as_expired():
    issued = datetime.now(UTC) - timedelta(
        minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES + 1
    )
    token = create_access_token(uuid7(), now = issued)

    with pytest.raises(ExpiredTokenError) as exc_info:
        decode_access_token(token)
    assert exc_info.value.reason == "expired"


def test_bad_signature_reported_as_invalid():
    token = jwt.encode(
        {
            "sub": str(uuid7()),
            "iat": datetime.now(UTC),
            "exp": datetime.now(UTC) + timedelta(minutes = 5),
        },
        "another-secret-key-that-is-long-enough-000",
        algorithm = "HS256",
    )

    with pytest.raises(InvalidTokenError) as exc_info:
        decode_access_token(token)
    assert exc_info.value.reason == "invalid"


@pytest.mark.parametrize(
    "payload",
    [
        {"sub": "not-a-uuid"},
        {"iat": 1},
    ],
)
def test_malformed_claims_are_invalid(payload):
    now = datetime.now(UTC)
    claims = {
        "sub": str(uuid7()),
        "iat": now,
        "exp": now + timedelta(minutes = 5),
        **payload,
    }
    if "iat" in payload:
        del claims["sub"]
    token = jwt.encode(
        claims,
        settings.SECRET_KEY.get_secret_value(),
        algorithm = settings.JWT_ALGORITHM,
    )

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_garbage_token_is_invalid():
    with pytest.raises(InvalidTokenError):
        decode_access_token("definitely.not.a-jwt")


def test_reset_token_stores_only_digest():
    now = datetime.now(UTC)
    raw, digest, expires_at = create_password_reset_token(now)

    assert len(raw) == 64
    int(raw, 16)
    assert digest == hashlib.sha256(raw.encode()).hexdigest()
    assert digest == hash_token(raw)
    assert expires_at - now == timedelta(
        minutes = settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES
    )


def test_reset_tokens_are_unique():
    tokens = {create_password_reset_token()[0] for _ in range(20)}
    assert len(tokens) == 20


def test_lower_level_errors_translate_by_type():
    duplicate = IntegrityError("INSERT", {}, Exception("UNIQUE failed"))

    assert isinstance(translate_exception(duplicate), ConflictError)
    assert isinstance(translate_exception(TimeoutError()), ServiceUnavailable)
    assert isinstance(
        translate_exception(jwt.ExpiredSignatureError()),
        ExpiredTokenError
    )
    assert isinstance(
        translate_exception(jwt.DecodeError()),
        InvalidTokenError
    )
    assert translate_exception(ValueError("boom")) is None
