"""
ⒸAngelaMos | 2025
security.py
"""

import asyncio
import hashlib
import secrets
from dataclasses import dataclass
from datetime import (
    UTC,
    datetime,
    timedelta,
)
from uuid import UUID

import jwt
from fastapi import Response
from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher

from socialhub.config import (
    settings,
    PASSWORD_MAX_LENGTH,
)
from socialhub.core.constants import (
    ACCESS_TOKEN_COOKIE_NAME,
    RESET_TOKEN_BYTES,
)
from socialhub.core.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    ValidationError,
)


# Fixed Argon2id cost, roughly 100ms per hash on commodity hardware
password_hasher = PasswordHash(
    (
        Argon2Hasher(
            time_cost = 3,
            memory_cost = 64 * 1024,
            parallelism = 4,
        ),
    )
)


def _ensure_hashable(password: str) -> None:
    if len(password) > PASSWORD_MAX_LENGTH:
        raise ValidationError(
            f"Password must be at most {PASSWORD_MAX_LENGTH} characters"
        )


async def hash_password(password: str) -> str:
    """
    Hash password using Argon2id
    """
    _ensure_hashable(password)
    return await asyncio.wait_for(
        asyncio.to_thread(password_hasher.hash,
                          password),
        timeout = settings.AUTH_OPERATION_TIMEOUT_SECONDS,
    )


async def verify_password(plain_password: str,
                          hashed_password: str) -> tuple[bool,
                                                         str | None]:
    """
    Verify password and check if rehash is needed
    """
    if len(plain_password) > PASSWORD_MAX_LENGTH:
        return False, None
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(
                password_hasher.verify_and_update,
                plain_password,
                hashed_password
            ),
            timeout = settings.AUTH_OPERATION_TIMEOUT_SECONDS,
        )
    except UnknownHashError:
        return False, None


DUMMY_HASH = password_hasher.hash(
    "dummy_password_for_timing_attack_prevention"
)


async def verify_password_with_timing_safety(
    plain_password: str,
    hashed_password: str | None,
) -> tuple[bool,
           str | None]:
    """
    Verify password with constant time behavior to prevent user enumeration
    """
    if hashed_password is None:
        await verify_password(plain_password, DUMMY_HASH)
        return False, None
    return await verify_password(plain_password, hashed_password)


@dataclass(frozen = True)
class AccessTokenClaims:
    """
    Verified contents of a bearer credential
    """
    subject_id: UUID
    issued_at: datetime


def create_access_token(
    user_id: UUID,
    now: datetime | None = None,
) -> str:
    """
    Create a signed access token carrying only the subject id
    """
    issued_at = now or datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp":
        issued_at + timedelta(minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }

    return jwt.encode(
        payload,
        settings.SECRET_KEY.get_secret_value(),
        algorithm = settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> AccessTokenClaims:
    """
    Verify signature and expiry of an access token
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms = [settings.JWT_ALGORITHM],
            options = {"require": ["exp",
                                   "sub",
                                   "iat"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise ExpiredTokenError() from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError() from e

    try:
        subject_id = UUID(payload["sub"])
    except (TypeError, ValueError) as e:
        raise InvalidTokenError() from e

    return AccessTokenClaims(
        subject_id = subject_id,
        issued_at = datetime.fromtimestamp(payload["iat"],
                                           tz = UTC),
    )


def hash_token(token: str) -> str:
    """
    SHA-256 hex digest of an opaque token
    """
    return hashlib.sha256(token.encode()).hexdigest()


def create_password_reset_token(
    now: datetime | None = None,
) -> tuple[str,
           str,
           datetime]:
    """
    Generate a one time reset token

    Returns the plaintext for delivery, its hash for storage and the expiry
    """
    raw_token = secrets.token_hex(RESET_TOKEN_BYTES)
    expires_at = (now or datetime.now(UTC)) + timedelta(
        minutes = settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES
    )
    return raw_token, hash_token(raw_token), expires_at


def set_access_cookie(response: Response, token: str) -> None:
    """
    Attach the access token as an http only cookie
    """
    response.set_cookie(
        key = ACCESS_TOKEN_COOKIE_NAME,
        value = token,
        max_age = settings.COOKIE_EXPIRE_DAYS * 24 * 60 * 60,
        httponly = True,
        secure = settings.COOKIE_SECURE,
        samesite = "lax",
        path = "/",
    )


def clear_access_cookie(response: Response) -> None:
    """
    Remove the access token cookie
    """
    response.delete_cookie(
        key = ACCESS_TOKEN_COOKIE_NAME,
        httponly = True,
        secure = settings.COOKIE_SECURE,
        samesite = "lax",
        path = "/",
    )
