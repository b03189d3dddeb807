"""
ⒸAngelaMos | 2025
test_auth_flow.py
"""

import asyncio
from datetime import UTC, datetime, timedelta
from uuid import UUID

from sqlalchemy import select

from conftest import API, PASSWORD, auth_headers
from socialhub.config import settings
from socialhub.core.security import (
    create_access_token,
    create_password_reset_token,
    hash_token,
)
from socialhub.models import User
from socialhub.repositories.user import UserRepository


SIGNUP = {
    "username": "bob",
    "name": "Bob",
    "surname": "Builder",
    "email": "Bob@Example.com",
    "password": PASSWORD,
    "password_confirm": PASSWORD,
}


async def fetch_user(db_manager, user_id: str) -> User:
    async with db_manager.session() as session:
        result = await session.execute(
            select(User).where(User.id == UUID(user_id))
        )
        return result.scalars().one()


async def test_signup_logs_the_user_in(client):
    response = await client.post(f"{API}/auth/signup", json = SIGNUP)

    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["user"]["email"] == "bob@example.com"
    assert body["user"]["role"] == "user"
    assert "hashed_password" not in body["user"]

    cookie = response.headers["set-cookie"]
    assert cookie.startswith("jwt=")
    assert "HttpOnly" in cookie
    assert "samesite=lax" in cookie.lower()

    me = await client.get(f"{API}/auth/me", headers = auth_headers(body["token"]))
    assert me.status_code == 200


async def test_signup_validation(client, make_user):
    mismatch = await client.post(
        f"{API}/auth/signup",
        json = {**SIGNUP, "password_confirm": "Different123"},
    )
    assert mismatch.status_code == 400
    assert mismatch.json()["type"] == "ValidationError"
    assert "Passwords are not the same" in mismatch.json()["detail"]

    short = await client.post(
        f"{API}/auth/signup",
        json = {**SIGNUP, "password": "short", "password_confirm": "short"},
    )
    assert short.status_code == 400

    missing = await client.post(
        f"{API}/auth/signup",
        json = {"email": "x@example.com"}
    )
    assert missing.status_code == 400


async def test_duplicate_email_or_username_conflicts(client, make_user):
    await make_user("bob")

    same_email = await client.post(
        f"{API}/auth/signup",
        json = {**SIGNUP, "username": "robert"},
    )
    assert same_email.status_code == 409
    assert same_email.json()["type"] == "EmailAlreadyExists"

    same_username = await client.post(
        f"{API}/auth/signup",
        json = {**SIGNUP, "email": "other@example.com"},
    )
    assert same_username.status_code == 409
    assert same_username.json()["type"] == "UsernameAlreadyExists"


async def test_login(client, make_user):
    await make_user("carol")

    ok = await client.post(
        f"{API}/auth/login",
        json = {"email": "CAROL@example.com", "password": PASSWORD},
    )
    assert ok.status_code == 200
    assert ok.json()["user"]["username"] == "carol"
    assert ok.headers["set-cookie"].startswith("jwt=")

    wrong = await client.post(
        f"{API}/auth/login",
        json = {"email": "carol@example.com", "password": "Wrong12345"},
    )
    unknown = await client.post(
        f"{API}/auth/login",
        json = {"email": "nobody@example.com", "password": PASSWORD},
    )
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {
        "detail": "Incorrect email or password",
        "type": "InvalidCredentials",
    }

    missing = await client.post(
        f"{API}/auth/login",
        json = {"email": "carol@example.com"}
    )
    assert missing.status_code == 400


async def test_login_refused_for_deactivated_user(
    client,
    make_user,
    set_user_fields,
):
    user, _ = await make_user("dave")
    await set_user_fields(user["id"], is_active = False)

    response = await client.post(
        f"{API}/auth/login",
        json = {"email": "dave@example.com", "password": PASSWORD},
    )
    assert response.status_code == 401


async def test_logout_clears_cookie(client):
    response = await client.post(f"{API}/auth/logout")

    assert response.status_code == 204
    cookie = response.headers["set-cookie"]
    assert cookie.startswith("jwt=")
    assert "Max-Age=0" in cookie


async def test_forgot_password_unknown_email(client, mail):
    response = await client.post(
        f"{API}/auth/forgot-password",
        json = {"email": "ghost@example.com"},
    )

    assert response.status_code == 404
    assert mail.outbox == []


async def test_reset_token_is_stored_hashed(client, make_user, mail, db_manager):
    user, _ = await make_user("erin")

    response = await client.post(
        f"{API}/auth/forgot-password",
        json = {"email": "erin@example.com"},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Token sent to email!"}
    assert mail.outbox[-1].to == "erin@example.com"

    raw = mail.last_reset_token()
    stored = await fetch_user(db_manager, user["id"])
    assert stored.password_reset_token_hash == hash_token(raw)
    assert stored.password_reset_token_hash != raw
    expires_at = stored.password_reset_expires_at.replace(tzinfo = UTC)
    assert expires_at - datetime.now(UTC) <= timedelta(minutes = 10)


async def test_reset_password_is_single_use(client, make_user, mail, db_manager):
    user, _ = await make_user("frank")
    await client.post(
        f"{API}/auth/forgot-password",
        json = {"email": "frank@example.com"},
    )
    raw = mail.last_reset_token()
    issued_before_reset = create_access_token(
        UUID(user["id"]),
        now = datetime.now(UTC) - timedelta(seconds = 30),
    )
    new_password = {
        "password": "BrandNew789",
        "password_confirm": "BrandNew789",
    }

    reset = await client.patch(
        f"{API}/auth/reset-password/{raw}",
        json = new_password
    )
    assert reset.status_code == 200
    assert reset.json()["user"]["id"] == user["id"]
    assert reset.headers["set-cookie"].startswith("jwt=")

    stored = await fetch_user(db_manager, user["id"])
    assert stored.password_reset_token_hash is None
    assert stored.password_reset_expires_at is None
    assert stored.password_changed_at is not None

    again = await client.patch(
        f"{API}/auth/reset-password/{raw}",
        json = new_password
    )
    assert again.status_code == 400
    assert again.json()["detail"] == "Token is invalid or has expired"

    login = await client.post(
        f"{API}/auth/login",
        json = {"email": "frank@example.com", "password": "BrandNew789"},
    )
    assert login.status_code == 200

    fresh = await client.get(
        f"{API}/users/me",
        headers = auth_headers(reset.json()["token"])
    )
    assert fresh.status_code == 200

    stale = await client.get(
        f"{API}/users/me",
        headers = auth_headers(issued_before_reset)
    )
    assert stale.status_code == 401
    assert "recently changed password" in stale.json()["detail"]


async def test_expired_reset_token(client, make_user, mail, set_user_fields):
    user, _ = await make_user("gina")
    await client.post(
        f"{API}/auth/forgot-password",
        json = {"email": "gina@example.com"},
    )
    raw = mail.last_reset_token()
    await set_user_fields(
        user["id"],
        password_reset_expires_at = datetime.now(UTC) - timedelta(seconds = 1),
    )

    response = await client.patch(
        f"{API}/auth/reset-password/{raw}",
        json = {
            "password": "BrandNew789",
            "password_confirm": "BrandNew789"
        },
    )
    assert response.status_code == 400
    assert response.json()["type"] == "InvalidOrExpiredResetToken"


async def test_reset_password_confirmation_mismatch(client, make_user, mail):
    await make_user("hank")
    await client.post(
        f"{API}/auth/forgot-password",
        json = {"email": "hank@example.com"},
    )
    raw = mail.last_reset_token()

    response = await client.patch(
        f"{API}/auth/reset-password/{raw}",
        json = {
            "password": "BrandNew789",
            "password_confirm": "Other78901"
        },
    )
    assert response.status_code == 400

    still_valid = await client.patch(
        f"{API}/auth/reset-password/{raw}",
        json = {
            "password": "BrandNew789",
            "password_confirm": "BrandNew789"
        },
    )
    assert still_valid.status_code == 200


async def test_mail_failure_withdraws_reset_token(
    client,
    make_user,
    mail,
    db_manager,
):
    user, _ = await make_user("ivy")
    mail.fail = True

    response = await client.post(
        f"{API}/auth/forgot-password",
        json = {"email": "ivy@example.com"},
    )
    assert response.status_code == 500
    assert response.json()["type"] == "MailDeliveryError"

    stored = await fetch_user(db_manager, user["id"])
    assert stored.password_reset_token_hash is None
    assert stored.password_reset_expires_at is None


async def test_update_password_requires_current_password(client, make_user):
    _, token = await make_user("jack")

    wrong = await client.patch(
        f"{API}/auth/update-password",
        headers = auth_headers(token),
        json = {
            "current_password": "NotMyPassword1",
            "password": "BrandNew789",
            "password_confirm": "BrandNew789",
        },
    )
    assert wrong.status_code == 401
    assert wrong.json()["detail"] == "Your current password is wrong."

    mismatch = await client.patch(
        f"{API}/auth/update-password",
        headers = auth_headers(token),
        json = {
            "current_password": PASSWORD,
            "password": "BrandNew789",
            "password_confirm": "BrandNew000",
        },
    )
    assert mismatch.status_code == 400

    anonymous = await client.patch(
        f"{API}/auth/update-password",
        json = {
            "current_password": PASSWORD,
            "password": "BrandNew789",
            "password_confirm": "BrandNew789",
        },
    )
    assert anonymous.status_code == 401


async def test_concurrent_resets_with_one_token(client, make_user, mail):
    await make_user("kate")
    await client.post(
        f"{API}/auth/forgot-password",
        json = {"email": "kate@example.com"},
    )
    raw = mail.last_reset_token()
    payload = {
        "password": "BrandNew789",
        "password_confirm": "BrandNew789"
    }

    first, second = await asyncio.gather(
        client.patch(f"{API}/auth/reset-password/{raw}", json = payload),
        client.patch(f"{API}/auth/reset-password/{raw}", json = payload),
    )

    assert sorted([first.status_code, second.status_code]) == [200, 400]
    rejected = first if first.status_code == 400 else second
    assert rejected.json()["type"] == "InvalidOrExpiredResetToken"


async def test_reset_token_consumed_only_once(make_user, db_session):
    user, _ = await make_user("leo")
    stored = await UserRepository.get_by_id(db_session, UUID(user["id"]))
    _, token_hash, expires_at = create_password_reset_token()
    await UserRepository.set_password_reset_token(
        db_session,
        stored,
        token_hash,
        expires_at,
    )

    assert await UserRepository.consume_password_reset_token(
        db_session,
        stored.id,
        token_hash,
    ) is True
    assert await UserRepository.consume_password_reset_token(
        db_session,
        stored.id,
        token_hash,
    ) is False


async def test_reset_link_ignores_request_host(client, make_user, mail):
    await make_user("mia")

    response = await client.post(
        f"{API}/auth/forgot-password",
        headers = {"Host": "attacker.example"},
        json = {"email": "mia@example.com"},
    )

    assert response.status_code == 200
    body = mail.outbox[-1].body
    assert "attacker.example" not in body
    assert f"{settings.PUBLIC_BASE_URL}{API}/auth/reset-password/" in body
