"""
ⒸAngelaMos | 2025
test_session_resolver.py
"""

import asyncio
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid6 import uuid7

from conftest import API, PASSWORD, auth_headers
from socialhub.config import settings
from socialhub.core.security import create_access_token
from socialhub.repositories.user import UserRepository


async def test_missing_credentials(client):
    response = await client.get(f"{API}/users/me")

    assert response.status_code == 401
    assert response.json() == {
        "detail": "You are not logged in! Please log in to get access.",
        "type": "AuthenticationError",
    }


async def test_non_bearer_scheme_is_treated_as_missing(client, make_user):
    _, token = await make_user()
    response = await client.get(
        f"{API}/users/me",
        headers = {"Authorization": f"Basic {token}"},
    )

    assert response.status_code == 401
    assert "not logged in" in response.json()["detail"]


async def test_valid_token_resolves_user(client, make_user):
    user, token = await make_user()
    response = await client.get(f"{API}/users/me", headers = auth_headers(token))

    assert response.status_code == 200
    assert response.json()["id"] == user["id"]
    assert "hashed_password" not in response.json()


async def test_garbage_and_expired_tokens(client, make_user):
    user, _ = await make_user()

    garbage = await client.get(
        f"{API}/users/me",
        headers = auth_headers("abc.def.ghi")
    )
    assert garbage.status_code == 401
    assert garbage.json()["type"] == "AuthenticationError"
    assert "Invalid token" in garbage.json()["detail"]

    stale = create_access_token(
        UUID(user["id"]),
        now = datetime.now(UTC) -
        timedelta(minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES + 1),
    )
    expired = await client.get(f"{API}/users/me", headers = auth_headers(stale))
    assert expired.status_code == 401
    assert expired.json()["type"] == "AuthenticationError"
    assert "expired" in expired.json()["detail"]


async def test_token_for_unknown_subject(client):
    token = create_access_token(uuid7())
    response = await client.get(f"{API}/users/me", headers = auth_headers(token))

    assert response.status_code == 401
    assert "no longer exist" in response.json()["detail"]


async def test_deactivated_user_rejected(client, make_user, set_user_fields):
    user, token = await make_user()
    await set_user_fields(user["id"], is_active = False)

    response = await client.get(f"{API}/users/me", headers = auth_headers(token))

    assert response.status_code == 401
    assert "no longer exist" in response.json()["detail"]


async def test_token_older_than_password_change_rejected(client, make_user):
    user, _ = await make_user()
    old_token = create_access_token(
        UUID(user["id"]),
        now = datetime.now(UTC) - timedelta(seconds = 30),
    )

    changed = await client.patch(
        f"{API}/auth/update-password",
        headers = auth_headers(old_token),
        json = {
            "current_password": PASSWORD,
            "password": "NewPassword456",
            "password_confirm": "NewPassword456",
        },
    )
    assert changed.status_code == 200
    new_token = changed.json()["token"]

    rejected = await client.get(
        f"{API}/users/me",
        headers = auth_headers(old_token)
    )
    assert rejected.status_code == 401
    assert "recently changed password" in rejected.json()["detail"]

    accepted = await client.get(
        f"{API}/users/me",
        headers = auth_headers(new_token)
    )
    assert accepted.status_code == 200


async def test_password_change_timestamp_has_safety_margin(
    client,
    make_user,
    db_session,
):
    user, token = await make_user()
    before = datetime.now(UTC)

    await client.patch(
        f"{API}/auth/update-password",
        headers = auth_headers(token),
        json = {
            "current_password": PASSWORD,
            "password": "NewPassword456",
            "password_confirm": "NewPassword456",
        },
    )

    after = datetime.now(UTC)

    stored = await UserRepository.get_by_id(db_session, UUID(user["id"]))
    changed_at = stored.password_changed_at.replace(tzinfo = UTC)
    assert before - timedelta(seconds = 1) <= changed_at
    assert changed_at <= after - timedelta(seconds = 1)


async def test_slow_identity_lookup_is_unavailable(
    client,
    make_user,
    monkeypatch,
):
    _, token = await make_user()

    async def slow_lookup(*args, **kwargs):
        await asyncio.sleep(1)

    monkeypatch.setattr(settings, "AUTH_OPERATION_TIMEOUT_SECONDS", 0.05)
    monkeypatch.setattr(UserRepository, "get_by_id", slow_lookup)

    response = await client.get(f"{API}/users/me", headers = auth_headers(token))

    assert response.status_code == 503
    assert response.json()["type"] == "ServiceUnavailable"


async def test_role_gate(client, make_user, make_admin):
    _, user_token = await make_user()
    _, admin_token = await make_admin()

    denied = await client.get(
        f"{API}/admin/users",
        headers = auth_headers(user_token)
    )
    assert denied.status_code == 403
    assert denied.json()["detail"] == (
        "You do not have permission to perform this action"
    )

    allowed = await client.get(
        f"{API}/admin/users",
        headers = auth_headers(admin_token)
    )
    assert allowed.status_code == 200
    assert allowed.json()["total"] == 2
