"""
ⒸAngelaMos | 2025
test_app.py
"""

import pytest
from pydantic import ValidationError

from socialhub.config import Settings, settings


async def test_root_reports_app_info(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == settings.APP_NAME
    assert response.json()["version"] == settings.APP_VERSION


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_request_id_is_echoed(client):
    response = await client.get("/health", headers = {"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"

    generated = await client.get("/health")
    assert len(generated.headers["X-Request-ID"]) == 32


def test_production_requires_https_public_base_url():
    production = {
        "ENVIRONMENT": "production",
        "COOKIE_SECURE": True,
        "CORS_ORIGINS": ["https://app.socialhub.io"],
    }

    with pytest.raises(ValidationError, match = "PUBLIC_BASE_URL"):
        Settings(**production)
    with pytest.raises(ValidationError, match = "PUBLIC_BASE_URL"):
        Settings(**production, PUBLIC_BASE_URL = "http://api.socialhub.io")

    configured = Settings(
        **production,
        PUBLIC_BASE_URL = "https://api.socialhub.io",
    )
    assert configured.PUBLIC_BASE_URL == "https://api.socialhub.io"
