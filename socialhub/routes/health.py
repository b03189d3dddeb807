"""
ⒸAngelaMos | 2025
health.py
"""

from fastapi import (
    APIRouter,
    status,
)
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from socialhub.config import (
    settings,
    HealthStatus,
)
from socialhub.core.database import sessionmanager
from socialhub.core.logging import get_logger
from socialhub.schemas.common import (
    HealthDetailedResponse,
    HealthResponse,
)


logger = get_logger(__name__)

router = APIRouter(tags = ["health"])


@router.get(
    "/health",
    response_model = HealthResponse,
    status_code = status.HTTP_200_OK,
)
async def health_check() -> HealthResponse:
    """
    Basic health check
    """
    return HealthResponse(
        status = HealthStatus.HEALTHY,
        environment = settings.ENVIRONMENT.value,
        version = settings.APP_VERSION,
    )


@router.get(
    "/health/detailed",
    response_model = HealthDetailedResponse,
    status_code = status.HTTP_200_OK,
)
async def health_check_detailed() -> HealthDetailedResponse:
    """
    Detailed health check including database connectivity
    """
    try:
        async with sessionmanager.connect() as conn:
            await conn.execute(text("SELECT 1"))
        db_status = HealthStatus.HEALTHY
    except (SQLAlchemyError, OSError, RuntimeError) as e:
        logger.warning("database_unreachable", error = str(e))
        db_status = HealthStatus.UNHEALTHY

    overall = (
        HealthStatus.HEALTHY
        if db_status == HealthStatus.HEALTHY else HealthStatus.DEGRADED
    )

    return HealthDetailedResponse(
        status = overall,
        environment = settings.ENVIRONMENT.value,
        version = settings.APP_VERSION,
        database = db_status,
    )
