"""
ⒸAngelaMos | 2025
enums.py
"""

from enum import Enum


class Environment(str, Enum):
    """
    Application environment
    """
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class UserRole(str, Enum):
    """
    Roles recognised by the role restriction gate
    """
    USER = "user"
    ADMIN = "admin"


class HealthStatus(str, Enum):
    """
    Health check status values
    """
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"
