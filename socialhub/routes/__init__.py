"""
AngelaMos | 2025
__init__.py
"""

from socialhub.routes.admin import router as admin_router
from socialhub.routes.auth import router as auth_router
from socialhub.routes.comment import router as comment_router
from socialhub.routes.health import router as health_router
from socialhub.routes.post import router as post_router
from socialhub.routes.user import router as user_router


__all__ = [
    "admin_router",
    "auth_router",
    "comment_router",
    "health_router",
    "post_router",
    "user_router",
]
