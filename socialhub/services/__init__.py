"""
AngelaMos | 2025
__init__.py
"""

from socialhub.services.auth import AuthService
from socialhub.services.comment import CommentService
from socialhub.services.mail import MailService
from socialhub.services.post import PostService
from socialhub.services.user import UserService


__all__ = [
    "AuthService",
    "CommentService",
    "MailService",
    "PostService",
    "UserService",
]
