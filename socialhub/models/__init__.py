"""
AngelaMos | 2025
__init__.py
"""

from socialhub.models.Base import (
    Base,
    UUIDMixin,
    TimestampMixin,
)
from socialhub.models.User import User
from socialhub.models.Follow import follows
from socialhub.models.PostLike import PostLike
from socialhub.models.Post import Post
from socialhub.models.Comment import Comment


__all__ = [
    "Base",
    "Comment",
    "Post",
    "PostLike",
    "TimestampMixin",
    "UUIDMixin",
    "User",
    "follows",
]
