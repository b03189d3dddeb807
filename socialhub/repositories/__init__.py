"""
ⒸAngelaMos | 2025
__init__.py
"""

from socialhub.repositories.base import BaseRepository
from socialhub.repositories.comment import CommentRepository
from socialhub.repositories.follow import FollowRepository
from socialhub.repositories.post import PostRepository
from socialhub.repositories.user import UserRepository


__all__ = [
    "BaseRepository",
    "CommentRepository",
    "FollowRepository",
    "PostRepository",
    "UserRepository",
]
