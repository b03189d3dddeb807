"""
ⒸAngelaMos | 2025
Follow.py
"""

from datetime import UTC, datetime

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Table,
    Uuid,
)

from socialhub.models.Base import Base


follows = Table(
    "follows",
    Base.metadata,
    Column(
        "follower_id",
        Uuid,
        ForeignKey("users.id",
                   ondelete = "CASCADE"),
        primary_key = True,
    ),
    Column(
        "following_id",
        Uuid,
        ForeignKey("users.id",
                   ondelete = "CASCADE"),
        primary_key = True,
        index = True,
    ),
    Column(
        "created_at",
        DateTime(timezone = True),
        default = lambda: datetime.now(UTC),
        nullable = False,
    ),
)
