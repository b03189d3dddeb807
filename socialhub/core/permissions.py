"""
ⒸAngelaMos | 2025
permissions.py
"""

from typing import Any
from uuid import UUID

from socialhub.core.enums import UserRole
from socialhub.core.exceptions import ForbiddenError


def normalize_owner_id(owner: Any) -> str:
    """
    Reduce a bare id or a loaded object exposing .id to a comparable string
    """
    if isinstance(owner, UUID):
        return str(owner)
    if isinstance(owner, str):
        try:
            return str(UUID(owner))
        except ValueError:
            return owner
    owner_id = getattr(owner, "id", None)
    if owner_id is None:
        raise TypeError(f"Cannot resolve an owner id from {owner!r}")
    return normalize_owner_id(owner_id)


def can_mutate(owner: Any, acting_user: Any) -> bool:
    """
    Owners may change their own resources, admins may change anything
    """
    if acting_user.role == UserRole.ADMIN:
        return True
    return normalize_owner_id(owner) == normalize_owner_id(acting_user)


def ensure_can_mutate(
    owner: Any,
    acting_user: Any,
    message: str = "You do not have permission to perform this action",
) -> None:
    """
    Raise ForbiddenError unless can_mutate allows the change
    """
    if not can_mutate(owner, acting_user):
        raise ForbiddenError(message)
