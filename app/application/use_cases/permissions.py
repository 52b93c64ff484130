"""Use cases for managing permissions."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Permission
from app.infrastructure.repositories import PermissionRepository

logger = logging.getLogger(__name__)


def create_permission(session: Session, *, permission: str | None = None) -> Permission:
    """Store a permission. The name is optional and unconstrained."""

    created = PermissionRepository(session).create(Permission(id=None, permission=permission))
    logger.info("Created permission %s", created.id)
    return created


def get_permission(session: Session, permission_id: int) -> Permission:
    """Return the permission identified by ``permission_id`` or raise an error."""

    permission = PermissionRepository(session).get(permission_id)
    if permission is None:
        raise ValueError("Permission not found")
    return permission


def list_permissions(
    session: Session, *, skip: int = 0, limit: int = 100
) -> Sequence[Permission]:
    return PermissionRepository(session).list(skip=skip, limit=limit)


def update_permission(
    session: Session, *, permission_id: int, permission: str | None
) -> Permission:
    """Replace the permission name; ``None`` clears it."""

    repository = PermissionRepository(session)
    if repository.get(permission_id) is None:
        raise ValueError("Permission not found")
    return repository.update(Permission(id=permission_id, permission=permission))


def delete_permission(session: Session, permission_id: int) -> None:
    """Delete a permission and drop it from every role that lists it."""

    repository = PermissionRepository(session)
    if repository.get(permission_id) is None:
        raise ValueError("Permission not found")
    repository.delete(permission_id)


__all__ = [
    "create_permission",
    "delete_permission",
    "get_permission",
    "list_permissions",
    "update_permission",
]
