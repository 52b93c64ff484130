"""Use cases for managing roles and their permission lists."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import Permission, Role
from app.infrastructure.repositories import PermissionRepository, RoleRepository

logger = logging.getLogger(__name__)


def _ensure_role_key(role_key: str | None) -> str:
    """Return ``role_key`` as given; keys differing only in whitespace are distinct."""

    if role_key is None:
        raise ValueError("The role key is required")
    if not role_key.strip():
        raise ValueError("The role key must not be empty")
    return role_key


def _resolve_permissions(session: Session, permission_ids: Iterable[int]) -> list[Permission]:
    """Return the permissions for ``permission_ids`` in the requested order.

    Every id must exist; duplicates are kept.
    """

    requested = [int(permission_id) for permission_id in permission_ids]
    repository = PermissionRepository(session)
    found = repository.get_map_by_ids(requested)
    missing = [permission_id for permission_id in requested if permission_id not in found]
    if missing:
        unique_missing = sorted(set(missing))
        raise ValueError(
            "Permissions not found: " + ", ".join(str(item) for item in unique_missing)
        )
    return [found[permission_id] for permission_id in requested]


def create_role(
    session: Session,
    *,
    role_key: str,
    permission_ids: Sequence[int] = (),
) -> Role:
    """Create a role with a unique key and an ordered permission list."""

    role_key = _ensure_role_key(role_key)
    repository = RoleRepository(session)
    if repository.get_by_key(role_key) is not None:
        raise ValueError(f"Role key '{role_key}' is already in use")

    role = Role(
        id=None,
        role_key=role_key,
        permissions=_resolve_permissions(session, permission_ids),
    )
    created = repository.create(role)
    logger.info("Created role %s", created.role_key)
    return created


def get_role(session: Session, role_id: int) -> Role:
    """Return the role identified by ``role_id`` or raise an error."""

    role = RoleRepository(session).get(role_id)
    if role is None:
        raise ValueError("Role not found")
    return role


def get_role_by_key(session: Session, role_key: str) -> Role:
    role = RoleRepository(session).get_by_key(role_key)
    if role is None:
        raise ValueError("Role not found")
    return role


def list_roles(session: Session, *, skip: int = 0, limit: int = 100) -> Sequence[Role]:
    return RoleRepository(session).list(skip=skip, limit=limit)


def update_role(
    session: Session,
    *,
    role_id: int,
    role_key: str | None = None,
    permission_ids: Sequence[int] | None = None,
) -> Role:
    """Rename a role and/or replace its permission list.

    ``None`` leaves the corresponding value unchanged.
    """

    repository = RoleRepository(session)
    current_role = repository.get(role_id)
    if current_role is None:
        raise ValueError("Role not found")

    new_key = current_role.role_key
    if role_key is not None:
        new_key = _ensure_role_key(role_key)
        if new_key != current_role.role_key:
            existing = repository.get_by_key(new_key)
            if existing is not None and existing.id != role_id:
                raise ValueError(f"Role key '{new_key}' is already in use")

    new_permissions = current_role.permissions
    if permission_ids is not None:
        new_permissions = _resolve_permissions(session, permission_ids)

    updated_role = replace(current_role, role_key=new_key, permissions=new_permissions)
    return repository.update(updated_role)


def set_role_permissions(
    session: Session, *, role_id: int, permission_ids: Sequence[int]
) -> Role:
    """Replace the ordered permission list of a role."""

    return update_role(session, role_id=role_id, permission_ids=permission_ids)


def delete_role(session: Session, role_id: int) -> None:
    """Delete a role. Users holding it keep existing without a role."""

    repository = RoleRepository(session)
    if repository.get(role_id) is None:
        raise ValueError("Role not found")
    repository.delete(role_id)


__all__ = [
    "create_role",
    "delete_role",
    "get_role",
    "get_role_by_key",
    "list_roles",
    "set_role_permissions",
    "update_role",
]
