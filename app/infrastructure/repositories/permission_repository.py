"""Persistence layer for permission data."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Permission
from app.infrastructure.models import PermissionModel, RolePermissionModel

logger = logging.getLogger(__name__)


class PermissionRepository:
    """Provide CRUD operations for permission entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[Permission]:
        query = (
            self.session.query(PermissionModel)
            .order_by(PermissionModel.id)
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, permission_id: int) -> Permission | None:
        model = self.session.get(PermissionModel, permission_id)
        return self._to_entity(model) if model else None

    def get_map_by_ids(self, permission_ids: Iterable[int]) -> dict[int, Permission]:
        unique_ids = {int(permission_id) for permission_id in permission_ids}
        if not unique_ids:
            return {}
        query = self.session.query(PermissionModel).filter(
            PermissionModel.id.in_(unique_ids)
        )
        return {model.id: self._to_entity(model) for model in query.all()}

    def create(self, permission: Permission) -> Permission:
        model = PermissionModel(permission=permission.permission)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, permission: Permission) -> Permission:
        model = self.session.get(PermissionModel, permission.id)
        if not model:
            msg = f"Permission with id {permission.id} not found"
            raise ValueError(msg)
        model.permission = permission.permission
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, permission_id: int) -> None:
        model = self.session.get(PermissionModel, permission_id)
        if not model:
            msg = f"Permission with id {permission_id} not found"
            raise ValueError(msg)

        # Drop the permission from every role list; remaining entries keep their order.
        removed = (
            self.session.query(RolePermissionModel)
            .filter(RolePermissionModel.permission_id == permission_id)
            .delete(synchronize_session=False)
        )
        self.session.delete(model)
        self.session.commit()
        # Loaded roles may still hold the removed entries.
        self.session.expire_all()
        if removed:
            logger.info(
                "Removed permission %s from %s role list entries", permission_id, removed
            )

    @staticmethod
    def _to_entity(model: PermissionModel) -> Permission:
        return Permission(id=model.id, permission=model.permission)


__all__ = ["PermissionRepository"]
