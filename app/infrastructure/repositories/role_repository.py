"""Persistence layer for roles data."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Permission, Role
from app.infrastructure.models import RoleModel, RolePermissionModel, UserModel

logger = logging.getLogger(__name__)


class RoleRepository:
    """Provide CRUD operations for roles and their ordered permission lists."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[Role]:
        query = (
            self.session.query(RoleModel)
            .order_by(RoleModel.id)
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, role_id: int) -> Role | None:
        model = self.session.get(RoleModel, role_id)
        return self._to_entity(model) if model else None

    def get_by_key(self, role_key: str) -> Role | None:
        model = self.session.query(RoleModel).filter_by(role_key=role_key).first()
        return self._to_entity(model) if model else None

    def create(self, role: Role) -> Role:
        model = RoleModel(role_key=role.role_key)
        model.permission_links = self._build_links(role.permission_ids)
        self.session.add(model)
        self._commit(role.role_key)
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, role: Role) -> Role:
        model = self.session.get(RoleModel, role.id)
        if not model:
            msg = f"Role with id {role.id} not found"
            raise ValueError(msg)
        model.role_key = role.role_key
        if role.permission_ids != self._linked_ids(model):
            model.permission_links = self._build_links(role.permission_ids)
        self.session.add(model)
        self._commit(role.role_key)
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, role_id: int) -> None:
        model = self.session.get(RoleModel, role_id)
        if not model:
            msg = f"Role with id {role_id} not found"
            raise ValueError(msg)

        # Users do not own their role; they survive without one.
        detached = self.session.execute(
            update(UserModel)
            .where(UserModel.role_id == role_id)
            .values(role_id=None)
            .execution_options(synchronize_session=False)
        ).rowcount
        role_key = model.role_key
        self.session.delete(model)
        self.session.commit()
        self.session.expire_all()
        logger.info("Deleted role %s (%s users detached)", role_key, detached)

    def _commit(self, role_key: str) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning("Rejected role write for key %r: %s", role_key, exc.orig)
            if self.get_by_key(role_key) is not None:
                msg = f"Role key '{role_key}' is already in use"
            else:
                msg = f"Role '{role_key}' could not be stored: {exc.orig}"
            raise ValueError(msg) from exc

    @staticmethod
    def _build_links(permission_ids: Sequence[int]) -> list[RolePermissionModel]:
        return [
            RolePermissionModel(permission_id=permission_id, position=position)
            for position, permission_id in enumerate(permission_ids)
        ]

    @staticmethod
    def _linked_ids(model: RoleModel) -> list[int]:
        return [link.permission_id for link in model.permission_links]

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(
            id=model.id,
            role_key=model.role_key,
            permissions=[
                Permission(id=link.permission.id, permission=link.permission.permission)
                for link in model.permission_links
            ],
        )


__all__ = ["RoleRepository"]
