"""Persistence layer for user data."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.domain.entities import User
from app.infrastructure.models import UserModel
from app.infrastructure.repositories.role_repository import RoleRepository

logger = logging.getLogger(__name__)


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self, skip: int = 0, limit: int = 100, *, role_id: int | None = None
    ) -> Sequence[User]:
        query = self.session.query(UserModel).options(joinedload(UserModel.role))
        if role_id is not None:
            query = query.filter(UserModel.role_id == role_id)
        query = query.order_by(UserModel.id).offset(skip).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def list_by_email(self, email: str) -> Sequence[User]:
        """Return every user registered with ``email``; addresses are not unique."""

        query = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.email == email)
            .order_by(UserModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self._commit(user)
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self._commit(user)
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> None:
        model = self._get_model(id=user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _commit(self, user: User) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning("Rejected user write for %r: %s", user.email, exc.orig)
            msg = f"User could not be stored: {exc.orig}"
            raise ValueError(msg) from exc

    def _get_model(self, **filters) -> UserModel | None:
        query = self.session.query(UserModel).options(joinedload(UserModel.role))
        return query.filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.role_id = user.role.id if user.role is not None else None
        model.name = user.name
        model.email = user.email
        model.password = user.password

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            role=RoleRepository._to_entity(model.role) if model.role is not None else None,
        )


__all__ = ["UserRepository"]
