"""Use case for creating users."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import RoleRepository, UserRepository
from app.infrastructure.security import get_password_hash

from .validators import validate_new_user

logger = logging.getLogger(__name__)


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_id: int | None = None,
    hash_rounds: int | None = None,
) -> User:
    """Create a new user, hashing the password and checking the role reference."""

    validate_new_user(name, email, password)

    role = None
    if role_id is not None:
        role = RoleRepository(session).get(role_id)
        if role is None:
            raise ValueError("Role not found")

    user = User(
        id=None,
        name=name,
        email=email,
        password=get_password_hash(password, rounds=hash_rounds),
        role=role,
    )
    created = UserRepository(session).create(user)
    logger.info("Created user %s", created.id)
    return created
