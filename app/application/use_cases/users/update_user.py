"""Use case for updating user information."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import RoleRepository, UserRepository
from app.infrastructure.security import get_password_hash

from .validators import ensure_not_blank


def update_user(
    session: Session,
    *,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
    password: str | None = None,
    role_id: int | None = None,
    clear_role: bool = False,
    hash_rounds: int | None = None,
) -> User:
    """Update the provided user with the new values.

    ``None`` leaves a field unchanged. ``clear_role`` removes the role
    reference and cannot be combined with ``role_id``.
    """

    if clear_role and role_id is not None:
        raise ValueError("Cannot assign and clear the role at the same time")

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise ValueError("User not found")

    new_role = current_user.role
    if clear_role:
        new_role = None
    elif role_id is not None and (new_role is None or role_id != new_role.id):
        new_role = RoleRepository(session).get(role_id)
        if new_role is None:
            raise ValueError("Role not found")

    updated_user = replace(
        current_user,
        name=ensure_not_blank(name, "name") if name is not None else current_user.name,
        email=ensure_not_blank(email, "email") if email is not None else current_user.email,
        role=new_role,
    )

    if password is not None:
        hashed_password = get_password_hash(
            ensure_not_blank(password, "password"), rounds=hash_rounds
        )
        updated_user = replace(updated_user, password=hashed_password)

    return repository.update(updated_user)
