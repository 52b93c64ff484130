"""Use case for deleting a user."""

import logging

from sqlalchemy.orm import Session

from app.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def delete_user(session: Session, user_id: int) -> None:
    """Delete the specified user from the system."""

    repository = UserRepository(session)
    if repository.get(user_id) is None:
        raise ValueError("User not found")
    repository.delete(user_id)
    logger.info("Deleted user %s", user_id)
