"""Use cases for managing users."""

from .create_user import create_user
from .delete_user import delete_user
from .get_user import get_user
from .list_users import list_users
from .update_user import update_user
from .validators import validate_new_user

__all__ = [
    "create_user",
    "delete_user",
    "get_user",
    "list_users",
    "update_user",
    "validate_new_user",
]
