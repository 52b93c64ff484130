"""Aggregate application use cases."""

from .permissions import (
    create_permission,
    delete_permission,
    get_permission,
    list_permissions,
    update_permission,
)
from .roles import (
    create_role,
    delete_role,
    get_role,
    get_role_by_key,
    list_roles,
    set_role_permissions,
    update_role,
)
from .users import create_user, delete_user, get_user, list_users, update_user

__all__ = [
    "create_permission",
    "create_role",
    "create_user",
    "delete_permission",
    "delete_role",
    "delete_user",
    "get_permission",
    "get_role",
    "get_role_by_key",
    "get_user",
    "list_permissions",
    "list_roles",
    "list_users",
    "set_role_permissions",
    "update_permission",
    "update_role",
    "update_user",
]
