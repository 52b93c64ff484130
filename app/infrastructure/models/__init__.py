"""ORM models used by the application infrastructure."""

from .permission import PermissionModel
from .role import RoleModel, RolePermissionModel
from .user import UserModel

__all__ = [
    "PermissionModel",
    "RoleModel",
    "RolePermissionModel",
    "UserModel",
]
