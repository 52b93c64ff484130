from .permission import PermissionCreate, PermissionRead, PermissionUpdate
from .role import RoleCreate, RolePermissionsUpdate, RoleRead, RoleUpdate
from .user import UserCreate, UserRead, UserUpdate

__all__ = [
    "PermissionCreate",
    "PermissionRead",
    "PermissionUpdate",
    "RoleCreate",
    "RolePermissionsUpdate",
    "RoleRead",
    "RoleUpdate",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
