"""Domain entities exposed by the application."""

from .permission import Permission
from .role import Role
from .user import User

__all__ = [
    "Permission",
    "Role",
    "User",
]
