"""Domain entity representing a user."""

from dataclasses import dataclass

from .role import Role


@dataclass
class User:
    """Core attributes describing an application user.

    ``password`` holds the hashed value, never the plain text.
    """

    id: int | None
    name: str
    email: str
    password: str
    role: Role | None = None


__all__ = ["User"]
