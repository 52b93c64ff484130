"""Domain entity representing a permission."""

from dataclasses import dataclass


@dataclass
class Permission:
    """A single named permission. The name itself is optional."""

    id: int | None
    permission: str | None = None


__all__ = ["Permission"]
