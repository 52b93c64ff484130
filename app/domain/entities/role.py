"""Domain entity representing a user role."""

from dataclasses import dataclass, field

from .permission import Permission


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int | None
    role_key: str
    permissions: list[Permission] = field(default_factory=list)

    @property
    def permission_ids(self) -> list[int]:
        """Ids of the listed permissions, in list order."""

        return [permission.id for permission in self.permissions if permission.id is not None]


__all__ = ["Role"]
