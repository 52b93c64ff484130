"""Role schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .permission import PermissionRead


class RoleCreate(BaseModel):
    role_key: str = Field(..., min_length=1, max_length=100)
    permission_ids: list[int] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class RoleUpdate(BaseModel):
    role_key: str | None = Field(default=None, min_length=1, max_length=100)
    permission_ids: list[int] | None = None

    model_config = ConfigDict(extra="forbid")


class RolePermissionsUpdate(BaseModel):
    permission_ids: list[int]

    model_config = ConfigDict(extra="forbid")


class RoleRead(BaseModel):
    id: int
    role_key: str
    permissions: list[PermissionRead]

    model_config = ConfigDict(from_attributes=True)
