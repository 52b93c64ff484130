"""Permission schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PermissionCreate(BaseModel):
    permission: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(extra="forbid")


class PermissionUpdate(PermissionCreate):
    pass


class PermissionRead(BaseModel):
    id: int
    permission: str | None

    model_config = ConfigDict(from_attributes=True)
