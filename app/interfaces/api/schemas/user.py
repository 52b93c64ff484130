"""User schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .role import RoleRead


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)
    role_id: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(extra="forbid")


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=1, max_length=255)
    password: str | None = Field(default=None, min_length=1, max_length=255)
    role_id: int | None = Field(default=None, ge=1)
    clear_role: bool = False

    model_config = ConfigDict(extra="forbid")


class UserRead(BaseModel):
    """Public view of a user; the password hash is never exposed."""

    id: int
    name: str
    email: str
    role: RoleRead | None

    model_config = ConfigDict(from_attributes=True)
