"""SQLAlchemy models for roles and their ordered permission lists."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class RoleModel(Base):
    """Database representation of the system roles."""

    __tablename__ = "role"
    __table_args__ = (
        CheckConstraint("length(role_key) > 0", name="ck_role_role_key_not_empty"),
    )

    id = Column(Integer, primary_key=True, index=True)
    role_key = Column(String(100), nullable=False, unique=True)
    permission_links = relationship(
        "RolePermissionModel",
        back_populates="role",
        order_by="RolePermissionModel.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )


class RolePermissionModel(Base):
    """One entry of a role's permission list.

    ``position`` keeps the list order. A permission may be listed more than
    once, so entries carry their own primary key.
    """

    __tablename__ = "role_permission"

    id = Column(Integer, primary_key=True)
    role_id = Column(
        Integer,
        ForeignKey("role.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    permission_id = Column(
        Integer,
        ForeignKey("permission.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(Integer, nullable=False)
    role = relationship("RoleModel", back_populates="permission_links")
    permission = relationship("PermissionModel", lazy="joined")


__all__ = ["RoleModel", "RolePermissionModel"]
