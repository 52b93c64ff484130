"""SQLAlchemy model for permissions."""

from sqlalchemy import Column, Integer, String

from app.infrastructure.database import Base


class PermissionModel(Base):
    """Database representation of a single permission entry."""

    __tablename__ = "permission"

    id = Column(Integer, primary_key=True, index=True)
    permission = Column(String(255), nullable=True)


__all__ = ["PermissionModel"]
