"""SQLAlchemy model for the user table."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class UserModel(Base):
    """Database representation of the system user."""

    __tablename__ = "user"
    __table_args__ = (
        CheckConstraint("length(name) > 0", name="ck_user_name_not_empty"),
        CheckConstraint("length(email) > 0", name="ck_user_email_not_empty"),
        CheckConstraint("length(password) > 0", name="ck_user_password_not_empty"),
    )

    id = Column(Integer, primary_key=True, index=True)
    role_id = Column(
        Integer,
        ForeignKey("role.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name = Column(String(100), nullable=False)
    # Not unique: duplicate addresses are accepted.
    email = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    role = relationship("RoleModel", lazy="joined")


__all__ = ["UserModel"]
