"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Boolean, Column, Integer, String, true

from app.models.base import Base


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user'. Deleting a user clears is_active; rows are never removed.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False, default="")
    role = Column(String(32), nullable=False, default="user")
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
