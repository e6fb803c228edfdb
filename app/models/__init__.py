"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.chilaquil import Chilaquil
from app.models.user import User

__all__ = ["Base", "Chilaquil", "User"]
