"""ORM model for menu items stored in the chilaquiles table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, func, true

from app.models.base import Base


class Chilaquil(Base):
    """
    One chilaquiles dish on the menu.

    Column names salsaType and createdAt match the existing schema.
    """

    __tablename__ = "chilaquiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    salsa_type = Column("salsaType", String(100), nullable=False, index=True)
    protein = Column(String(100), nullable=False, index=True)
    spiciness = Column(Integer, nullable=False, default=0)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    created_at = Column(
        "createdAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
