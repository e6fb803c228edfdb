"""SQLAlchemy declarative Base with deterministic constraint names for migrations."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for the users and chilaquiles tables."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# Range of the 32-bit Integer columns (ids, spiciness).
INT_COLUMN_MIN = -(2**31)
INT_COLUMN_MAX = 2**31 - 1


def fits_int_column(value: int) -> bool:
    """True when value can be bound against a 32-bit Integer column."""
    return INT_COLUMN_MIN <= value <= INT_COLUMN_MAX
