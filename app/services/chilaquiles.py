"""Menu item (chilaquiles) queries and mutations with soft delete."""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from app.models import Chilaquil
from app.models.base import INT_COLUMN_MAX, fits_int_column
from app.schemas.chilaquiles import ChilaquilPayload
from app.services.errors import InvalidInputError, NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = INT_COLUMN_MAX
# OFFSET is bound as a signed 64-bit integer.
MAX_OFFSET = 2**63 - 1
# Largest magnitude the Numeric(10, 2) price column stores.
MAX_PRICE = Decimal("99999999.99")


def page_bounds(page: int | None, page_size: int | None) -> tuple[int, int]:
    """
    Return (offset, limit). page below 1 means 1; page_size below 1 means the default.

    page_size is capped at MAX_PAGE_SIZE and the offset at MAX_OFFSET.
    """
    page = page if page is not None and page > 0 else 1
    page_size = page_size if page_size is not None and page_size > 0 else DEFAULT_PAGE_SIZE
    page_size = min(page_size, MAX_PAGE_SIZE)
    return min((page - 1) * page_size, MAX_OFFSET), page_size


def _require_fields(payload: ChilaquilPayload) -> None:
    if not (payload.name.strip() and payload.salsa_type.strip() and payload.protein.strip()):
        raise InvalidInputError("name, salsaType and protein are required")
    if abs(payload.price) > MAX_PRICE:
        raise InvalidInputError("price is out of range")


def list_chilaquiles(
    db: Session,
    salsa_type: str | None = None,
    protein: str | None = None,
    spiciness: int | None = None,
    include_inactive: bool = False,
    page: int | None = 1,
    page_size: int | None = DEFAULT_PAGE_SIZE,
) -> list[Chilaquil]:
    """
    Page of menu items ordered by id, filtered by equality on the given fields.

    Empty string filters are ignored. Inactive items are excluded unless
    include_inactive is set.
    """
    query = db.query(Chilaquil)
    if not include_inactive:
        query = query.filter(Chilaquil.is_active.is_(True))
    if salsa_type:
        query = query.filter(Chilaquil.salsa_type == salsa_type)
    if protein:
        query = query.filter(Chilaquil.protein == protein)
    if spiciness is not None:
        query = query.filter(Chilaquil.spiciness == spiciness)
    offset, limit = page_bounds(page, page_size)
    return query.order_by(Chilaquil.id).offset(offset).limit(limit).all()


def get_chilaquil(
    db: Session, item_id: int, include_inactive: bool = False
) -> Chilaquil | None:
    if not fits_int_column(item_id):
        return None
    query = db.query(Chilaquil).filter(Chilaquil.id == item_id)
    if not include_inactive:
        query = query.filter(Chilaquil.is_active.is_(True))
    return query.first()


def create_chilaquil(db: Session, payload: ChilaquilPayload) -> int:
    """Insert an active menu item and return its id. Nothing is written when validation fails."""
    _require_fields(payload)
    row = Chilaquil(
        name=payload.name,
        salsa_type=payload.salsa_type,
        protein=payload.protein,
        spiciness=payload.spiciness,
        price=payload.price,
        is_active=True,
    )
    db.add(row)
    db.flush()
    if row.id is None:
        db.rollback()
        raise PersistenceError("Insert did not return an id")
    new_id = row.id
    db.commit()
    logger.info("Created chilaquiles id=%s name=%s", new_id, payload.name)
    return new_id


def update_chilaquil(db: Session, item_id: int, payload: ChilaquilPayload) -> None:
    """Replace all editable fields of a menu item."""
    _require_fields(payload)
    if not fits_int_column(item_id):
        raise NotFoundError("Chilaquiles not found")
    affected = (
        db.query(Chilaquil)
        .filter(Chilaquil.id == item_id)
        .update(
            {
                "name": payload.name,
                "salsa_type": payload.salsa_type,
                "protein": payload.protein,
                "spiciness": payload.spiciness,
                "price": payload.price,
            },
            synchronize_session=False,
        )
    )
    if affected != 1:
        db.rollback()
        raise NotFoundError("Chilaquiles not found")
    db.commit()


def set_chilaquil_active(db: Session, item_id: int, active: bool) -> None:
    """Soft delete (active=False) or restore (active=True) a menu item."""
    if not fits_int_column(item_id):
        raise NotFoundError("Chilaquiles not found")
    affected = (
        db.query(Chilaquil)
        .filter(Chilaquil.id == item_id)
        .update({"is_active": active}, synchronize_session=False)
    )
    if affected != 1:
        db.rollback()
        raise NotFoundError("Chilaquiles not found")
    db.commit()
    logger.info("%s chilaquiles id=%s", "Restored" if active else "Deactivated", item_id)
