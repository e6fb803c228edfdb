"""Menu item endpoints. Any authenticated user may read and modify items."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.errors import http_error
from app.api.routes.auth import get_current_user_id
from app.core.database import get_db
from app.models import Chilaquil
from app.models.base import fits_int_column
from app.schemas.chilaquiles import ChilaquilItem, ChilaquilPayload
from app.schemas.common import CreatedResponse, OkResponse
from app.services.chilaquiles import (
    DEFAULT_PAGE_SIZE,
    create_chilaquil,
    get_chilaquil,
    list_chilaquiles,
    set_chilaquil_active,
    update_chilaquil,
)
from app.services.errors import ServiceError

router = APIRouter()


def _to_item(row: Chilaquil) -> ChilaquilItem:
    return ChilaquilItem(
        id=row.id,
        name=row.name,
        salsa_type=row.salsa_type,
        protein=row.protein,
        spiciness=row.spiciness,
        price=row.price,
        created_at=row.created_at,
        is_active=bool(row.is_active),
    )


def _parse_spiciness(raw: str | None) -> int | None:
    """Numeric filter value, or None when absent, not an integer or outside the column range."""
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if fits_int_column(value) else None


@router.get("", response_model=list[ChilaquilItem])
def get_chilaquiles(
    _user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
    salsa_type: Annotated[str | None, Query(alias="salsaType")] = None,
    protein: str | None = None,
    spiciness: str | None = None,
    include_inactive: Annotated[bool, Query(alias="includeInactive")] = False,
    page: int = 1,
    page_size: Annotated[int, Query(alias="pageSize")] = DEFAULT_PAGE_SIZE,
) -> list[ChilaquilItem]:
    """
    Paginated list ordered by id.

    salsaType, protein and spiciness are equality filters; a non-numeric
    spiciness is ignored. Deactivated items appear only with includeInactive=true.
    """
    rows = list_chilaquiles(
        db,
        salsa_type=salsa_type,
        protein=protein,
        spiciness=_parse_spiciness(spiciness),
        include_inactive=include_inactive,
        page=page,
        page_size=page_size,
    )
    return [_to_item(r) for r in rows]


@router.get("/{item_id}", response_model=ChilaquilItem)
def get_chilaquiles_item(
    item_id: int,
    _user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
    include_inactive: Annotated[bool, Query(alias="includeInactive")] = False,
) -> ChilaquilItem:
    row = get_chilaquil(db, item_id, include_inactive=include_inactive)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chilaquiles not found")
    return _to_item(row)


@router.post("", response_model=CreatedResponse)
def post_chilaquiles(
    body: ChilaquilPayload,
    _user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Create a menu item; name, salsaType and protein must be non-blank."""
    try:
        new_id = create_chilaquil(db, body)
    except ServiceError as e:
        raise http_error(e) from e
    return CreatedResponse(id=new_id)


@router.put("/{item_id}", response_model=OkResponse)
def put_chilaquiles(
    item_id: int,
    body: ChilaquilPayload,
    _user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> OkResponse:
    try:
        update_chilaquil(db, item_id, body)
    except ServiceError as e:
        raise http_error(e) from e
    return OkResponse()


@router.delete("/{item_id}", response_model=OkResponse)
def delete_chilaquiles(
    item_id: int,
    _user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> OkResponse:
    """Soft delete: the item is hidden from default listings but keeps its id."""
    try:
        set_chilaquil_active(db, item_id, active=False)
    except ServiceError as e:
        raise http_error(e) from e
    return OkResponse()


@router.post("/{item_id}/restore", response_model=OkResponse)
def restore_chilaquiles(
    item_id: int,
    _user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> OkResponse:
    try:
        set_chilaquil_active(db, item_id, active=True)
    except ServiceError as e:
        raise http_error(e) from e
    return OkResponse()
