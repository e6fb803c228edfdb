"""Admin-only user management: list, create, update, soft delete and restore."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.errors import http_error
from app.api.routes.auth import require_admin
from app.core.database import get_db
from app.schemas.auth import RegisterRequest, UserListItem, UserUpdateRequest
from app.schemas.common import CreatedResponse, OkResponse
from app.services.errors import ServiceError
from app.services.users import create_user, list_users, set_user_active, update_user

router = APIRouter()


@router.get("", response_model=list[UserListItem])
def get_users(
    _admin: Annotated[int, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    include_inactive: Annotated[bool, Query(alias="includeInactive")] = False,
) -> list[UserListItem]:
    """List users ordered by id; deactivated users only with includeInactive=true."""
    return [
        UserListItem(
            id=u.id,
            username=u.username,
            full_name=u.full_name,
            role=u.role or "user",
            is_active=bool(u.is_active),
        )
        for u in list_users(db, include_inactive=include_inactive)
    ]


@router.post("", response_model=CreatedResponse)
def post_user(
    body: RegisterRequest,
    _admin: Annotated[int, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    try:
        user = create_user(db, body.full_name, body.username, body.password, body.role)
    except ServiceError as e:
        raise http_error(e) from e
    return CreatedResponse(id=user.id)


@router.put("/{user_id}", response_model=OkResponse)
def put_user(
    user_id: int,
    body: UserUpdateRequest,
    _admin: Annotated[int, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> OkResponse:
    """Change full name, username and/or role. Omitted fields keep their value."""
    try:
        update_user(
            db,
            user_id,
            full_name=body.full_name,
            username=body.username,
            role=body.role,
        )
    except ServiceError as e:
        raise http_error(e) from e
    return OkResponse()


@router.delete("/{user_id}", response_model=OkResponse)
def delete_user(
    user_id: int,
    _admin: Annotated[int, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> OkResponse:
    """Deactivate a user; the row is kept."""
    try:
        set_user_active(db, user_id, active=False)
    except ServiceError as e:
        raise http_error(e) from e
    return OkResponse()


@router.post("/{user_id}/restore", response_model=OkResponse)
def restore_user(
    user_id: int,
    _admin: Annotated[int, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> OkResponse:
    try:
        set_user_active(db, user_id, active=True)
    except ServiceError as e:
        raise http_error(e) from e
    return OkResponse()
