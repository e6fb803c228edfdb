"""Profile of the caller identified by the bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.routes.auth import get_current_user_id
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.services.users import get_user

router = APIRouter()


@router.get("", response_model=CurrentUser)
def get_me(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    user = get_user(db, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return CurrentUser(
        id=user.id,
        username=user.username,
        full_name=user.full_name,
        role=user.role or "user",
    )
