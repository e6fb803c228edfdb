"""Unauthenticated health check used by the UI and load balancers."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Report the environment, database dialect and whether SELECT 1 succeeds."""
    return HealthResponse(
        environment=settings.APP_ENV,
        driver=db.get_bind().dialect.name,
        database="connected" if check_db_connected(db) else "disconnected",
    )
