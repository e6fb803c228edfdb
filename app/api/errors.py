"""Translate service-layer errors into HTTP exceptions."""

from fastapi import HTTPException, status

from app.services.errors import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    ServiceError,
)

_STATUS_BY_ERROR: dict[type[ServiceError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def http_error(err: ServiceError) -> HTTPException:
    """HTTPException for err; unknown service errors map to 500."""
    code = _STATUS_BY_ERROR.get(type(err), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=code, detail=err.message)
