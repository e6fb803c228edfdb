"""JWT login, registration and auth dependencies (get_current_user_id, require_admin)."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.api.errors import http_error
from app.core.database import get_db
from app.core.security import (
    ROLE_ADMIN,
    create_access_token,
    decode_access_token,
    user_id_from_claims,
)
from app.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from app.schemas.common import OkResponse
from app.services.errors import ServiceError
from app.services.users import authenticate_user, create_user, get_role

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("/register", response_model=OkResponse)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> OkResponse:
    """Create an account. Unknown roles are stored as 'user'."""
    try:
        create_user(db, body.full_name, body.username, body.password, body.role)
    except ServiceError as e:
        raise http_error(e) from e
    return OkResponse()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = authenticate_user(db, body.username, body.password)
    if user is None:
        raise _unauthorized("Invalid username or password.")
    token = create_access_token(user_id=user.id, role=user.role)
    return LoginResponse(role=user.role, token=token)


@router.post("/logout", response_model=OkResponse)
def logout() -> OkResponse:
    """Tokens are stateless; the client discards its token."""
    return OkResponse()


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> int:
    """Dependency: require valid Bearer JWT and return its uid. Raises 401 if missing or invalid."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
        return user_id_from_claims(payload)
    except jwt.PyJWTError as e:
        logger.info("Bearer token rejected: %s", type(e).__name__)
        raise _unauthorized("Invalid or expired token") from e


def require_admin(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> int:
    """
    Dependency: require an authenticated user whose stored role is 'admin'.

    The role is read from the database on every call, never from the token,
    so a demotion applies to tokens that were already issued. Raises 403.
    """
    role = get_role(db, user_id)
    if role is None or role.lower() != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user_id
