"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserListItem,
    UserUpdateRequest,
)
from app.schemas.chilaquiles import ChilaquilItem, ChilaquilPayload
from app.schemas.common import CamelModel, CreatedResponse, OkResponse
from app.schemas.health import HealthResponse

__all__ = [
    "CamelModel",
    "ChilaquilItem",
    "ChilaquilPayload",
    "CreatedResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "OkResponse",
    "RegisterRequest",
    "UserListItem",
    "UserUpdateRequest",
]
