"""Request/response schemas for auth, profile and user administration endpoints."""

from typing import Any

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, coerce_text


class RegisterRequest(CamelModel):
    """Self-registration (also used by admins creating accounts)."""

    full_name: str = Field(default="", max_length=255, description="Display name")
    username: str = Field(default="", max_length=255, description="Unique login name")
    password: str = Field(default="", description="Plain-text password")
    role: str | None = Field(default=None, description="'admin' or 'user'; anything else means 'user'")

    @field_validator("full_name", "username", "password", mode="before")
    @classmethod
    def _as_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("role", mode="before")
    @classmethod
    def _role_as_text(cls, v: Any) -> str | None:
        return None if v is None else coerce_text(v)


class LoginRequest(CamelModel):
    """Credentials for login."""

    username: str = Field(default="", description="Username")
    password: str = Field(default="", description="Password")

    @field_validator("username", "password", mode="before")
    @classmethod
    def _as_text(cls, v: Any) -> str:
        return coerce_text(v)


class LoginResponse(CamelModel):
    """Signed bearer token returned after successful login."""

    ok: bool = True
    role: str
    token: str = Field(..., description="JWT; send as Authorization: Bearer <token>")


class CurrentUser(CamelModel):
    """Profile of the authenticated user."""

    id: int
    username: str
    full_name: str
    role: str


class UserListItem(CamelModel):
    """User entry for admin list (no password)."""

    id: int
    username: str
    full_name: str
    role: str
    is_active: bool


class UserUpdateRequest(CamelModel):
    """Partial update of a user; omitted fields are left unchanged."""

    full_name: str | None = Field(default=None, max_length=255)
    username: str | None = Field(default=None, max_length=255)
    role: str | None = None
