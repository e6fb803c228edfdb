"""Schemas for menu item (chilaquiles) endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import Field, field_serializer, field_validator

from app.schemas.common import CamelModel, coerce_decimal, coerce_int, coerce_text


class ChilaquilPayload(CamelModel):
    """
    Body for create and update.

    Numeric fields accept numbers or numeric strings; anything else becomes 0.
    Blank text fields are rejected by the service, not here.
    """

    name: str = ""
    salsa_type: str = ""
    protein: str = ""
    spiciness: int = 0
    price: Decimal = Decimal(0)

    @field_validator("name", "salsa_type", "protein", mode="before")
    @classmethod
    def _as_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("spiciness", mode="before")
    @classmethod
    def _as_int(cls, v: Any) -> int:
        return coerce_int(v)

    @field_validator("price", mode="before")
    @classmethod
    def _as_decimal(cls, v: Any) -> Decimal:
        return coerce_decimal(v)


class ChilaquilItem(CamelModel):
    """Menu item as returned by the API."""

    id: int
    name: str
    salsa_type: str
    protein: str
    spiciness: int
    price: Decimal
    created_at: datetime | None = Field(default=None)
    is_active: bool = True

    @field_serializer("price")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)
