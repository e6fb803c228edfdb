"""Shared schema base and permissive coercion helpers for request bodies."""

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.base import fits_int_column


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON keys while keeping snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OkResponse(CamelModel):
    """Acknowledgement for mutations that return no data."""

    ok: bool = True


class CreatedResponse(OkResponse):
    """Acknowledgement for creations, carrying the generated id."""

    id: int = Field(..., description="Database id of the created row")


def coerce_text(value: Any) -> str:
    """Missing -> '', strings unchanged, anything else via str()."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def coerce_int(value: Any) -> int:
    """
    JSON numbers are truncated, numeric strings parsed, anything else is 0.

    Values outside the 32-bit Integer column range also become 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, float):
        if value != value or abs(value) == float("inf"):
            return 0
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return 0
    elif not isinstance(value, int):
        return 0
    return value if fits_int_column(value) else 0


def coerce_decimal(value: Any) -> Decimal:
    """JSON numbers and numeric strings become Decimal; anything else is 0."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            return Decimal(0)
    else:
        return Decimal(0)
    return result if result.is_finite() else Decimal(0)
