"""Pydantic schemas and helpers shared by the catalog modules."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TimestampSchema(BaseModel):
    """Timestamps carried by every persisted entity."""

    model_config = ConfigDict(from_attributes=True)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FormError(BaseModel):
    """A single field-level message shown above a re-rendered form."""

    field: str
    msg: str


def format_date_medium(value: Optional[date]) -> str:
    """Format a date as ``Oct 14, 1983``; empty string for ``None``."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"
