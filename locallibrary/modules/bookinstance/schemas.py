"""Pydantic schemas for book instance entities."""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from ..book.schemas import BookTitle
from ..common.forms import parse_optional_date, require_text, sanitize
from ..common.schemas import TimestampSchema, format_date_medium
from .models import BookInstanceStatus


class BookInstanceBase(BaseModel):
    """Base schema for book instance data."""

    model_config = ConfigDict(use_enum_values=True)

    book_id: int = Field(description="ID of the book this is a copy of")
    imprint: str = Field(description="Publisher and edition details, stored escaped")
    status: BookInstanceStatus = Field(default=BookInstanceStatus.MAINTENANCE.value, description="Lending status")
    due_back: Optional[date] = Field(default=None, description="Date the copy is due back")


class BookInstanceCreate(BookInstanceBase):
    """Schema for creating a book instance from sanitized form values."""

    @field_validator("book_id", mode="before")
    @classmethod
    def validate_book_id(cls, v: Any) -> int:
        text = require_text("" if v is None else str(v), "Book must be specified")
        if not text.isdigit():
            raise PydanticCustomError("required", "Book must be specified")
        return int(text)

    @field_validator("imprint")
    @classmethod
    def validate_imprint(cls, v: str) -> str:
        return require_text(v, "Imprint must be specified")

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v: Any) -> Any:
        if v is None or v == "":
            return BookInstanceStatus.MAINTENANCE
        if v not in {status.value for status in BookInstanceStatus}:
            raise PydanticCustomError("status", "Invalid status")
        return v

    @field_validator("due_back", mode="before")
    @classmethod
    def validate_due_back(cls, v: Any) -> Optional[date]:
        return parse_optional_date(v, "Invalid date")


class BookInstanceUpdate(BookInstanceCreate):
    """Schema for replacing every mutable field of a book instance."""

    pass


class BookInstanceRead(TimestampSchema):
    """Schema for reading a book instance with its book joined."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    book_id: int
    imprint: str
    status: str
    due_back: Optional[date] = None
    book: Optional[BookTitle] = None

    @property
    def url(self) -> str:
        return f"/catalog/bookinstance/{self.id}"

    @property
    def due_back_formatted(self) -> str:
        return format_date_medium(self.due_back)

    @property
    def due_back_yyyy_mm_dd(self) -> str:
        return self.due_back.isoformat() if self.due_back else ""


class BookInstanceForm(BaseModel):
    """Book instance form body as submitted, trimmed and escaped."""

    book: str = ""
    imprint: str = ""
    status: str = ""
    due_back: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def sanitize_fields(cls, v: Any) -> str:
        return sanitize(v)

    @property
    def due_back_yyyy_mm_dd(self) -> str:
        return self.due_back

    def _as_schema_input(self) -> dict[str, Any]:
        return {"book_id": self.book, "imprint": self.imprint, "status": self.status, "due_back": self.due_back}

    def to_create(self) -> BookInstanceCreate:
        """Validate into a create schema; raises pydantic ``ValidationError``."""
        return BookInstanceCreate.model_validate(self._as_schema_input())

    def to_update(self) -> BookInstanceUpdate:
        return BookInstanceUpdate.model_validate(self._as_schema_input())
