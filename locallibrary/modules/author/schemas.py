"""Pydantic schemas for author entities."""

from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.forms import parse_optional_date, require_alphanumeric, sanitize
from ..common.schemas import TimestampSchema, format_date_medium


class AuthorBase(BaseModel):
    """Base schema for author data."""

    first_name: Annotated[str, Field(max_length=100, description="Given name")]
    family_name: Annotated[str, Field(max_length=100, description="Family name")]
    date_of_birth: Optional[date] = Field(default=None, description="Date of birth")
    date_of_death: Optional[date] = Field(default=None, description="Date of death")


class AuthorCreate(AuthorBase):
    """Schema for creating a new author from sanitized form values."""

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        return require_alphanumeric(v, "First Name must be specified", "First name includes non-alpha characters")

    @field_validator("family_name")
    @classmethod
    def validate_family_name(cls, v: str) -> str:
        return require_alphanumeric(v, "Family Name must be specified", "Family name includes non-alpha characters")

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def validate_date_of_birth(cls, v: Any) -> Optional[date]:
        return parse_optional_date(v, "Invalid date of birth")

    @field_validator("date_of_death", mode="before")
    @classmethod
    def validate_date_of_death(cls, v: Any) -> Optional[date]:
        return parse_optional_date(v, "Invalid date of death")


class AuthorUpdate(AuthorCreate):
    """Schema for replacing every mutable field of an author."""

    pass


class AuthorRead(TimestampSchema, AuthorBase):
    """Schema for reading author data."""

    model_config = ConfigDict(from_attributes=True)

    id: int

    @property
    def name(self) -> str:
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    @property
    def url(self) -> str:
        return f"/catalog/author/{self.id}"

    @property
    def lifespan(self) -> str:
        return f"{format_date_medium(self.date_of_birth)} - {format_date_medium(self.date_of_death)}"


class AuthorForm(BaseModel):
    """Author form body as submitted, trimmed and escaped."""

    first_name: str = ""
    family_name: str = ""
    date_of_birth: str = ""
    date_of_death: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def sanitize_fields(cls, v: Any) -> str:
        return sanitize(v)

    def to_create(self) -> AuthorCreate:
        """Validate into a create schema; raises pydantic ``ValidationError``."""
        return AuthorCreate.model_validate(self.model_dump())

    def to_update(self) -> AuthorUpdate:
        return AuthorUpdate.model_validate(self.model_dump())
