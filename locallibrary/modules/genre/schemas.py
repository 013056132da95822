"""Pydantic schemas for genre entities."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ..common.schemas import TimestampSchema


class GenreBase(BaseModel):
    """Base schema for genre data."""

    name: Annotated[str, Field(min_length=3, max_length=100, description="Genre name")]


class GenreCreate(GenreBase):
    """Schema for creating a new genre."""

    pass


class GenreRead(TimestampSchema, GenreBase):
    """Schema for reading genre data."""

    model_config = ConfigDict(from_attributes=True)

    id: int

    @property
    def url(self) -> str:
        return f"/catalog/genre/{self.id}"
