"""Pydantic schemas for book entities."""

from datetime import date
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..author.schemas import AuthorRead
from ..common.schemas import TimestampSchema, format_date_medium
from ..genre.schemas import GenreRead


class BookBase(BaseModel):
    """Base schema for book data."""

    title: Annotated[str, Field(min_length=1, max_length=255, description="Book title")]
    summary: Annotated[str, Field(min_length=1, description="Short description of the book")]
    isbn: Annotated[str, Field(min_length=1, max_length=20, description="ISBN-10 or ISBN-13")]


class BookCreate(BookBase):
    """Schema for creating a new book."""

    author_id: int = Field(description="ID of the book's author")
    genre_ids: List[int] = Field(default_factory=list, description="IDs of the genres the book is filed under")


class BookTitle(BaseModel):
    """Id and title only, used to fill book selection lists."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str

    @property
    def url(self) -> str:
        return f"/catalog/book/{self.id}"


class BookSummary(BookTitle):
    """Id, title and summary, used where books are listed under an author or genre."""

    summary: str


class BookCopy(BaseModel):
    """A copy of a book as listed on the book's own page."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    imprint: str
    status: str
    due_back: Optional[date] = None

    @property
    def url(self) -> str:
        return f"/catalog/bookinstance/{self.id}"

    @property
    def due_back_formatted(self) -> str:
        return format_date_medium(self.due_back)


class BookRead(TimestampSchema, BookBase):
    """Schema for reading book data with its author."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    author: Optional[AuthorRead] = None

    @property
    def url(self) -> str:
        return f"/catalog/book/{self.id}"


class BookDetail(BookRead):
    """A book with its genres and copies."""

    genres: List[GenreRead] = Field(default_factory=list)
    instances: List[BookCopy] = Field(default_factory=list)
