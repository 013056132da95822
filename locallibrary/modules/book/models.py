"""SQLAlchemy models for book entities."""

from typing import TYPE_CHECKING, List

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base

if TYPE_CHECKING:
    from ..author.models import Author
    from ..bookinstance.models import BookInstance
    from ..genre.models import Genre

book_genres = Table(
    "book_genres",
    Base.metadata,
    Column("book_id", Integer, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", Integer, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)


class Book(Base, TimestampMixin):
    """A title in the catalog, written by one author and filed under genres.

    Deleting an author is refused while books reference it, so the foreign
    key restricts rather than cascades.
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    title: Mapped[str] = mapped_column(String(255), index=True)
    summary: Mapped[str] = mapped_column(Text)
    isbn: Mapped[str] = mapped_column(String(20))
    author_id: Mapped[int] = mapped_column(Integer, ForeignKey("authors.id", ondelete="RESTRICT"), index=True)

    author: Mapped["Author"] = relationship(init=False, repr=False)
    genres: Mapped[List["Genre"]] = relationship(secondary=book_genres, default_factory=list, repr=False)
    instances: Mapped[List["BookInstance"]] = relationship(back_populates="book", default_factory=list, repr=False)
