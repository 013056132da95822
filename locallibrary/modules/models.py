"""Import every model so the SQLAlchemy metadata and relationships are complete."""

from .author.models import Author
from .book.models import Book, book_genres
from .bookinstance.models import BookInstance, BookInstanceStatus
from .genre.models import Genre

__all__ = [
    "Author",
    "Book",
    "BookInstance",
    "BookInstanceStatus",
    "Genre",
    "book_genres",
]
