"""Catalog overview service."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...infrastructure.database.session import gather_in_sessions
from ..author.services import AuthorService
from ..book.services import BookService
from ..bookinstance.models import BookInstanceStatus
from ..bookinstance.services import BookInstanceService
from ..genre.services import GenreService
from .schemas import CatalogCounts


class CatalogService:
    """Aggregates record counts across the catalog modules."""

    def __init__(self) -> None:
        self.author_service = AuthorService()
        self.book_service = BookService()
        self.book_instance_service = BookInstanceService()
        self.genre_service = GenreService()

    async def get_counts(self, factory: async_sessionmaker[AsyncSession]) -> CatalogCounts:
        """Count books, copies, available copies, authors and genres concurrently."""
        book_count, book_instance_count, available_count, author_count, genre_count = await gather_in_sessions(
            factory,
            self.book_service.count_books,
            self.book_instance_service.count_book_instances,
            lambda db: self.book_instance_service.count_book_instances(db, status=BookInstanceStatus.AVAILABLE.value),
            self.author_service.count_authors,
            self.genre_service.count_genres,
        )

        return CatalogCounts(
            book_count=book_count,
            book_instance_count=book_instance_count,
            book_instance_available_count=available_count,
            author_count=author_count,
            genre_count=genre_count,
        )
