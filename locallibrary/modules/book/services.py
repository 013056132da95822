"""Book service: read access for the catalog pages and seeding."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ...infrastructure.logging import get_logger
from ..genre.models import Genre
from .crud import book_crud
from .models import Book
from .schemas import BookCreate, BookDetail, BookRead, BookSummary, BookTitle

logger = get_logger(__name__)


class BookService:
    """Service for reading books and the relations around them."""

    async def create_book(
        self,
        book_data: BookCreate,
        db: AsyncSession,
    ) -> BookRead:
        """Create a book and attach it to existing genres."""
        genres: List[Genre] = []
        if book_data.genre_ids:
            result = await db.execute(select(Genre).where(Genre.id.in_(book_data.genre_ids)))
            genres = list(result.scalars().all())

        book = Book(
            title=book_data.title,
            summary=book_data.summary,
            isbn=book_data.isbn,
            author_id=book_data.author_id,
            genres=genres,
        )
        db.add(book)
        await db.commit()

        logger.info("Book created", extra={"book_id": book.id, "author_id": book.author_id})

        return BookRead(
            id=book.id,
            title=book.title,
            summary=book.summary,
            isbn=book.isbn,
            author_id=book.author_id,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )

    async def get_books(self, db: AsyncSession) -> List[BookRead]:
        """Get all books ordered by title, with their author joined."""
        stmt = select(Book).options(selectinload(Book.author)).order_by(Book.title)

        result = await db.execute(stmt)

        return [BookRead.model_validate(book) for book in result.scalars().all()]

    async def get_book_titles(self, db: AsyncSession) -> List[BookTitle]:
        """Get id and title of every book, sorted by title ascending."""
        stmt = await book_crud.select(schema_to_select=BookTitle, sort_columns="title", sort_orders="asc")

        result = await db.execute(stmt)

        return [BookTitle(**row) for row in result.mappings().all()]

    async def get_books_by_author(
        self,
        author_id: int,
        db: AsyncSession,
    ) -> List[BookSummary]:
        """Get title and summary of every book written by ``author_id``."""
        stmt = await book_crud.select(schema_to_select=BookSummary, sort_columns="title", sort_orders="asc", author_id=author_id)

        result = await db.execute(stmt)

        return [BookSummary(**row) for row in result.mappings().all()]

    async def get_books_by_genre(
        self,
        genre_id: int,
        db: AsyncSession,
    ) -> List[BookSummary]:
        """Get title and summary of every book filed under ``genre_id``."""
        stmt = select(Book).where(Book.genres.any(Genre.id == genre_id)).order_by(Book.title)

        result = await db.execute(stmt)

        return [BookSummary.model_validate(book) for book in result.scalars().all()]

    async def get_book(
        self,
        book_id: int,
        db: AsyncSession,
    ) -> Optional[BookDetail]:
        """Get a book with its author, genres and copies, or ``None`` when absent."""
        stmt = (
            select(Book)
            .options(selectinload(Book.author), selectinload(Book.genres), selectinload(Book.instances))
            .where(Book.id == book_id)
        )

        result = await db.execute(stmt)
        book = result.scalar_one_or_none()

        if book is None:
            return None

        return BookDetail.model_validate(book)

    async def count_books(self, db: AsyncSession) -> int:
        return await book_crud.count(db=db)
