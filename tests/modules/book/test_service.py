"""Tests for book service."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from locallibrary.modules.book.schemas import BookCreate
from locallibrary.modules.book.services import BookService


@pytest.fixture
def book_service():
    """Create book service instance."""
    return BookService()


@pytest.mark.asyncio
async def test_create_book_with_genres(
    book_service: BookService, db_session: AsyncSession, test_author: dict, test_genre: dict
):
    """Test creating a book filed under an existing genre."""
    book_data = BookCreate(
        title="Foundation",
        summary="The Galactic Empire is dying.",
        isbn="9780553293357",
        author_id=test_author["id"],
        genre_ids=[test_genre["id"]],
    )

    result = await book_service.create_book(book_data=book_data, db=db_session)

    assert result.id is not None
    assert result.title == "Foundation"
    assert result.url == f"/catalog/book/{result.id}"

    genre_books = await book_service.get_books_by_genre(genre_id=test_genre["id"], db=db_session)
    assert [book.title for book in genre_books] == ["Foundation"]


@pytest.mark.asyncio
async def test_get_book_titles_sorted(
    book_service: BookService, db_session: AsyncSession, test_book: dict, test_book_2: dict
):
    """Test book titles come back sorted ascending."""
    result = await book_service.get_book_titles(db=db_session)

    assert [book.title for book in result] == ["The Name of the Wind", "The Wise Man's Fear"]
    assert result[0].id == test_book["id"]


@pytest.mark.asyncio
async def test_get_books_by_author(
    book_service: BookService, db_session: AsyncSession, test_author: dict, test_book: dict, test_book_2: dict
):
    """Test listing title and summary of an author's books."""
    result = await book_service.get_books_by_author(author_id=test_author["id"], db=db_session)

    assert len(result) == 2
    assert result[0].summary == test_book["summary"]


@pytest.mark.asyncio
async def test_get_books_by_author_without_books(book_service: BookService, db_session: AsyncSession, test_author_2: dict):
    result = await book_service.get_books_by_author(author_id=test_author_2["id"], db=db_session)
    assert result == []


@pytest.mark.asyncio
async def test_get_books_includes_author(book_service: BookService, db_session: AsyncSession, test_book: dict):
    """Test the book list joins each book's author."""
    result = await book_service.get_books(db=db_session)

    assert len(result) == 1
    assert result[0].author.name == "Rothfuss, Patrick"


@pytest.mark.asyncio
async def test_get_book_not_found(book_service: BookService, db_session: AsyncSession):
    """Test getting non-existent book."""
    result = await book_service.get_book(book_id=99999, db=db_session)
    assert result is None


@pytest.mark.asyncio
async def test_count_books(book_service: BookService, db_session: AsyncSession, test_book: dict, test_book_2: dict):
    assert await book_service.count_books(db=db_session) == 2
