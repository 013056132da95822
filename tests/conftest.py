"""Test configuration and fixtures for the local library."""

import os
from datetime import date

os.environ["ENVIRONMENT"] = "local"
os.environ["DATABASE_BACKEND"] = "sqlite"
os.environ["SQLITE_URI"] = ":memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from locallibrary.infrastructure.database.session import (  # noqa: E402
    Base,
    async_session,
    enable_sqlite_foreign_keys,
    session_factory,
)
from locallibrary.infrastructure.logging import configure_testing_logging, mark_logging_configured  # noqa: E402
from locallibrary.interfaces.main import app  # noqa: E402
from locallibrary.modules.message.store import InMemoryMessageStore, default_messages  # noqa: E402
from locallibrary.modules.models import Author, Book, BookInstance, Genre  # noqa: E402

configure_testing_logging()
mark_logging_configured()


@pytest_asyncio.fixture(scope="function")
async def test_db_engine(tmp_path):
    """Create a SQLAlchemy engine on a throwaway SQLite file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session_factory(test_db_engine):
    return async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(test_session_factory):
    """Create a test database session."""
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(test_session_factory):
    """Create a test client where each request gets its own session on the test database."""
    app.dependency_overrides = {}

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[async_session] = override_get_db
    app.dependency_overrides[session_factory] = lambda: test_session_factory
    app.state.message_store = InMemoryMessageStore(default_messages())

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def test_author(db_session: AsyncSession):
    """Create a test author."""
    author = Author(first_name="Patrick", family_name="Rothfuss", date_of_birth=date(1973, 6, 6))
    db_session.add(author)
    await db_session.commit()
    return {
        "id": author.id,
        "first_name": author.first_name,
        "family_name": author.family_name,
        "date_of_birth": author.date_of_birth,
        "date_of_death": author.date_of_death,
    }


@pytest_asyncio.fixture
async def test_author_2(db_session: AsyncSession):
    """Create a second test author without books."""
    author = Author(first_name="Isaac", family_name="Asimov", date_of_birth=date(1920, 1, 2), date_of_death=date(1992, 4, 6))
    db_session.add(author)
    await db_session.commit()
    return {
        "id": author.id,
        "first_name": author.first_name,
        "family_name": author.family_name,
        "date_of_birth": author.date_of_birth,
        "date_of_death": author.date_of_death,
    }


@pytest_asyncio.fixture
async def test_genre(db_session: AsyncSession):
    """Create a test genre."""
    genre = Genre(name="Fantasy")
    db_session.add(genre)
    await db_session.commit()
    return {"id": genre.id, "name": genre.name}


@pytest_asyncio.fixture
async def test_book(db_session: AsyncSession, test_author: dict, test_genre: dict):
    """Create a test book by the test author, filed under the test genre."""
    genre = await db_session.get(Genre, test_genre["id"])
    book = Book(
        title="The Name of the Wind",
        summary="I have stolen princesses back from sleeping barrow kings.",
        isbn="9781473211896",
        author_id=test_author["id"],
        genres=[genre],
    )
    db_session.add(book)
    await db_session.commit()
    return {
        "id": book.id,
        "title": book.title,
        "summary": book.summary,
        "isbn": book.isbn,
        "author_id": book.author_id,
    }


@pytest_asyncio.fixture
async def test_book_2(db_session: AsyncSession, test_author: dict):
    """Create a second book by the test author."""
    book = Book(
        title="The Wise Man's Fear",
        summary="Picking up the tale of Kvothe Kingkiller once again.",
        isbn="9788401352836",
        author_id=test_author["id"],
    )
    db_session.add(book)
    await db_session.commit()
    return {
        "id": book.id,
        "title": book.title,
        "summary": book.summary,
        "isbn": book.isbn,
        "author_id": book.author_id,
    }


@pytest_asyncio.fixture
async def test_book_instance(db_session: AsyncSession, test_book: dict):
    """Create a loaned copy of the test book."""
    book_instance = BookInstance(
        book_id=test_book["id"],
        imprint="Gollancz, 2011.",
        status="Loaned",
        due_back=date(2020, 6, 15),
    )
    db_session.add(book_instance)
    await db_session.commit()
    return {
        "id": book_instance.id,
        "book_id": book_instance.book_id,
        "imprint": book_instance.imprint,
        "status": book_instance.status,
        "due_back": book_instance.due_back,
    }


@pytest_asyncio.fixture
async def test_available_instance(db_session: AsyncSession, test_book: dict):
    """Create an available copy of the test book."""
    book_instance = BookInstance(book_id=test_book["id"], imprint="DAW Books, 2007.", status="Available")
    db_session.add(book_instance)
    await db_session.commit()
    return {
        "id": book_instance.id,
        "book_id": book_instance.book_id,
        "imprint": book_instance.imprint,
        "status": book_instance.status,
        "due_back": book_instance.due_back,
    }
