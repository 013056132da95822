import asyncio
from typing import Any, AsyncGenerator, Awaitable, Callable, Dict

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

from ..config.settings import DatabaseBackend, settings


def _engine_options() -> Dict[str, Any]:
    """Pool options only apply to the PostgreSQL queue pool."""
    if settings.DATABASE_BACKEND == DatabaseBackend.POSTGRES:
        return {"pool_size": settings.POSTGRES_POOL_SIZE, "max_overflow": settings.POSTGRES_MAX_OVERFLOW}
    return {}


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """Make SQLite enforce foreign keys on every new connection, as PostgreSQL does."""

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    future=True,
    **_engine_options(),
)

if settings.DATABASE_BACKEND == DatabaseBackend.SQLITE:
    enable_sqlite_foreign_keys(engine)

local_session = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase, MappedAsDataclass):
    """Base class for all catalog database models.

    Combines SQLAlchemy's DeclarativeBase with MappedAsDataclass so every
    model gets a generated ``__init__`` built from its mapped columns.
    Columns assigned by the database (ids, timestamps) are declared with
    ``init=False`` and relationships with ``repr=False`` so that printing a
    model never triggers a lazy load on an async session.

    Example:
        ```python
        class Genre(Base):
            __tablename__ = "genres"

            id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)
            name: Mapped[str] = mapped_column(String(100))

        genre = Genre(name="Fantasy")
        ```
    """

    pass


async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for a request-scoped database session.

    Yields:
        AsyncSession: A configured async database session.

    Example:
        ```python
        @router.get("/authors")
        async def author_list(db: AsyncSession = Depends(async_session)):
            ...
        ```
    """
    async_get_db = local_session
    async with async_get_db() as db:
        yield db


def session_factory() -> async_sessionmaker[AsyncSession]:
    """Dependency providing the session factory used for concurrent reads."""
    return local_session


async def gather_in_sessions(
    factory: async_sessionmaker[AsyncSession],
    *operations: Callable[[AsyncSession], Awaitable[Any]],
) -> list[Any]:
    """Run independent read operations concurrently, one session each.

    An ``AsyncSession`` cannot be shared between concurrently running
    coroutines, so every operation receives its own session from ``factory``.
    Results are returned in the order the operations were given; the first
    exception raised by any operation propagates.

    Args:
        factory: Session factory to open the sessions from.
        *operations: Callables taking a session and returning an awaitable.

    Returns:
        List with the result of each operation.
    """

    async def _run(operation: Callable[[AsyncSession], Awaitable[Any]]) -> Any:
        async with factory() as db:
            return await operation(db)

    return list(await asyncio.gather(*(_run(operation) for operation in operations)))


async def create_tables() -> None:
    """Create all tables in the database if they don't exist.

    Idempotent: existing tables are left unchanged. Imports every model
    module first so the metadata is complete.
    """
    from ...modules import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
