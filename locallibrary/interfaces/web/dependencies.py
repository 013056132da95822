"""FastAPI dependencies for the web routers."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...infrastructure.database.session import async_session, session_factory
from ...modules.author.services import AuthorService
from ...modules.book.services import BookService
from ...modules.bookinstance.services import BookInstanceService
from ...modules.catalog.services import CatalogService
from ...modules.genre.services import GenreService
from ...modules.message.store import MessageStore

DbSession = Annotated[AsyncSession, Depends(async_session)]
SessionFactory = Annotated[async_sessionmaker[AsyncSession], Depends(session_factory)]


def get_author_service() -> AuthorService:
    """Dependency for providing an AuthorService instance."""
    return AuthorService()


def get_book_service() -> BookService:
    """Dependency for providing a BookService instance."""
    return BookService()


def get_book_instance_service() -> BookInstanceService:
    """Dependency for providing a BookInstanceService instance."""
    return BookInstanceService()


def get_genre_service() -> GenreService:
    """Dependency for providing a GenreService instance."""
    return GenreService()


def get_catalog_service() -> CatalogService:
    """Dependency for providing a CatalogService instance."""
    return CatalogService()


def get_message_store(request: Request) -> MessageStore:
    """Dependency for the message store owned by the running application."""
    return request.app.state.message_store


AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
BookInstanceServiceDep = Annotated[BookInstanceService, Depends(get_book_instance_service)]
GenreServiceDep = Annotated[GenreService, Depends(get_genre_service)]
CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
MessageStoreDep = Annotated[MessageStore, Depends(get_message_store)]
