"""Catalog home page and the read-only book and genre pages."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...infrastructure.database.session import gather_in_sessions
from ...modules.common.exceptions import BookNotFoundError, GenreNotFoundError
from .dependencies import BookServiceDep, CatalogServiceDep, DbSession, GenreServiceDep, SessionFactory
from .templating import templates

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("", response_class=HTMLResponse)
async def catalog_index(request: Request, factory: SessionFactory, catalog_service: CatalogServiceDep):
    """Display record counts for the whole catalog."""
    counts = await catalog_service.get_counts(factory)

    return templates.TemplateResponse(request, "index.html", {"title": "Local Library Home", "counts": counts})


@router.get("/books", response_class=HTMLResponse)
async def book_list(request: Request, db: DbSession, book_service: BookServiceDep):
    books = await book_service.get_books(db)

    return templates.TemplateResponse(request, "book_list.html", {"title": "Book List", "book_list": books})


@router.get("/book/{book_id}", response_class=HTMLResponse)
async def book_detail(request: Request, book_id: int, db: DbSession, book_service: BookServiceDep):
    book = await book_service.get_book(book_id, db)

    if book is None:
        raise BookNotFoundError()

    return templates.TemplateResponse(request, "book_detail.html", {"title": book.title, "book": book})


@router.get("/genres", response_class=HTMLResponse)
async def genre_list(request: Request, db: DbSession, genre_service: GenreServiceDep):
    genres = await genre_service.get_genres(db)

    return templates.TemplateResponse(request, "genre_list.html", {"title": "Genre List", "genre_list": genres})


@router.get("/genre/{genre_id}", response_class=HTMLResponse)
async def genre_detail(
    request: Request,
    genre_id: int,
    factory: SessionFactory,
    genre_service: GenreServiceDep,
    book_service: BookServiceDep,
):
    """Display a genre with the books filed under it."""
    genre, genre_books = await gather_in_sessions(
        factory,
        lambda db: genre_service.get_genre(genre_id, db),
        lambda db: book_service.get_books_by_genre(genre_id, db),
    )

    if genre is None:
        raise GenreNotFoundError()

    return templates.TemplateResponse(
        request,
        "genre_detail.html",
        {"title": "Genre Detail", "genre": genre, "genre_books": genre_books},
    )
