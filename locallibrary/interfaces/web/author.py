"""Author pages: list, detail, create, update and delete."""

from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from pydantic import ValidationError

from ...infrastructure.database.session import gather_in_sessions
from ...infrastructure.logging import get_logger
from ...modules.author.schemas import AuthorForm
from ...modules.common.constants import AUTHOR_LIST_URL
from ...modules.common.exceptions import AuthorNotFoundError
from ...modules.common.forms import form_errors
from .dependencies import AuthorServiceDep, BookServiceDep, DbSession, SessionFactory
from .templating import templates

router = APIRouter(prefix="/catalog", tags=["Authors"])

logger = get_logger(__name__)


@router.get("/authors", response_class=HTMLResponse)
async def author_list(request: Request, db: DbSession, author_service: AuthorServiceDep):
    """Display list of all authors."""
    authors = await author_service.get_authors(db)

    return templates.TemplateResponse(request, "author_list.html", {"title": "Author List", "author_list": authors})


@router.get("/author/create", response_class=HTMLResponse)
async def author_create_get(request: Request):
    """Display the author create form."""
    return templates.TemplateResponse(request, "author_form.html", {"title": "Create Author"})


@router.post("/author/create", response_class=HTMLResponse)
async def author_create_post(
    request: Request,
    form: Annotated[AuthorForm, Form()],
    db: DbSession,
    author_service: AuthorServiceDep,
) -> Response:
    """Handle author create; re-render the form with messages when invalid."""
    try:
        author_data = form.to_create()
    except ValidationError as e:
        return templates.TemplateResponse(
            request,
            "author_form.html",
            {"title": "Create Author", "author": form, "errors": form_errors(e)},
        )

    author = await author_service.create_author(author_data, db)

    return RedirectResponse(author.url, status_code=status.HTTP_302_FOUND)


@router.get("/author/{author_id}", response_class=HTMLResponse)
async def author_detail(
    request: Request,
    author_id: int,
    factory: SessionFactory,
    author_service: AuthorServiceDep,
    book_service: BookServiceDep,
):
    """Display an author with the books they wrote."""
    author, author_books = await gather_in_sessions(
        factory,
        lambda db: author_service.get_author(author_id, db),
        lambda db: book_service.get_books_by_author(author_id, db),
    )

    if author is None:
        raise AuthorNotFoundError()

    return templates.TemplateResponse(
        request,
        "author_detail.html",
        {"title": "Author Detail", "author": author, "author_books": author_books},
    )


@router.get("/author/{author_id}/delete", response_class=HTMLResponse)
async def author_delete_get(
    request: Request,
    author_id: int,
    factory: SessionFactory,
    author_service: AuthorServiceDep,
    book_service: BookServiceDep,
) -> Response:
    """Display the delete confirmation, listing books that block the delete."""
    author, author_books = await gather_in_sessions(
        factory,
        lambda db: author_service.get_author(author_id, db),
        lambda db: book_service.get_books_by_author(author_id, db),
    )

    if author is None:
        return RedirectResponse(AUTHOR_LIST_URL, status_code=status.HTTP_302_FOUND)

    return templates.TemplateResponse(
        request,
        "author_delete.html",
        {"title": "Delete Author", "author": author, "author_books": author_books},
    )


@router.post("/author/{author_id}/delete", response_class=HTMLResponse)
async def author_delete_post(
    request: Request,
    author_id: int,
    authorid: Annotated[int, Form()],
    db: DbSession,
    factory: SessionFactory,
    author_service: AuthorServiceDep,
    book_service: BookServiceDep,
) -> Response:
    """Delete the author named in the form, unless books still reference it."""
    author, author_books = await gather_in_sessions(
        factory,
        lambda db: author_service.get_author(author_id, db),
        lambda db: book_service.get_books_by_author(author_id, db),
    )

    if author_books:
        logger.info("Author delete refused", extra={"author_id": author_id, "book_count": len(author_books)})
        return templates.TemplateResponse(
            request,
            "author_delete.html",
            {"title": "Delete Author", "author": author, "author_books": author_books},
        )

    await author_service.delete_author(authorid, db)

    return RedirectResponse(AUTHOR_LIST_URL, status_code=status.HTTP_302_FOUND)


@router.get("/author/{author_id}/update", response_class=HTMLResponse)
async def author_update_get(request: Request, author_id: int, db: DbSession, author_service: AuthorServiceDep):
    """Display the author form pre-filled with the stored author."""
    author = await author_service.get_author(author_id, db)

    if author is None:
        raise AuthorNotFoundError()

    return templates.TemplateResponse(request, "author_form.html", {"title": "Update Author", "author": author})


@router.post("/author/{author_id}/update", response_class=HTMLResponse)
async def author_update_post(
    request: Request,
    author_id: int,
    form: Annotated[AuthorForm, Form()],
    db: DbSession,
    author_service: AuthorServiceDep,
) -> Response:
    """Handle author update; re-render the form with messages when invalid."""
    try:
        update_data = form.to_update()
    except ValidationError as e:
        return templates.TemplateResponse(
            request,
            "author_form.html",
            {"title": "Update Author", "author": form, "errors": form_errors(e)},
        )

    author = await author_service.update_author(author_id, update_data, db)

    if author is None:
        raise AuthorNotFoundError()

    return RedirectResponse(author.url, status_code=status.HTTP_302_FOUND)
