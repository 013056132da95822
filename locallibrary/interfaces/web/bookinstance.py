"""Book instance pages: list, detail, create, update and delete."""

from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from pydantic import ValidationError

from ...infrastructure.database.session import gather_in_sessions
from ...modules.bookinstance.models import BookInstanceStatus
from ...modules.bookinstance.schemas import BookInstanceForm
from ...modules.common.constants import BOOK_INSTANCE_LIST_URL
from ...modules.common.exceptions import BookInstanceNotFoundError
from ...modules.common.forms import form_errors
from .dependencies import BookInstanceServiceDep, BookServiceDep, DbSession, SessionFactory
from .templating import templates

router = APIRouter(prefix="/catalog", tags=["Book instances"])

STATUS_CHOICES = [choice.value for choice in BookInstanceStatus]


@router.get("/bookinstances", response_class=HTMLResponse)
async def bookinstance_list(request: Request, db: DbSession, book_instance_service: BookInstanceServiceDep):
    """Display list of all book instances."""
    book_instances = await book_instance_service.get_book_instances(db)

    return templates.TemplateResponse(
        request,
        "bookinstance_list.html",
        {"title": "Book Instance List", "bookinstance_list": book_instances},
    )


@router.get("/bookinstance/create", response_class=HTMLResponse)
async def bookinstance_create_get(request: Request, db: DbSession, book_service: BookServiceDep):
    """Display the book instance create form."""
    book_list = await book_service.get_book_titles(db)

    return templates.TemplateResponse(
        request,
        "bookinstance_form.html",
        {"title": "Create BookInstance", "book_list": book_list, "status_choices": STATUS_CHOICES},
    )


@router.post("/bookinstance/create", response_class=HTMLResponse)
async def bookinstance_create_post(
    request: Request,
    form: Annotated[BookInstanceForm, Form()],
    db: DbSession,
    book_service: BookServiceDep,
    book_instance_service: BookInstanceServiceDep,
) -> Response:
    """Handle book instance create; re-render the form with messages when invalid."""
    try:
        book_instance_data = form.to_create()
    except ValidationError as e:
        book_list = await book_service.get_book_titles(db)
        return templates.TemplateResponse(
            request,
            "bookinstance_form.html",
            {
                "title": "Create BookInstance",
                "book_list": book_list,
                "selected_book": form.book,
                "status_choices": STATUS_CHOICES,
                "errors": form_errors(e),
                "book_instance": form,
            },
        )

    book_instance = await book_instance_service.create_book_instance(book_instance_data, db)

    return RedirectResponse(book_instance.url, status_code=status.HTTP_302_FOUND)


@router.get("/bookinstance/{book_instance_id}", response_class=HTMLResponse)
async def bookinstance_detail(
    request: Request,
    book_instance_id: int,
    db: DbSession,
    book_instance_service: BookInstanceServiceDep,
):
    """Display one book instance with its book."""
    book_instance = await book_instance_service.get_book_instance(book_instance_id, db)

    if book_instance is None:
        raise BookInstanceNotFoundError("No instance found")

    return templates.TemplateResponse(
        request,
        "bookinstance_detail.html",
        {"title": "Book Instance", "book_instance": book_instance},
    )


@router.get("/bookinstance/{book_instance_id}/delete", response_class=HTMLResponse)
async def bookinstance_delete_get(
    request: Request,
    book_instance_id: int,
    db: DbSession,
    book_instance_service: BookInstanceServiceDep,
) -> Response:
    """Display the delete confirmation for a book instance."""
    book_instance = await book_instance_service.get_book_instance(book_instance_id, db)

    if book_instance is None:
        return RedirectResponse(BOOK_INSTANCE_LIST_URL, status_code=status.HTTP_302_FOUND)

    return templates.TemplateResponse(
        request,
        "bookinstance_delete.html",
        {"title": "Delete Book Instance", "book_instance": book_instance},
    )


@router.post("/bookinstance/{book_instance_id}/delete", response_class=HTMLResponse)
async def bookinstance_delete_post(
    book_instance_id: int,
    bookInstanceId: Annotated[int, Form()],
    db: DbSession,
    book_instance_service: BookInstanceServiceDep,
) -> Response:
    """Delete the book instance named in the form; copies have no dependents."""
    await book_instance_service.delete_book_instance(bookInstanceId, db)

    return RedirectResponse(BOOK_INSTANCE_LIST_URL, status_code=status.HTTP_302_FOUND)


@router.get("/bookinstance/{book_instance_id}/update", response_class=HTMLResponse)
async def bookinstance_update_get(
    request: Request,
    book_instance_id: int,
    factory: SessionFactory,
    book_service: BookServiceDep,
    book_instance_service: BookInstanceServiceDep,
):
    """Display the book instance form pre-filled with the stored copy."""
    book_list, book_instance = await gather_in_sessions(
        factory,
        book_service.get_book_titles,
        lambda db: book_instance_service.get_book_instance(book_instance_id, db),
    )

    if book_instance is None:
        raise BookInstanceNotFoundError()

    return templates.TemplateResponse(
        request,
        "bookinstance_form.html",
        {
            "title": "Update BookInstance",
            "book_list": book_list,
            "book_instance": book_instance,
            "selected_book": book_instance.book_id,
            "status_choices": STATUS_CHOICES,
        },
    )


@router.post("/bookinstance/{book_instance_id}/update", response_class=HTMLResponse)
async def bookinstance_update_post(
    request: Request,
    book_instance_id: int,
    form: Annotated[BookInstanceForm, Form()],
    db: DbSession,
    book_service: BookServiceDep,
    book_instance_service: BookInstanceServiceDep,
) -> Response:
    """Handle book instance update; re-render the form with messages when invalid."""
    try:
        update_data = form.to_update()
    except ValidationError as e:
        book_list = await book_service.get_book_titles(db)
        return templates.TemplateResponse(
            request,
            "bookinstance_form.html",
            {
                "title": "Update BookInstance",
                "book_list": book_list,
                "selected_book": form.book,
                "status_choices": STATUS_CHOICES,
                "errors": form_errors(e),
                "book_instance": form,
            },
        )

    book_instance = await book_instance_service.update_book_instance(book_instance_id, update_data, db)

    if book_instance is None:
        raise BookInstanceNotFoundError()

    return RedirectResponse(book_instance.url, status_code=status.HTTP_302_FOUND)
