"""Site root, message board and health check."""

from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from ...modules.message.schemas import MessageForm
from .dependencies import MessageStoreDep
from .templating import templates

router = APIRouter(tags=["Site"])


@router.get("/")
async def index() -> RedirectResponse:
    return RedirectResponse("/catalog", status_code=status.HTTP_302_FOUND)


@router.get("/new", response_class=HTMLResponse)
async def message_create_get(request: Request):
    return templates.TemplateResponse(request, "message_form.html", {"title": "New Message"})


@router.post("/new")
async def message_create_post(form: Annotated[MessageForm, Form()], store: MessageStoreDep) -> RedirectResponse:
    await store.add_message(text=form.message, user=form.name)

    return RedirectResponse("/", status_code=status.HTTP_302_FOUND)


@router.get("/messages", response_class=HTMLResponse)
async def message_list(request: Request, store: MessageStoreDep):
    messages = await store.get_messages()

    return templates.TemplateResponse(request, "message_list.html", {"title": "Messages", "messages": messages})


@router.get(
    "/health",
    summary="Health Check",
    responses={200: {"description": "Application is healthy and responding"}},
)
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "message": "Local Library is running"}
