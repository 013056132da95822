"""Exception handlers that render failures with the generic error page."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...infrastructure.logging import get_logger
from ...modules.common.exceptions import DomainError
from ...modules.common.utils.error_handler import map_exception
from .templating import templates

logger = get_logger(__name__)


def render_error(request: Request, status_code: int, message: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Error", "message": message, "status_code": status_code},
        status_code=status_code,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global handlers for domain, request validation and HTTP exceptions."""

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError) -> HTMLResponse:
        status_code = map_exception(exc)
        logger.info("Rendering domain error", extra={"path": request.url.path, "status_code": status_code, "error": str(exc)})
        return render_error(request, status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> HTMLResponse:
        fields = ", ".join(str(error["loc"][-1]) for error in exc.errors() if error.get("loc"))
        logger.info("Rendering invalid request", extra={"path": request.url.path, "fields": fields})
        message = f"Invalid request: {fields}" if fields else "Invalid request"
        return render_error(request, 422, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
        return render_error(request, exc.status_code, str(exc.detail))
