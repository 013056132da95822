from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.gzip import GZipMiddleware

from ..modules.message.store import InMemoryMessageStore, MessageStore, default_messages
from .config.settings import DatabaseSettings, Settings, get_settings
from .database.session import create_tables, engine
from .logging import configure_logging, get_logger

logger = get_logger(__name__)


def lifespan_factory(
    settings: Settings,
    create_tables_on_startup: bool = True,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Factory to create a lifespan async context manager for a FastAPI app.

    Args:
        settings: Application settings
        create_tables_on_startup: Whether to create database tables on startup

    Returns:
        An async context manager for FastAPI's lifespan
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        configure_logging()

        if isinstance(settings, DatabaseSettings) and create_tables_on_startup:
            await create_tables()
            logger.info("Database tables ready", extra={"backend": settings.DATABASE_BACKEND.value})

        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Database engine disposed")

    return lifespan


def create_application(
    router: APIRouter,
    settings: Optional[Settings] = None,
    lifespan: Optional[Callable[[FastAPI], AbstractAsyncContextManager[None]]] = None,
    message_store: Optional[MessageStore] = None,
    create_tables_on_startup: Optional[bool] = None,
    enable_gzip: Optional[bool] = None,
    **kwargs: Any,
) -> FastAPI:
    """Creates and configures the catalog FastAPI application.

    Args:
        router: The APIRouter containing the routes for the application
        settings: Application settings (uses get_settings() if None)
        lifespan: Optional lifespan; defaults to lifespan_factory(settings)
        message_store: Store backing the message board; a fresh in-memory
            store, seeded with the default greetings unless
            MESSAGE_BOARD_SEEDED is off, when None
        create_tables_on_startup: Defaults to settings.CREATE_TABLES_ON_STARTUP
        enable_gzip: Defaults to settings.GZIP_ENABLED
        **kwargs: Additional keyword arguments passed to FastAPI constructor

    Returns:
        A configured FastAPI application
    """
    from ..interfaces.web.errors import register_exception_handlers

    if settings is None:
        settings = get_settings()

    _create_tables_on_startup = settings.CREATE_TABLES_ON_STARTUP
    if create_tables_on_startup is not None:
        _create_tables_on_startup = create_tables_on_startup

    _enable_gzip = settings.GZIP_ENABLED
    if enable_gzip is not None:
        _enable_gzip = enable_gzip

    kwargs.setdefault("title", settings.APP_NAME)
    kwargs.setdefault("description", settings.APP_DESCRIPTION)
    kwargs.setdefault("version", settings.VERSION)
    kwargs.setdefault("debug", settings.DEBUG)

    if lifespan is None:
        lifespan = lifespan_factory(settings, create_tables_on_startup=_create_tables_on_startup)

    application = FastAPI(lifespan=lifespan, **kwargs)

    if message_store is None:
        message_store = InMemoryMessageStore(default_messages() if settings.MESSAGE_BOARD_SEEDED else None)
    application.state.message_store = message_store

    application.include_router(router)
    register_exception_handlers(application)

    if _enable_gzip:
        application.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MINIMUM_SIZE)

    return application
