import os

from fastapi.staticfiles import StaticFiles

from ..infrastructure.app_factory import create_application
from ..infrastructure.config.settings import get_settings
from .web import router as web_router

settings = get_settings()

app = create_application(router=web_router, settings=settings)

static_dir = os.path.join(os.path.dirname(__file__), "static")

app.mount("/static", StaticFiles(directory=static_dir), name="static")
