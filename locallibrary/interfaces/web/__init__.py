from fastapi import APIRouter

from .author import router as author_router
from .bookinstance import router as bookinstance_router
from .catalog import router as catalog_router
from .site import router as site_router

router = APIRouter()
router.include_router(site_router)
router.include_router(catalog_router)
router.include_router(author_router)
router.include_router(bookinstance_router)
