from fastapi import APIRouter

from .admin_routes import router as admin_router
from .banner_routes import router as banner_router
from .professional_routes import router as professional_router
from .quote_routes import router as quote_router

router = APIRouter()
router.include_router(professional_router)
router.include_router(quote_router)
router.include_router(banner_router)
router.include_router(admin_router)

__all__ = [
    "router",
    "admin_router",
    "banner_router",
    "professional_router",
    "quote_router",
]
