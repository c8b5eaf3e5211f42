"""
Health and index description - static answers, no dependency check.
"""

from fastapi import APIRouter

from catalog.config import get_settings
from catalog.schemas.response import success_response
from catalog.services.product_service import ProductService

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness: is the process up?"""
    return success_response("Service is healthy", ProductService.health())


@router.get("/")
async def root():
    """Static API description."""
    settings = get_settings()
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "search": "/api/products/search?q=<query>",
            "product": "/api/products?id=<id>",
            "stats": "/api/products/stats",
            "health": "/health",
        },
    }
