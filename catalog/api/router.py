"""
API router - aggregates all endpoint modules.
"""

from fastapi import APIRouter

from catalog.api.endpoints import health, products

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(products.router, prefix="/api/products", tags=["products"])
