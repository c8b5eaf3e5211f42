"""
Product endpoints - search, lookup by id, index statistics.
Design: Thin controller; ProductService validates and raises API errors.
"""

from fastapi import APIRouter, Query

from catalog.core.dependencies import ProductServiceDep
from catalog.schemas.response import success_response

router = APIRouter()


@router.get("/search")
async def search_products(
    svc: ProductServiceDep,
    q: str | None = Query(None, description="Free-text query"),
    limit: str | None = Query(None, description="Page size, default 20"),
    offset: str | None = Query(None, description="Hits to skip, default 0"),
):
    """Full-text search. Invalid limit/offset fall back to defaults instead of failing."""
    result = await svc.search(q, limit=limit, offset=offset)
    return success_response("Search completed successfully", result)


@router.get("/stats")
async def get_index_stats(svc: ProductServiceDep):
    stats = await svc.get_stats()
    return success_response("Index statistics retrieved successfully", stats)


@router.get("/")
@router.get("", include_in_schema=False)
async def get_product(
    svc: ProductServiceDep,
    product_id: str | None = Query(None, alias="id", description="Product id"),
):
    product = await svc.get_by_id(product_id)
    return success_response("Product retrieved successfully", product)
