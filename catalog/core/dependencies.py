"""
FastAPI dependencies - injection for the search index and services.
Tests override get_meilisearch with a fake index.
"""

from typing import Annotated

from fastapi import Depends

from catalog.config import get_settings
from catalog.search.index import SearchIndex
from catalog.search.meilisearch_client import get_meilisearch
from catalog.services.product_service import ProductService


def get_product_service(index: Annotated[SearchIndex, Depends(get_meilisearch)]) -> ProductService:
    settings = get_settings()
    return ProductService(index, primary_key=settings.primary_key, default_limit=settings.default_search_limit)


ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
