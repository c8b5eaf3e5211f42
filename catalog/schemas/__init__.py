from catalog.schemas.product import IndexStatsResponse, Product, ProductSearchResponse
from catalog.schemas.response import APIResponse, ErrorResponse, error_response, success_response

__all__ = [
    "APIResponse",
    "ErrorResponse",
    "IndexStatsResponse",
    "Product",
    "ProductSearchResponse",
    "error_response",
    "success_response",
]
