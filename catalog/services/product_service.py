"""
Product service - translates API parameters into index searches.
Challenge: Validate input before any downstream call; map service failures to API errors.
Design: Depends on the SearchIndex protocol only; tests pass a fake index.
"""

import logging
import re

from pydantic import ValidationError

from catalog.core.errors import BadRequestError, InternalServiceError, NotFoundError
from catalog.schemas.product import HealthPayload, IndexStatsResponse, Product, ProductSearchResponse
from catalog.search.index import SearchIndex, SearchServiceError
from catalog.search.models import SearchQuery

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
_INTEGER = re.compile(r"^([+-]?)0*(\d{1,19})$")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def coerce_int(value: str | int | None) -> int | None:
    """Parse a query-string integer; None when absent, unparsable or outside int64."""
    if value is None:
        return None
    if not isinstance(value, int):
        match = _INTEGER.match(value.strip())
        if not match:
            return None
        value = int(match.group(1) + match.group(2))
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


class ProductService:
    def __init__(self, index: SearchIndex, primary_key: str = "id", default_limit: int = DEFAULT_LIMIT):
        self.index = index
        self.primary_key = primary_key
        self.default_limit = default_limit

    async def search(
        self,
        query: str | None,
        limit: str | int | None = None,
        offset: str | int | None = None,
    ) -> ProductSearchResponse:
        if not query:
            raise BadRequestError("Query parameter 'q' is required", code="MISSING_QUERY")
        parsed_limit = coerce_int(limit)
        if parsed_limit is None or parsed_limit <= 0:
            parsed_limit = self.default_limit
        parsed_offset = coerce_int(offset)
        if parsed_offset is None or parsed_offset < 0:
            parsed_offset = 0

        try:
            result = await self.index.search(SearchQuery(q=query, limit=parsed_limit, offset=parsed_offset))
        except SearchServiceError as e:
            logger.warning("search q=%r failed: %s", query, e)
            raise InternalServiceError("SEARCH_FAILED", "Search operation failed") from e

        return ProductSearchResponse(
            hits=[self._to_product(hit) for hit in result.hits],
            total_hits=result.total_hits,
            processing_time_ms=result.processing_time_ms,
            query=query,
            limit=parsed_limit,
            offset=parsed_offset,
        )

    async def get_by_id(self, raw_id: str | None) -> Product | dict:
        if not raw_id:
            raise BadRequestError("Product ID is required", code="MISSING_ID")
        product_id = coerce_int(raw_id)
        if product_id is None:
            raise BadRequestError("Invalid product ID", code="INVALID_ID")

        query = SearchQuery(q="", limit=1, filter=f"{self.primary_key} = {product_id}")
        try:
            result = await self.index.search(query)
        except SearchServiceError as e:
            logger.warning("lookup id=%s failed: %s", product_id, e)
            raise InternalServiceError("SEARCH_FAILED", "Search operation failed") from e

        if not result.hits:
            raise NotFoundError("Product not found", code="PRODUCT_NOT_FOUND")
        return self._to_product(result.hits[0])

    async def get_stats(self) -> IndexStatsResponse:
        try:
            stats = await self.index.get_stats()
        except SearchServiceError as e:
            logger.warning("stats failed: %s", e)
            raise InternalServiceError("STATS_FAILED", "Failed to get index statistics") from e
        return IndexStatsResponse(number_of_documents=stats.number_of_documents, is_indexing=stats.is_indexing)

    @staticmethod
    def health() -> HealthPayload:
        return HealthPayload()

    @staticmethod
    def _to_product(hit: dict) -> Product | dict:
        try:
            return Product.model_validate(hit)
        except ValidationError as e:
            logger.warning("Passing through document %r that does not match the product schema: %s", hit.get("id"), e)
            return hit
