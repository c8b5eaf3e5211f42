"""Product request/response schemas - REST API contract."""

from typing import Any

from pydantic import BaseModel, ConfigDict

# Records are loaded from an export as-is, so scalar fields may arrive as text or numbers
Scalar = str | int | float | bool | None


class Product(BaseModel):
    """One catalog record as stored in the index. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    id: int | str
    sku: Scalar = None
    name: Scalar = None
    category_id: Scalar = None
    description: Scalar = None
    image_urls: list[Any] | Scalar = None
    mrp: Scalar = None
    status: Scalar = None
    created_by: Scalar = None
    updated_by: Scalar = None
    created_at: Scalar = None
    updated_at: Scalar = None
    per_unit_mrp_price: Scalar = None
    unit_type: Scalar = None
    per_unit_selling_price: Scalar = None
    unit_value: Scalar = None
    selling_price: Scalar = None
    category_brand_index_id: Scalar = None
    is_active: Scalar = None
    discount: Scalar = None
    category_name: Scalar = None


class ProductSearchResponse(BaseModel):
    # Hits that do not fit Product are passed through unchanged
    hits: list[Product | dict[str, Any]]
    total_hits: int
    processing_time_ms: int | None = None
    query: str
    limit: int
    offset: int


class IndexStatsResponse(BaseModel):
    number_of_documents: int
    is_indexing: bool


class HealthPayload(BaseModel):
    status: str = "ok"
    service: str = "product-catalog"
