"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
Wire names follow the query string (camelCase) where the public
contract uses it.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | list[Any] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """A stored product."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    category: str | None = None
    brand: str | None = None
    price: float
    stock_quantity: int
    sku: str
    created_at: datetime | None = None


class PaginationSchema(BaseModel):
    """Pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(..., description="Rows matching the filters")
    page: int = Field(..., description="Current page number (1-based)")
    limit: int = Field(..., description="Page size")
    total_pages: int = Field(..., alias="totalPages", description="Number of pages")


class AppliedFiltersSchema(BaseModel):
    """Filter values actually applied after normalization."""

    model_config = ConfigDict(populate_by_name=True)

    search: str | None = None
    category: str | None = None
    brand: str | None = None
    min_price: float | None = Field(default=None, alias="minPrice")
    max_price: float | None = Field(default=None, alias="maxPrice")
    min_stock: int | None = Field(default=None, alias="minStock")
    max_stock: int | None = Field(default=None, alias="maxStock")
    sort_by: str = Field(..., alias="sortBy")
    sort_order: str = Field(..., alias="sortOrder")


class ProductListResponse(BaseModel):
    """Paginated product listing."""

    products: list[ProductSchema]
    pagination: PaginationSchema
    filters: AppliedFiltersSchema


class GenerateRequest(BaseModel):
    """Request to generate sample products."""

    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(default=100, description="Number of products (1-10000)")
    clear_existing: bool = Field(
        default=False,
        alias="clearExisting",
        description="Delete all products before generating",
    )


class GenerateResponse(BaseModel):
    """Result of a generate request."""

    message: str
    count: int = Field(..., description="Products inserted")
    skipped: int = Field(..., description="Products skipped as duplicate SKUs")


class StatsResponse(BaseModel):
    """Statistics over the whole catalog."""

    total_products: int
    total_categories: int
    total_brands: int
    min_price: float | None = None
    max_price: float | None = None
    avg_price: float | None = None
    total_stock: int


class FilterOptionsResponse(BaseModel):
    """Values offered for the category and brand filters."""

    categories: list[str]
    brands: list[str]


class ClearResponse(MessageResponse):
    """Result of clearing the catalog."""

    deleted: int


# ============================================================================
# Health Schemas
# ============================================================================


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str
