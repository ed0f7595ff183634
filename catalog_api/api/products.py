"""Product API endpoints.

- POST /products/generate - generate and store sample products
- GET /products - filtered, sorted, paginated listing
- GET /products/stats - catalog statistics
- GET /products/filters - filter vocabularies
- GET /products/{id} - single product
- DELETE /products - clear the catalog
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    AppliedFiltersSchema,
    ClearResponse,
    ErrorResponse,
    FilterOptionsResponse,
    GenerateRequest,
    GenerateResponse,
    PaginationSchema,
    ProductListResponse,
    ProductSchema,
    StatsResponse,
)
from catalog_api.catalog.lookup import filter_options
from catalog_api.catalog.query import ListingCriteria
from catalog_api.catalog.service import CatalogService
from catalog_api.infrastructure.config import Settings
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_settings(request: Request) -> Settings:
    """Get the application's settings."""
    return request.app.state.settings


def get_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CatalogService:
    """Get catalog service bound to the request's session."""
    return CatalogService(session, settings)


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Generate products",
)
async def generate_products(
    body: GenerateRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> GenerateResponse:
    """Generate sample products and store them.

    Duplicate SKUs are skipped, not reported as errors, so ``count`` may
    be lower than requested.
    """
    result = await service.generate_products(
        count=body.count,
        clear_existing=body.clear_existing,
    )

    return GenerateResponse(
        message=f"Successfully generated {result.inserted} products",
        count=result.inserted,
        skipped=result.skipped,
    )


@router.get(
    "",
    response_model=ProductListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List products",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_service)],
    settings: Annotated[Settings, Depends(get_settings)],
    search: Annotated[str | None, Query(description="Substring of name or description")] = None,
    category: Annotated[str | None, Query()] = None,
    brand: Annotated[str | None, Query()] = None,
    min_price: Annotated[str | None, Query(alias="minPrice")] = None,
    max_price: Annotated[str | None, Query(alias="maxPrice")] = None,
    min_stock: Annotated[str | None, Query(alias="minStock")] = None,
    max_stock: Annotated[str | None, Query(alias="maxStock")] = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[str | None, Query(alias="sortOrder")] = None,
    page: Annotated[str | None, Query()] = None,
    limit: Annotated[str | None, Query()] = None,
) -> ProductListResponse:
    """List products with filtering, sorting and pagination.

    All parameters are optional strings. Invalid values never fail the
    request: they are dropped or replaced by defaults, and the values
    actually used are echoed back in ``filters``.
    """
    criteria = ListingCriteria.from_params(
        search=search,
        category=category,
        brand=brand,
        min_price=min_price,
        max_price=max_price,
        min_stock=min_stock,
        max_stock=max_stock,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )

    result = await service.list_products(criteria)

    return ProductListResponse(
        products=[ProductSchema.model_validate(p) for p in result.items],
        pagination=PaginationSchema(**result.pagination.to_dict()),
        filters=AppliedFiltersSchema(**result.filters),
    )


@router.get(
    "/stats",
    response_model=StatsResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Catalog statistics",
)
async def get_stats(
    service: Annotated[CatalogService, Depends(get_service)],
) -> StatsResponse:
    """Get statistics over the whole catalog, ignoring filters."""
    stats = await service.get_stats()
    return StatsResponse(**stats.to_dict())


@router.get(
    "/filters",
    response_model=FilterOptionsResponse,
    summary="Filter options",
)
async def get_filter_options() -> FilterOptionsResponse:
    """Get the category and brand lists offered as filters."""
    return FilterOptionsResponse(**filter_options())


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get product",
)
async def get_product(
    product_id: int,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductSchema:
    """Get a single product by ID."""
    product = await service.get_product(product_id)
    return ProductSchema.model_validate(product)


@router.delete(
    "",
    response_model=ClearResponse,
    status_code=status.HTTP_200_OK,
    responses={500: {"model": ErrorResponse}},
    summary="Clear products",
)
async def clear_products(
    service: Annotated[CatalogService, Depends(get_service)],
) -> ClearResponse:
    """Delete every product."""
    deleted = await service.clear_products()
    return ClearResponse(message="All products cleared successfully", deleted=deleted)
