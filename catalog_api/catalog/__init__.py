"""Product Catalog Service.

Provides product generation, listing queries, statistics and
catalog maintenance.
"""

from catalog_api.catalog.generator import GeneratorConfig, ProductDraft, ProductGenerator
from catalog_api.catalog.models import Product
from catalog_api.catalog.query import ListingCriteria, Pagination, SortField, SortOrder
from catalog_api.catalog.repository import BatchResult, CatalogStats, ProductRepository
from catalog_api.catalog.service import (
    CatalogService,
    GenerationResult,
    ProductPage,
)

__all__ = [
    # Models
    "Product",
    # Generator
    "GeneratorConfig",
    "ProductDraft",
    "ProductGenerator",
    # Query
    "ListingCriteria",
    "Pagination",
    "SortField",
    "SortOrder",
    # Repository
    "BatchResult",
    "CatalogStats",
    "ProductRepository",
    # Service
    "CatalogService",
    "GenerationResult",
    "ProductPage",
]
