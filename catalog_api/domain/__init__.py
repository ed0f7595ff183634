"""Catalog domain layer.

Error taxonomy shared by the service, repository and API layers.
"""

from catalog_api.domain.exceptions import (
    CatalogError,
    GenerationAbortedError,
    ProductNotFoundError,
    StoreError,
    ValidationError,
)

__all__ = [
    "CatalogError",
    "GenerationAbortedError",
    "ProductNotFoundError",
    "StoreError",
    "ValidationError",
]
