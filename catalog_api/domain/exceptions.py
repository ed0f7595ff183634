"""Catalog exceptions.

Errors raised by the catalog service and repository. The API layer maps
each class to an HTTP status and a machine-readable error code.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions.

    All catalog errors should inherit from this class to allow
    catching them at the API layer.
    """

    error_code = "CATALOG_ERROR"
    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(CatalogError):
    """Raised when input is malformed or out of range.

    The request is rejected before the store is touched.
    """

    error_code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        """Initialize validation error.

        Args:
            field: Name of the offending input field.
            message: What is wrong with it.
            value: The rejected value.
        """
        super().__init__(message, details={"field": field, "value": value})
        self.field = field


class ProductNotFoundError(CatalogError):
    """Raised when a product ID does not exist."""

    error_code = "PRODUCT_NOT_FOUND"
    status_code = 404

    def __init__(self, product_id: int) -> None:
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": product_id},
        )


class StoreError(CatalogError):
    """Raised when the catalog store fails for a reason other than a
    uniqueness violation.

    The message is safe to return to callers; the driver error is kept
    on ``__cause__`` for server-side logging only.
    """

    error_code = "STORE_ERROR"
    status_code = 500

    def __init__(self, operation: str, details: dict[str, Any] | None = None) -> None:
        """Initialize store error.

        Args:
            operation: Store operation that failed (e.g. "count").
            details: Optional caller-safe context.
        """
        super().__init__(
            f"Catalog store failed during {operation}",
            details={"operation": operation, **(details or {})},
        )
        self.operation = operation


class GenerationAbortedError(StoreError):
    """Raised when a generate request fails part-way through its batches.

    Batches committed before the failure stay in the store; ``inserted``
    and ``skipped`` count only those batches.
    """

    def __init__(self, inserted: int, skipped: int, requested: int) -> None:
        """Initialize generation aborted error.

        Args:
            inserted: Rows committed before the failure.
            skipped: Rows rejected as duplicates before the failure.
            requested: Number of products requested.
        """
        super().__init__(
            "insert_batch",
            details={"inserted": inserted, "skipped": skipped, "requested": requested},
        )
        self.message = "Failed to generate products"
        self.inserted = inserted
        self.skipped = skipped
        self.requested = requested
