"""Catalog API Client.

Thin HTTP client for communicating with the Catalog REST API.
This module handles error handling and response parsing.
"""

from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

logger = structlog.get_logger()


@dataclass
class APIError:
    """Represents an API error response."""

    error_code: str
    message: str
    status_code: int
    details: dict[str, Any] | list[Any] = field(default_factory=dict)


@dataclass
class APIResponse:
    """Represents an API response."""

    success: bool
    data: dict[str, Any] | list[Any] | None = None
    error: APIError | None = None


class CatalogAPIClient:
    """HTTP client for the Catalog REST API.

    Provides methods for every product endpoint used by the CLI.
    Handles request errors and non-2xx responses uniformly.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Catalog API base URL.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> APIResponse:
        """Make an API request.

        Args:
            method: HTTP method.
            path: API endpoint path.
            json: Request body as JSON.
            params: Query parameters.

        Returns:
            APIResponse with success status and data or error.
        """
        client = await self._get_client()

        # Filter out None params
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            logger.debug(
                "Making API request",
                method=method,
                path=path,
                has_body=json is not None,
            )

            response = await client.request(
                method=method,
                url=path,
                json=json,
                params=params,
            )

            if response.status_code >= 400:
                try:
                    error_data = response.json()
                except ValueError:
                    error_data = {}
                return APIResponse(
                    success=False,
                    error=APIError(
                        error_code=error_data.get("error_code", "UNKNOWN_ERROR"),
                        message=error_data.get("message", "Unknown error"),
                        status_code=response.status_code,
                        details=error_data.get("details", {}),
                    ),
                )

            return APIResponse(success=True, data=response.json())

        except httpx.TimeoutException as e:
            logger.error("API request timeout", path=path, error=str(e))
            return APIResponse(
                success=False,
                error=APIError(
                    error_code="TIMEOUT",
                    message=f"Request timed out: {path}",
                    status_code=504,
                ),
            )
        except httpx.RequestError as e:
            logger.error("API request failed", path=path, error=str(e))
            return APIResponse(
                success=False,
                error=APIError(
                    error_code="REQUEST_ERROR",
                    message=f"Request failed: {str(e)}",
                    status_code=500,
                ),
            )

    # =========================================================================
    # Product Endpoints
    # =========================================================================

    async def generate_products(
        self,
        count: int = 100,
        clear_existing: bool = False,
    ) -> APIResponse:
        """Generate sample products.

        Args:
            count: Number of products to generate (1-10000).
            clear_existing: Delete all products first.

        Returns:
            APIResponse with message, count and skipped.
        """
        return await self._request(
            method="POST",
            path="/products/generate",
            json={"count": count, "clearExisting": clear_existing},
        )

    async def list_products(
        self,
        search: str | None = None,
        category: str | None = None,
        brand: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        min_stock: int | None = None,
        max_stock: int | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> APIResponse:
        """List products with filters.

        Returns:
            APIResponse with products, pagination and applied filters.
        """
        return await self._request(
            method="GET",
            path="/products",
            params={
                "search": search,
                "category": category,
                "brand": brand,
                "minPrice": min_price,
                "maxPrice": max_price,
                "minStock": min_stock,
                "maxStock": max_stock,
                "sortBy": sort_by,
                "sortOrder": sort_order,
                "page": page,
                "limit": limit,
            },
        )

    async def get_product(self, product_id: int) -> APIResponse:
        """Get a single product."""
        return await self._request(method="GET", path=f"/products/{product_id}")

    async def get_stats(self) -> APIResponse:
        """Get catalog statistics."""
        return await self._request(method="GET", path="/products/stats")

    async def get_filter_options(self) -> APIResponse:
        """Get category and brand filter options."""
        return await self._request(method="GET", path="/products/filters")

    async def clear_products(self) -> APIResponse:
        """Delete every product."""
        return await self._request(method="DELETE", path="/products")

    async def health_check(self) -> APIResponse:
        """Check API health."""
        return await self._request(method="GET", path="/health")
