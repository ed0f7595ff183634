"""Product repository for database operations.

Provides batched insertion, clear-all, filtered counting and paging,
and whole-catalog statistics.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import structlog
from sqlalchemy import ColumnElement, delete, func, select, true
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.models import Product
from catalog_api.catalog.query import build_count_query, build_select_query
from catalog_api.domain.exceptions import StoreError

logger = structlog.get_logger()


@dataclass
class BatchResult:
    """Outcome of one batch insert.

    Attributes:
        inserted: Rows written.
        rejected: Rows refused because their SKU already existed.
    """

    inserted: int
    rejected: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class CatalogStats:
    """Aggregates over the whole catalog (filters never apply)."""

    total_products: int
    total_categories: int
    total_brands: int
    min_price: float | None
    max_price: float | None
    avg_price: float | None
    total_stock: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_products": self.total_products,
            "total_categories": self.total_categories,
            "total_brands": self.total_brands,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "avg_price": self.avg_price,
            "total_stock": self.total_stock,
        }


class ProductRepository:
    """Repository for Product database operations.

    Driver errors are logged and re-raised as StoreError so callers
    never see store-internal text.

    Example usage:
        async with database.session() as session:
            repo = ProductRepository(session)
            total = await repo.count(criteria.predicate())
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    def _insert(self):
        dialect = self.session.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert(Product)
        if dialect == "sqlite":
            return sqlite.insert(Product)
        raise StoreError("insert_batch", details={"dialect": dialect})

    async def insert_batch(self, rows: Sequence[dict[str, Any]]) -> BatchResult:
        """Insert rows, skipping any whose SKU is already stored.

        Uniqueness conflicts are resolved per row; any other failure
        aborts the whole batch.

        Args:
            rows: Column values for each new product.

        Returns:
            Inserted count and the rejected rows.

        Raises:
            StoreError: On any failure other than a SKU conflict.
        """
        if not rows:
            return BatchResult(inserted=0)

        stmt = (
            self._insert()
            .values(list(rows))
            .on_conflict_do_nothing(index_elements=[Product.sku])
            .returning(Product.sku)
        )

        try:
            result = await self.session.execute(stmt)
            written = set(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Batch insert failed", rows=len(rows), error=str(e))
            raise StoreError("insert_batch") from e

        rejected: list[dict[str, Any]] = []
        for row in rows:
            if row["sku"] in written:
                # A SKU repeated inside the batch is only written once
                written.discard(row["sku"])
            else:
                rejected.append(row)

        return BatchResult(inserted=len(rows) - len(rejected), rejected=rejected)

    async def delete_all(self) -> int:
        """Delete every product.

        Returns:
            Number of deleted products.
        """
        try:
            count = await self.count()
            await self.session.execute(delete(Product))
        except SQLAlchemyError as e:
            logger.error("Clearing products failed", error=str(e))
            raise StoreError("delete_all") from e
        return count

    async def count(self, predicate: ColumnElement[bool] | None = None) -> int:
        """Count products matching a predicate.

        Args:
            predicate: Row filter; all rows when omitted.

        Returns:
            Count of matching products.
        """
        query = build_count_query(predicate if predicate is not None else true())
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            logger.error("Counting products failed", error=str(e))
            raise StoreError("count") from e
        return result.scalar_one()

    async def select(
        self,
        predicate: ColumnElement[bool],
        order_by: list[Any],
        offset: int,
        limit: int,
    ) -> list[Product]:
        """Fetch one ordered page of matching products.

        Args:
            predicate: Row filter.
            order_by: Sort clauses.
            offset: Rows to skip.
            limit: Maximum rows to return.

        Returns:
            Matching products in order.
        """
        query = build_select_query(predicate, order_by, offset, limit)
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            logger.error("Selecting products failed", error=str(e))
            raise StoreError("select") from e
        return list(result.scalars().all())

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        try:
            return await self.session.get(Product, product_id)
        except SQLAlchemyError as e:
            logger.error("Loading product failed", product_id=product_id, error=str(e))
            raise StoreError("get_by_id") from e

    async def aggregate_stats(self) -> CatalogStats:
        """Compute statistics over the whole catalog.

        Returns:
            Catalog statistics.
        """
        query = select(
            func.count(Product.id).label("total_products"),
            func.count(Product.category.distinct()).label("total_categories"),
            func.count(Product.brand.distinct()).label("total_brands"),
            func.min(Product.price).label("min_price"),
            func.max(Product.price).label("max_price"),
            func.avg(Product.price).label("avg_price"),
            func.coalesce(func.sum(Product.stock_quantity), 0).label("total_stock"),
        )
        try:
            row = (await self.session.execute(query)).one()
        except SQLAlchemyError as e:
            logger.error("Computing stats failed", error=str(e))
            raise StoreError("aggregate_stats") from e

        return CatalogStats(
            total_products=row.total_products,
            total_categories=row.total_categories,
            total_brands=row.total_brands,
            min_price=row.min_price,
            max_price=row.max_price,
            avg_price=round(float(row.avg_price), 2) if row.avg_price is not None else None,
            total_stock=int(row.total_stock),
        )
