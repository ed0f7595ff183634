"""Catalog service for product operations.

High-level service that combines repository operations with
business logic for catalog management.
"""

from dataclasses import dataclass
from typing import Any

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.generator import GeneratorConfig, ProductGenerator
from catalog_api.catalog.models import Product
from catalog_api.catalog.query import ListingCriteria, Pagination
from catalog_api.catalog.repository import CatalogStats, ProductRepository
from catalog_api.domain.exceptions import (
    GenerationAbortedError,
    ProductNotFoundError,
    StoreError,
    ValidationError,
)
from catalog_api.infrastructure.config import Settings

logger = structlog.get_logger()

MIN_GENERATE_COUNT = 1
MAX_GENERATE_COUNT = 10000


@dataclass
class GenerationResult:
    """Outcome of a generate request.

    Attributes:
        requested: Products asked for.
        inserted: Products written to the store.
        skipped: Products rejected as duplicate SKUs.
        deleted: Products removed first when clearing was requested.
    """

    requested: int
    inserted: int
    skipped: int
    deleted: int = 0


@dataclass
class ProductPage:
    """One page of a product listing.

    Attributes:
        items: Products on this page.
        pagination: Count and paging metadata.
        filters: Normalized filter values that were applied.
    """

    items: list[Product]
    pagination: Pagination
    filters: dict[str, Any]


class CatalogService:
    """Service for catalog operations.

    Provides generation, listing, statistics and clearing on top of
    ProductRepository.

    Example usage:
        async with database.session() as session:
            service = CatalogService(session, settings)
            await service.generate_products(100, clear_existing=True)
            page = await service.list_products(ListingCriteria(category="Books"))
    """

    def __init__(
        self,
        session: AsyncSession,
        settings: Settings,
        generator: ProductGenerator | None = None,
    ) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            settings: Application settings (batch size, isolation level).
            generator: Product generator; a randomly seeded one by default.
        """
        self.session = session
        self.settings = settings
        self.repository = ProductRepository(session)
        self.generator = generator or ProductGenerator(GeneratorConfig())

    async def generate_products(
        self,
        count: int,
        clear_existing: bool = False,
    ) -> GenerationResult:
        """Synthesize products and store them batch by batch.

        Each batch is committed on its own. If a batch fails, earlier
        batches stay stored and the rest are not attempted.

        Args:
            count: Number of products to generate (1 to 10000).
            clear_existing: Whether to delete all products first.

        Returns:
            Generation result with inserted and skipped counts.

        Raises:
            ValidationError: If count is out of range.
            GenerationAbortedError: If a batch fails part-way.
        """
        if not MIN_GENERATE_COUNT <= count <= MAX_GENERATE_COUNT:
            raise ValidationError(
                "count",
                f"Count must be between {MIN_GENERATE_COUNT} and {MAX_GENERATE_COUNT}",
                value=count,
            )

        logger.info("Generating products", count=count, clear_existing=clear_existing)

        deleted = 0
        if clear_existing:
            deleted = await self.clear_products()

        rows = [draft.as_row() for draft in self.generator.generate(count)]
        batch_size = self.settings.insert_batch_size
        inserted = 0
        skipped = 0

        for start in range(0, len(rows), batch_size):
            batch = rows[start:start + batch_size]
            try:
                result = await self.repository.insert_batch(batch)
                await self.session.commit()
            except (StoreError, SQLAlchemyError) as e:
                await self.session.rollback()
                logger.error(
                    "Generation aborted",
                    requested=count,
                    inserted=inserted,
                    skipped=skipped,
                    batch_start=start,
                )
                raise GenerationAbortedError(inserted, skipped, count) from e

            inserted += result.inserted
            skipped += len(result.rejected)

        logger.info(
            "Generated products",
            requested=count,
            inserted=inserted,
            skipped=skipped,
        )

        return GenerationResult(
            requested=count,
            inserted=inserted,
            skipped=skipped,
            deleted=deleted,
        )

    async def list_products(self, criteria: ListingCriteria) -> ProductPage:
        """List products matching criteria.

        The count and the page are read in the same transaction with the
        same predicate.

        Args:
            criteria: Normalized listing criteria.

        Returns:
            Page of products with pagination metadata and applied filters.
        """
        isolation_level = self.settings.listing_isolation_level
        if isolation_level:
            await self.session.connection(
                execution_options={"isolation_level": isolation_level}
            )

        predicate = criteria.predicate()
        total = await self.repository.count(predicate)

        # Pages past the end hold nothing; the offset may not even bind
        items: list[Product] = []
        if criteria.offset < total:
            items = await self.repository.select(
                predicate,
                criteria.order_by(),
                criteria.offset,
                criteria.limit,
            )

        return ProductPage(
            items=items,
            pagination=Pagination(total=total, page=criteria.page, limit=criteria.limit),
            filters=criteria.echo(),
        )

    async def get_product(self, product_id: int) -> Product:
        """Get product by ID.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        product = await self.repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def get_stats(self) -> CatalogStats:
        """Get statistics over the whole catalog."""
        return await self.repository.aggregate_stats()

    async def clear_products(self) -> int:
        """Delete every product.

        Returns:
            Number of deleted products.
        """
        deleted = await self.repository.delete_all()
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Commit after clear failed", error=str(e))
            raise StoreError("delete_all") from e
        logger.info("Cleared products", deleted=deleted)
        return deleted
