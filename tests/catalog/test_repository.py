"""Tests for the product repository against SQLite."""

from typing import Any

import pytest
from sqlalchemy.exc import OperationalError

from catalog_api.catalog.query import ListingCriteria, SortField, SortOrder
from catalog_api.catalog.repository import ProductRepository
from catalog_api.domain.exceptions import StoreError
from catalog_api.infrastructure.database import Database


def make_row(sku: str, **overrides: Any) -> dict[str, Any]:
    row = {
        "name": "Classic Lamp",
        "description": "A lamp",
        "category": "Home & Garden",
        "brand": "EcoLife",
        "price": 25.0,
        "stock_quantity": 10,
        "sku": sku,
    }
    row.update(overrides)
    return row


class TestInsertBatch:
    """Tests for ProductRepository.insert_batch."""

    @pytest.mark.asyncio
    async def test_inserts_all(self, database: Database) -> None:
        """Fresh SKUs are all written."""
        async with database.session() as session:
            repo = ProductRepository(session)
            result = await repo.insert_batch([make_row("AAA-00001"), make_row("AAA-00002")])
            await session.commit()

            assert result.inserted == 2
            assert result.rejected == []
            assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_existing_sku_rejected_per_row(self, database: Database) -> None:
        """A stored SKU rejects only its own row."""
        async with database.session() as session:
            repo = ProductRepository(session)
            await repo.insert_batch([make_row("AAA-00001")])
            await session.commit()

            result = await repo.insert_batch(
                [make_row("AAA-00001", name="Duplicate"), make_row("AAA-00002")]
            )
            await session.commit()

            assert result.inserted == 1
            assert [row["sku"] for row in result.rejected] == ["AAA-00001"]
            assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_repeat_within_batch_rejected(self, database: Database) -> None:
        """A SKU repeated inside one batch is written once."""
        async with database.session() as session:
            repo = ProductRepository(session)
            result = await repo.insert_batch([make_row("AAA-00001"), make_row("AAA-00001")])
            await session.commit()

            assert result.inserted == 1
            assert len(result.rejected) == 1

    @pytest.mark.asyncio
    async def test_empty_batch(self, database: Database) -> None:
        """An empty batch does nothing."""
        async with database.session() as session:
            result = await ProductRepository(session).insert_batch([])
            assert result.inserted == 0

    @pytest.mark.asyncio
    async def test_store_failure_raises_store_error(self) -> None:
        """Driver errors surface as StoreError."""
        database = Database("sqlite+aiosqlite:///:memory:")
        try:
            async with database.session() as session:
                # No schema: the insert fails for a reason other than a conflict
                with pytest.raises(StoreError) as exc_info:
                    await ProductRepository(session).insert_batch([make_row("AAA-00001")])
            assert isinstance(exc_info.value.__cause__, OperationalError)
            assert exc_info.value.operation == "insert_batch"
        finally:
            await database.dispose()


class TestQueries:
    """Tests for counting, selecting and statistics."""

    @pytest.mark.asyncio
    async def test_count_and_select_share_predicate(self, database: Database) -> None:
        """Count reflects every match while select returns one page."""
        rows = [make_row(f"AAA-{i:05d}", price=float(i)) for i in range(1, 8)]
        async with database.session() as session:
            repo = ProductRepository(session)
            await repo.insert_batch(rows)
            await session.commit()

            criteria = ListingCriteria(
                min_price=3.0,
                sort_by=SortField.PRICE,
                sort_order=SortOrder.DESC,
                page=2,
                limit=2,
            )
            total = await repo.count(criteria.predicate())
            items = await repo.select(
                criteria.predicate(), criteria.order_by(), criteria.offset, criteria.limit
            )

            assert total == 5
            assert [p.price for p in items] == [5.0, 4.0]

    @pytest.mark.asyncio
    async def test_ties_ordered_by_id(self, database: Database) -> None:
        """Rows with equal sort keys come back in id order."""
        rows = [make_row(f"AAA-{i:05d}") for i in range(5)]
        async with database.session() as session:
            repo = ProductRepository(session)
            await repo.insert_batch(rows)
            await session.commit()

            criteria = ListingCriteria(sort_by=SortField.PRICE, limit=10)
            items = await repo.select(criteria.predicate(), criteria.order_by(), 0, 10)

            ids = [p.id for p in items]
            assert ids == sorted(ids)

    @pytest.mark.asyncio
    async def test_get_by_id(self, database: Database) -> None:
        """Products load by ID and missing IDs give None."""
        async with database.session() as session:
            repo = ProductRepository(session)
            await repo.insert_batch([make_row("AAA-00001")])
            await session.commit()

            (product,) = await repo.select(
                ListingCriteria().predicate(), ListingCriteria().order_by(), 0, 1
            )
            assert (await repo.get_by_id(product.id)).sku == "AAA-00001"
            assert await repo.get_by_id(product.id + 1000) is None

    @pytest.mark.asyncio
    async def test_stats_empty(self, database: Database) -> None:
        """An empty catalog has zero totals and no price figures."""
        async with database.session() as session:
            stats = await ProductRepository(session).aggregate_stats()

        assert stats.total_products == 0
        assert stats.total_categories == 0
        assert stats.total_brands == 0
        assert stats.total_stock == 0
        assert stats.min_price is None
        assert stats.max_price is None
        assert stats.avg_price is None

    @pytest.mark.asyncio
    async def test_stats(self, database: Database) -> None:
        """Statistics aggregate over the whole table."""
        rows = [
            make_row("AAA-00001", price=10.0, stock_quantity=1, brand="EcoLife"),
            make_row("AAA-00002", price=20.0, stock_quantity=2, brand="ProFit"),
            make_row("AAA-00003", price=30.01, stock_quantity=3, category="Books"),
        ]
        async with database.session() as session:
            repo = ProductRepository(session)
            await repo.insert_batch(rows)
            await session.commit()
            stats = await repo.aggregate_stats()

        assert stats.total_products == 3
        assert stats.total_categories == 2
        assert stats.total_brands == 2
        assert stats.min_price == 10.0
        assert stats.max_price == 30.01
        assert stats.avg_price == 20.0
        assert stats.total_stock == 6

    @pytest.mark.asyncio
    async def test_delete_all(self, database: Database) -> None:
        """Clearing reports how many rows were removed."""
        async with database.session() as session:
            repo = ProductRepository(session)
            await repo.insert_batch([make_row("AAA-00001"), make_row("AAA-00002")])
            await session.commit()

            assert await repo.delete_all() == 2
            await session.commit()
            assert await repo.count() == 0
