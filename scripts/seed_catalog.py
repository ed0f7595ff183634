#!/usr/bin/env python3
"""Seed product catalog script.

Generates sample products straight into the catalog store,
without going through the HTTP API.

Usage:
    python scripts/seed_catalog.py --count 1000
    python scripts/seed_catalog.py --count 200 --no-clear
    python scripts/seed_catalog.py --count 500 --seed 42 --database-url sqlite+aiosqlite:///./demo.db
"""

import argparse
import asyncio

from catalog_api.catalog.generator import GeneratorConfig, ProductGenerator
from catalog_api.catalog.service import CatalogService, GenerationResult
from catalog_api.infrastructure.config import Settings, settings as default_settings
from catalog_api.infrastructure.database import Database
from catalog_api.infrastructure.logging_config import configure_logging


async def seed_catalog(
    settings: Settings,
    count: int,
    clear: bool = True,
    seed: int | None = None,
) -> GenerationResult:
    """Seed the catalog store.

    Args:
        settings: Settings naming the database to seed.
        count: Products to generate.
        clear: Whether to clear existing products.
        seed: Random seed for reproducible products.

    Returns:
        Seeding result.
    """
    database = Database(settings.database_url)
    try:
        await database.create_tables()
        async with database.session() as session:
            service = CatalogService(
                session,
                settings,
                generator=ProductGenerator(GeneratorConfig(seed=seed)),
            )
            return await service.generate_products(count, clear_existing=clear)
    finally:
        await database.dispose()


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the demo product catalog",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1000,
        help="Number of products to generate (default: 1000)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing products before seeding",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible products",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override the configured database URL",
    )

    args = parser.parse_args()

    settings = default_settings
    if args.database_url:
        settings = settings.model_copy(update={"database_url": args.database_url})
    configure_logging(settings)

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Database: {settings.database_url}")
    print(f"Count: {args.count}")
    print(f"Clear existing: {not args.no_clear}")
    print()

    result = await seed_catalog(
        settings,
        count=args.count,
        clear=not args.no_clear,
        seed=args.seed,
    )

    print(f"  Deleted: {result.deleted} existing products")
    print(f"  Created: {result.inserted} products")
    print(f"  Skipped: {result.skipped} duplicate SKUs")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
