"""Database configuration and session management.

Provides the async SQLAlchemy engine and session factory, owned by the
application and handed to request handlers through dependencies.
"""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

# Base class for models
Base = declarative_base()


class Database:
    """Owns the engine and session factory for one catalog store.

    Example usage:
        database = Database("sqlite+aiosqlite:///./products.db")
        await database.create_tables()
        async with database.session() as session:
            ...
        await database.dispose()
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        """Create the engine for the given URL.

        Args:
            url: SQLAlchemy async database URL.
            echo: Whether to log emitted SQL.
        """
        self.url = url
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def dialect(self) -> str:
        """Name of the database dialect (e.g. "sqlite", "postgresql")."""
        return self.engine.dialect.name

    def session(self) -> AsyncSession:
        """Open a new session."""
        return self.session_factory()

    async def create_tables(self) -> None:
        """Create tables and indexes that do not exist yet."""
        # Make sure models are registered on the metadata
        import catalog_api.catalog.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Check connectivity with a trivial query.

        Returns:
            True if the store answered.
        """
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Get the application's database handle."""
    return request.app.state.database


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

    Yields:
        AsyncSession for database operations.
    """
    async with get_database(request).session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
