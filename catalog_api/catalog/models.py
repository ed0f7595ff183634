"""SQLAlchemy models for the product catalog.

Defines the products table used for persistent storage.
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.infrastructure.database import Base


class Product(Base):
    """Product entity in the catalog.

    Rows are created by bulk generation and removed by clear-all;
    nothing updates them in place.

    Attributes:
        id: Store-assigned ordinal.
        name: Product name.
        description: Product description.
        category: Category name (conventional vocabulary, not a foreign key).
        brand: Brand name.
        price: Price in major currency units.
        stock_quantity: Units in stock.
        sku: Stock Keeping Unit, unique across the table.
        created_at: Insertion timestamp.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    brand: Mapped[str | None] = mapped_column(String(100), nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    sku: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    __table_args__ = (
        Index("idx_category", "category"),
        Index("idx_brand", "brand"),
        Index("idx_price", "price"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, sku={self.sku}, name={self.name[:30]})>"
