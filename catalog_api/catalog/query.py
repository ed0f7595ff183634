"""Listing query builder.

Turns raw listing parameters into normalized criteria, a single predicate
shared by the count and row queries, an allow-listed sort specification
and an offset/limit window.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy import ColumnElement, Select, and_, func, or_, select, true

from catalog_api.catalog.models import Product

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 50

# Integer bounds are clamped to what a signed 64-bit column can bind
MAX_SQL_INT = 2**63 - 1
MIN_SQL_INT = -(2**63)


class SortField(str, Enum):
    """Columns a listing may be sorted by."""

    NAME = "name"
    PRICE = "price"
    STOCK_QUANTITY = "stock_quantity"
    CATEGORY = "category"
    BRAND = "brand"
    CREATED_AT = "created_at"

    @property
    def column(self) -> Any:
        """Mapped column for this field."""
        return getattr(Product, self.value)

    @classmethod
    def parse(cls, value: str | None) -> "SortField":
        """Return the matching field, or NAME for anything unknown."""
        try:
            return cls(value)
        except ValueError:
            return cls.NAME


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str | None) -> "SortOrder":
        """DESC when the value says so (any case), ASC otherwise."""
        if value is not None and value.strip().upper() == "DESC":
            return cls.DESC
        return cls.ASC


# ============================================================================
# Parameter parsing
# ============================================================================


def _parse_text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_filter_text(value: str | None) -> str | None:
    """Blank values are absent; anything else is matched as given."""
    if value is None or not value.strip():
        return None
    return value


def _parse_float(value: str | None) -> float | None:
    text = _parse_text(value)
    if text is None:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _parse_stock(value: str | None) -> int | None:
    """Parse a stock bound, truncating fractions toward zero."""
    number = _parse_float(value)
    if number is None:
        return None
    return max(MIN_SQL_INT, min(int(number), MAX_SQL_INT))


def _parse_int(value: str | None) -> int | None:
    text = _parse_text(value)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def _parse_positive_int(value: str | None, default: int) -> int:
    number = _parse_int(value)
    if number is None or number < 1:
        return default
    return number


# ============================================================================
# Criteria
# ============================================================================


@dataclass(frozen=True)
class ListingCriteria:
    """Normalized filter, sort and page parameters for one listing.

    Attributes:
        search: Case-insensitive substring matched against name and description.
        category: Exact category.
        brand: Exact brand.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        min_stock: Inclusive lower stock bound.
        max_stock: Inclusive upper stock bound.
        sort_by: Allow-listed sort field.
        sort_order: Sort direction.
        page: 1-based page number.
        limit: Page size.
    """

    search: str | None = None
    category: str | None = None
    brand: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_stock: int | None = None
    max_stock: int | None = None
    sort_by: SortField = SortField.NAME
    sort_order: SortOrder = SortOrder.ASC
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        search: str | None = None,
        category: str | None = None,
        brand: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
        min_stock: str | None = None,
        max_stock: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        page: str | None = None,
        limit: str | None = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int | None = None,
    ) -> "ListingCriteria":
        """Build criteria from raw string parameters.

        Never raises: blank values are treated as absent, numbers that do
        not parse are dropped, fractional stock bounds are truncated,
        unknown sort fields fall back to name, and bad page/limit values
        fall back to their defaults. Non-blank text is kept as given.

        Args:
            search: Search term.
            category: Category name.
            brand: Brand name.
            min_price: Lower price bound.
            max_price: Upper price bound.
            min_stock: Lower stock bound.
            max_stock: Upper stock bound.
            sort_by: Sort field name.
            sort_order: "ASC" or "DESC".
            page: Page number.
            limit: Page size.
            default_limit: Page size used when ``limit`` is absent or invalid.
            max_limit: Ceiling applied to the page size, if any.

        Returns:
            Normalized criteria.
        """
        page_size = _parse_positive_int(limit, default_limit)
        if max_limit is not None:
            page_size = min(page_size, max_limit)

        return cls(
            search=_parse_filter_text(search),
            category=_parse_filter_text(category),
            brand=_parse_filter_text(brand),
            min_price=_parse_float(min_price),
            max_price=_parse_float(max_price),
            min_stock=_parse_stock(min_stock),
            max_stock=_parse_stock(max_stock),
            sort_by=SortField.parse(_parse_text(sort_by)),
            sort_order=SortOrder.parse(sort_order),
            page=_parse_positive_int(page, DEFAULT_PAGE),
            limit=page_size,
        )

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.limit

    def predicate(self) -> ColumnElement[bool]:
        """Build the row filter.

        Each present criterion adds one clause; clauses are ANDed.
        With no criteria the predicate matches every row.

        Returns:
            SQLAlchemy boolean expression.
        """
        conditions: list[ColumnElement[bool]] = []

        if self.search is not None:
            conditions.append(
                or_(
                    Product.name.icontains(self.search, autoescape=True),
                    Product.description.icontains(self.search, autoescape=True),
                )
            )

        if self.category is not None:
            conditions.append(Product.category == self.category)

        if self.brand is not None:
            conditions.append(Product.brand == self.brand)

        if self.min_price is not None:
            conditions.append(Product.price >= self.min_price)

        if self.max_price is not None:
            conditions.append(Product.price <= self.max_price)

        if self.min_stock is not None:
            conditions.append(Product.stock_quantity >= self.min_stock)

        if self.max_stock is not None:
            conditions.append(Product.stock_quantity <= self.max_stock)

        if not conditions:
            return true()
        return and_(*conditions)

    def order_by(self) -> list[Any]:
        """Sort clauses: the chosen column, then id as a tiebreak."""
        column = self.sort_by.column
        primary = column.desc() if self.sort_order is SortOrder.DESC else column.asc()
        return [primary, Product.id.asc()]

    def echo(self) -> dict[str, Any]:
        """Filter values actually applied, keyed as in the query string."""
        return {
            "search": self.search,
            "category": self.category,
            "brand": self.brand,
            "minPrice": self.min_price,
            "maxPrice": self.max_price,
            "minStock": self.min_stock,
            "maxStock": self.max_stock,
            "sortBy": self.sort_by.value,
            "sortOrder": self.sort_order.value,
        }


# ============================================================================
# Pagination
# ============================================================================


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata for one listing.

    Attributes:
        total: Rows matching the predicate, before paging.
        page: Current page.
        limit: Page size.
    """

    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages (0 when nothing matches)."""
        return math.ceil(self.total / self.limit) if self.total > 0 else 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
        }


# ============================================================================
# Statements
# ============================================================================


def build_count_query(predicate: ColumnElement[bool]) -> Select:
    """Count rows matching the predicate."""
    return select(func.count(Product.id)).where(predicate)


def build_select_query(
    predicate: ColumnElement[bool],
    order_by: list[Any],
    offset: int,
    limit: int,
) -> Select:
    """Fetch one page of rows matching the predicate."""
    return (
        select(Product)
        .where(predicate)
        .order_by(*order_by)
        .offset(offset)
        .limit(limit)
    )
