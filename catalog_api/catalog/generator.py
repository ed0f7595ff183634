"""Product catalog generator.

Synthesizes plausible product records from the static lookup lists.
Pass a seed for reproducible output.
"""

import random
import string
from dataclasses import asdict, dataclass
from typing import Any, Iterator

from catalog_api.catalog.lookup import (
    ADJECTIVES,
    BRANDS,
    CATEGORIES,
    DESCRIPTION_TEMPLATES,
    PRODUCT_NAMES,
)


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for product generation.

    Attributes:
        seed: Random seed for reproducibility (None for system randomness).
        min_price: Lowest generated price.
        max_price: Highest generated price.
        max_stock: Highest generated stock quantity.
        attempts_per_product: Attempt budget multiplier for SKU collisions.
    """

    seed: int | None = None
    min_price: float = 9.99
    max_price: float = 500.00
    max_stock: int = 999
    attempts_per_product: int = 3


@dataclass(frozen=True)
class ProductDraft:
    """A synthesized product not yet persisted."""

    name: str
    description: str
    category: str
    brand: str
    price: float
    stock_quantity: int
    sku: str

    def as_row(self) -> dict[str, Any]:
        """Column values for insertion."""
        return asdict(self)


# ============================================================================
# Product Generator
# ============================================================================


class ProductGenerator:
    """Generates batches of products with unique SKUs.

    Example usage:
        generator = ProductGenerator(GeneratorConfig(seed=42))
        drafts = generator.generate_list(100)
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        """Initialize generator with configuration.

        Args:
            config: Generator configuration.
        """
        self.config = config or GeneratorConfig()
        self.rng = random.Random(self.config.seed)

    def generate_sku(self) -> str:
        """Generate a SKU in the form ABC-12345."""
        letters = "".join(self.rng.choices(string.ascii_uppercase, k=3))
        digits = "".join(self.rng.choices(string.digits, k=5))
        return f"{letters}-{digits}"

    def _generate_description(self, category: str, name: str, brand: str) -> str:
        template = self.rng.choice(DESCRIPTION_TEMPLATES)
        return template.format(category=category.lower(), name=name, brand=brand)

    def generate_product(self) -> ProductDraft:
        """Generate a single product.

        Returns:
            Generated ProductDraft.
        """
        category = self.rng.choice(CATEGORIES)
        brand = self.rng.choice(BRANDS)
        base_name = self.rng.choice(PRODUCT_NAMES[category])
        adjective = self.rng.choice(ADJECTIVES)

        price = round(self.rng.uniform(self.config.min_price, self.config.max_price), 2)
        stock_quantity = self.rng.randint(0, self.config.max_stock)

        return ProductDraft(
            name=f"{adjective} {base_name}",
            description=self._generate_description(category, base_name, brand),
            category=category,
            brand=brand,
            price=price,
            stock_quantity=stock_quantity,
            sku=self.generate_sku(),
        )

    def generate(self, count: int) -> Iterator[ProductDraft]:
        """Generate up to ``count`` products with distinct SKUs.

        Collisions are retried until the attempt budget
        (``attempts_per_product * count``) runs out, so fewer than
        ``count`` products may be produced.

        Args:
            count: Number of products wanted.

        Yields:
            Generated ProductDraft instances.
        """
        seen: set[str] = set()
        max_attempts = count * self.config.attempts_per_product
        attempts = 0
        produced = 0

        while produced < count and attempts < max_attempts:
            attempts += 1
            product = self.generate_product()
            if product.sku in seen:
                continue
            seen.add(product.sku)
            produced += 1
            yield product

    def generate_list(self, count: int) -> list[ProductDraft]:
        """Generate products as a list.

        Returns:
            List of generated products.
        """
        return list(self.generate(count))
