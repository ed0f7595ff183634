"""Tests for product catalog generator."""

import re

import pytest

from catalog_api.catalog.generator import GeneratorConfig, ProductGenerator
from catalog_api.catalog.lookup import ADJECTIVES, BRANDS, CATEGORIES, PRODUCT_NAMES

SKU_PATTERN = re.compile(r"^[A-Z]{3}-\d{5}$")


class TestProductGenerator:
    """Tests for ProductGenerator."""

    @pytest.fixture
    def generator(self) -> ProductGenerator:
        """Create generator with a fixed seed."""
        return ProductGenerator(GeneratorConfig(seed=42))

    def test_generate_products(self, generator: ProductGenerator) -> None:
        """Generator produces the requested number of products."""
        products = generator.generate_list(100)
        assert len(products) == 100

    def test_deterministic_generation(self) -> None:
        """Same seed produces same products."""
        products1 = ProductGenerator(GeneratorConfig(seed=42)).generate_list(20)
        products2 = ProductGenerator(GeneratorConfig(seed=42)).generate_list(20)

        assert products1 == products2

    def test_different_seeds_produce_different_products(self) -> None:
        """Different seeds produce different products."""
        products1 = ProductGenerator(GeneratorConfig(seed=42)).generate_list(20)
        products2 = ProductGenerator(GeneratorConfig(seed=99)).generate_list(20)

        skus1 = {p.sku for p in products1}
        skus2 = {p.sku for p in products2}
        assert skus1 != skus2

    def test_unique_skus(self, generator: ProductGenerator) -> None:
        """SKUs are unique within one generation."""
        products = generator.generate_list(1000)
        skus = [p.sku for p in products]
        assert len(skus) == len(set(skus))

    def test_sku_format(self, generator: ProductGenerator) -> None:
        """SKUs are three capitals, a dash and five digits."""
        for product in generator.generate_list(50):
            assert SKU_PATTERN.match(product.sku)

    def test_values_drawn_from_lookup(self, generator: ProductGenerator) -> None:
        """Category, brand and name come from the lookup lists."""
        for product in generator.generate_list(100):
            assert product.category in CATEGORIES
            assert product.brand in BRANDS
            adjective, base_name = product.name.split(" ", 1)
            assert adjective in ADJECTIVES
            assert base_name in PRODUCT_NAMES[product.category]
            assert product.description

    def test_price_and_stock_ranges(self, generator: ProductGenerator) -> None:
        """Prices and stock stay inside their ranges."""
        for product in generator.generate_list(500):
            assert 9.99 <= product.price <= 500.00
            assert round(product.price, 2) == product.price
            assert 0 <= product.stock_quantity <= 999

    def test_collision_budget_exhausted(self) -> None:
        """Fewer products come back when SKUs keep colliding."""
        generator = ProductGenerator(GeneratorConfig(seed=1))
        generator.generate_sku = lambda: "AAA-00000"

        products = generator.generate_list(10)

        assert len(products) == 1

    def test_as_row(self, generator: ProductGenerator) -> None:
        """Drafts convert to column dictionaries."""
        row = generator.generate_product().as_row()
        assert set(row) == {
            "name",
            "description",
            "category",
            "brand",
            "price",
            "stock_quantity",
            "sku",
        }
