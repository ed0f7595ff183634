"""Command-line front end for the Catalog API.

Usage:
    catalog-cli generate --count 500 --clear
    catalog-cli list --category Electronics --sort-by price --sort-order DESC
    catalog-cli stats
    catalog-cli filters
    catalog-cli clear
"""

import argparse
import asyncio
import sys
from typing import Any

from catalog_api.client.api_client import APIResponse, CatalogAPIClient

DEFAULT_BASE_URL = "http://localhost:3003"


def format_price(value: float | None) -> str:
    """Format a price with two fraction digits, or a dash when absent."""
    if value is None:
        return "-"
    return f"${value:.2f}"


def render_products(data: dict[str, Any]) -> str:
    """Render a listing page as a text table."""
    products = data.get("products", [])
    pagination = data.get("pagination", {})

    lines = [
        f"{'ID':>6}  {'SKU':<9}  {'Name':<32}  {'Category':<16}  "
        f"{'Brand':<12}  {'Price':>9}  {'Stock':>5}"
    ]
    for product in products:
        lines.append(
            f"{product['id']:>6}  {product['sku']:<9}  {product['name'][:32]:<32}  "
            f"{(product.get('category') or '')[:16]:<16}  "
            f"{(product.get('brand') or '')[:12]:<12}  "
            f"{format_price(product['price']):>9}  {product['stock_quantity']:>5}"
        )
    if not products:
        lines.append("No products found.")

    lines.append(
        f"Page {pagination.get('page', 1)} of {pagination.get('totalPages', 0)} "
        f"({pagination.get('total', 0)} products)"
    )
    return "\n".join(lines)


def render_stats(data: dict[str, Any]) -> str:
    """Render catalog statistics."""
    return "\n".join(
        [
            f"Total products:   {data['total_products']}",
            f"Categories:       {data['total_categories']}",
            f"Brands:           {data['total_brands']}",
            f"Min price:        {format_price(data.get('min_price'))}",
            f"Max price:        {format_price(data.get('max_price'))}",
            f"Average price:    {format_price(data.get('avg_price'))}",
            f"Total stock:      {data['total_stock']}",
        ]
    )


def render_filters(data: dict[str, Any]) -> str:
    """Render filter options."""
    return "\n".join(
        [
            "Categories: " + ", ".join(data.get("categories", [])),
            "Brands:     " + ", ".join(data.get("brands", [])),
        ]
    )


def render_generated(data: dict[str, Any]) -> str:
    return f"{data['message']} ({data['skipped']} skipped)"


def render_cleared(data: dict[str, Any]) -> str:
    return f"{data['message']} ({data['deleted']} deleted)"


def render_error(response: APIResponse) -> str:
    error = response.error
    return f"Error [{error.status_code} {error.error_code}]: {error.message}"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="catalog-cli",
        description="Browse and manage the demo product catalog",
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Catalog API base URL (default: {DEFAULT_BASE_URL})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate sample products")
    generate.add_argument("--count", type=int, default=100, help="Products to generate")
    generate.add_argument(
        "--clear",
        action="store_true",
        help="Delete existing products first",
    )

    listing = subparsers.add_parser("list", help="List products")
    listing.add_argument("--search")
    listing.add_argument("--category")
    listing.add_argument("--brand")
    listing.add_argument("--min-price", type=float)
    listing.add_argument("--max-price", type=float)
    listing.add_argument("--min-stock", type=int)
    listing.add_argument("--max-stock", type=int)
    listing.add_argument("--sort-by", default="name")
    listing.add_argument("--sort-order", choices=["ASC", "DESC"], default="ASC")
    listing.add_argument("--page", type=int, default=1)
    listing.add_argument("--limit", type=int, default=20)

    subparsers.add_parser("stats", help="Show catalog statistics")
    subparsers.add_parser("filters", help="Show filter options")
    subparsers.add_parser("clear", help="Delete every product")

    return parser


async def run_command(args: argparse.Namespace, client: CatalogAPIClient) -> tuple[int, str]:
    """Execute one CLI command.

    Args:
        args: Parsed arguments.
        client: API client to use.

    Returns:
        Exit code and text to print.
    """
    if args.command == "generate":
        response = await client.generate_products(
            count=args.count,
            clear_existing=args.clear,
        )
        render = render_generated
    elif args.command == "list":
        response = await client.list_products(
            search=args.search,
            category=args.category,
            brand=args.brand,
            min_price=args.min_price,
            max_price=args.max_price,
            min_stock=args.min_stock,
            max_stock=args.max_stock,
            sort_by=args.sort_by,
            sort_order=args.sort_order,
            page=args.page,
            limit=args.limit,
        )
        render = render_products
    elif args.command == "stats":
        response = await client.get_stats()
        render = render_stats
    elif args.command == "filters":
        response = await client.get_filter_options()
        render = render_filters
    else:
        response = await client.clear_products()
        render = render_cleared

    if not response.success:
        return 1, render_error(response)
    return 0, render(response.data)


async def main_async(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    async with CatalogAPIClient(args.base_url) as client:
        code, output = await run_command(args, client)
    print(output)
    return code


def main() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main_async()))


if __name__ == "__main__":
    main()
