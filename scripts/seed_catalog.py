#!/usr/bin/env python3
"""Seed product catalog script.

Creates the products table and adds a fixed set of sample products
through the catalog service, so the usual validation rules apply.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-clear
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.application.catalog_service import get_catalog_service
from app.application.dtos import ProductAddRequest
from app.domain.exceptions import CatalogError
from app.infrastructure.database import create_tables, engine, session_scope
from app.infrastructure.product_repository import SqlAlchemyProductRepository

SAMPLE_PRODUCTS = [
    ProductAddRequest("Wireless Headphones", "Electronics", 79.99, 120),
    ProductAddRequest("Smartphone Charger", "Electronics", 19.5, 300),
    ProductAddRequest("Espresso Machine", "HomeAppliances", 249.0, 15),
    ProductAddRequest("Robot Vacuum", "HomeAppliances", 329.99, 8),
    ProductAddRequest("Cotton T-Shirt", "Clothing", 12.99, 500),
    ProductAddRequest("Denim Jacket", "Clothing", 59.9, 40),
    ProductAddRequest("Leather Wallet", "Accessories", 35.0, 75),
    ProductAddRequest("Sunglasses", "Accessories", 89.0, 60),
    ProductAddRequest("Office Chair", "Furniture", 189.0, 25),
    ProductAddRequest("Bookshelf", "Furniture", 99.99, 12),
]


async def seed_products(clear: bool = True) -> dict:
    """Seed the catalog with sample products.

    Args:
        clear: Whether to delete existing products first.

    Returns:
        Seeding result with counts.
    """
    async with session_scope() as session:
        repository = SqlAlchemyProductRepository(session)
        service = get_catalog_service(repository)

        deleted = 0
        if clear:
            for product in await service.list_products():
                if await service.delete_product(product.product_id):
                    deleted += 1

        created = 0
        for request in SAMPLE_PRODUCTS:
            await service.add_product(request)
            created += 1

    return {"deleted": deleted, "products_created": created}


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with sample products",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing products before seeding",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Product Catalog Seeder")
    print("=" * 60)
    print(f"Clear existing: {not args.no_clear}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    try:
        result = await seed_products(clear=not args.no_clear)
    except CatalogError as e:
        print(f"  ✗ Error: {e.message}")
        raise
    finally:
        await engine.dispose()

    print(f"  ✓ Deleted: {result['deleted']} existing products")
    print(f"  ✓ Created: {result['products_created']} products")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
