"""Seed the database with the demo product catalog.

This script is idempotent: it creates the `products` and `cart_items` tables
if they do not exist, then creates each demo product or updates its price.

Usage:
    python scripts/db_seed.py

The script reads DATABASE_URL from the environment; default matches docker-compose.
"""
import asyncio
import sys
from pathlib import Path

# Ensure project root is on sys.path so the package imports without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cartshop.catalog import DEMO_PRODUCTS
from cartshop.database import async_session_maker, create_tables, engine
from cartshop.errors import StoreFailure
from cartshop.sql_store import SqlCartStore


async def seed() -> int:
    await create_tables()
    store = SqlCartStore(async_session_maker)
    for name, price in DEMO_PRODUCTS:
        product = await store.add_product(name, price)
        print(f"Seeded product: {product.name} -> {product.price}")
    await engine.dispose()
    return len(DEMO_PRODUCTS)


def main():
    try:
        count = asyncio.run(seed())
    except StoreFailure as e:
        print(f"Failed to seed database: {e.detail}")
        sys.exit(1)
    print(f"Done: {count} products in catalog")


if __name__ == "__main__":
    main()
