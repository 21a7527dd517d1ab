"""Pytest configuration and fixtures"""
import os

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

# Keep the import-time engine off Postgres during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("CART_STORE", "memory")

from cartshop.database import Base, make_session_maker  # noqa: E402
from cartshop.errors import StoreFailure  # noqa: E402
from cartshop.service import CartService  # noqa: E402
from cartshop.sql_store import SqlCartStore  # noqa: E402
from cartshop.store import InMemoryCartStore  # noqa: E402


class FlakyStore(InMemoryCartStore):
    """In-memory store whose reads or saves can be switched to fail."""

    def __init__(self, products=None):
        super().__init__(products)
        self.fail_reads = False
        self.fail_saves = False
        self.saves = 0

    async def get_cart_items(self):
        if self.fail_reads:
            raise StoreFailure("cart read failed")
        return await super().get_cart_items()

    async def save_cart_items(self, items):
        if self.fail_saves:
            raise StoreFailure("cart save failed")
        self.saves += 1
        await super().save_cart_items(items)


@pytest.fixture
def store():
    return FlakyStore([("Apple", 10), ("Banana", 5), ("Orange", 8)])


@pytest.fixture
def service(store):
    return CartService(store)


@pytest_asyncio.fixture
async def sql_store():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    s = SqlCartStore(make_session_maker(engine))
    await s.add_product("Apple", 10)
    await s.add_product("Banana", 5)
    yield s
    await engine.dispose()
