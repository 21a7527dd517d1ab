# cartshop/sql_store.py
import logging
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from .errors import InvalidArgument, NotFound, StoreFailure
from .models import CartItem, Product
from .schemas import CartItemOut, ProductOut
from .store import CartStore

logger = logging.getLogger(__name__)

DB_UNAVAILABLE = "database service is temporarily unavailable"


class SqlCartStore(CartStore):
    """Catalog and cart kept in a SQL database through async SQLAlchemy.

    Every call opens its own session; database errors surface as StoreFailure.
    """

    def __init__(self, session_maker: async_sessionmaker):
        self.session_maker = session_maker

    async def get_product_by_name(self, name: str) -> ProductOut:
        try:
            async with self.session_maker() as session:
                res = await session.execute(select(Product).where(Product.name == name))
                product = res.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.exception("product lookup failed for %r", name)
            raise StoreFailure(DB_UNAVAILABLE) from e
        if not product:
            raise NotFound("product not found")
        return ProductOut.model_validate(product)

    async def get_product_data(self) -> List[ProductOut]:
        try:
            async with self.session_maker() as session:
                res = await session.execute(select(Product).order_by(Product.id))
                return [ProductOut.model_validate(p) for p in res.scalars().all()]
        except SQLAlchemyError as e:
            logger.exception("catalog read failed")
            raise StoreFailure(DB_UNAVAILABLE) from e

    async def get_cart_items(self) -> List[CartItemOut]:
        try:
            async with self.session_maker() as session:
                res = await session.execute(select(CartItem).order_by(CartItem.position))
                return [CartItemOut.model_validate(it) for it in res.scalars().all()]
        except SQLAlchemyError as e:
            logger.exception("cart read failed")
            raise StoreFailure(DB_UNAVAILABLE) from e

    async def save_cart_items(self, items: List[CartItemOut]) -> None:
        # wholesale replace in a single transaction, order kept through `position`
        try:
            async with self.session_maker() as session:
                async with session.begin():
                    await session.execute(delete(CartItem))
                    for pos, it in enumerate(items):
                        session.add(CartItem(
                            position=pos,
                            product_name=it.product_name,
                            price=it.price,
                            quantity=it.quantity,
                        ))
        except SQLAlchemyError as e:
            logger.exception("cart save failed")
            raise StoreFailure(DB_UNAVAILABLE) from e

    async def add_product(self, name: str, price: int) -> ProductOut:
        """Create the product or update its price when it already exists."""
        if price < 0:
            raise InvalidArgument("invalid price")
        try:
            async with self.session_maker() as session:
                res = await session.execute(select(Product).where(Product.name == name))
                product = res.scalar_one_or_none()
                if product:
                    product.price = price
                else:
                    product = Product(name=name, price=price)
                    session.add(product)
                await session.commit()
                await session.refresh(product)
                return ProductOut.model_validate(product)
        except SQLAlchemyError as e:
            logger.exception("catalog write failed for %r", name)
            raise StoreFailure(DB_UNAVAILABLE) from e
