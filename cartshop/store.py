"""
Cart store interface

Defines the contract the cart service uses for catalog lookups and cart
persistence, plus an in-memory implementation for local runs and tests.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List

from .errors import InvalidArgument, NotFound, StoreFailure
from .schemas import CartItemOut, ProductOut

logger = logging.getLogger(__name__)


class CartStore(ABC):
    """Catalog and cart data access"""

    @abstractmethod
    async def get_product_by_name(self, name: str) -> ProductOut:
        """Return the product called ``name``; raise NotFound if there is none"""

    @abstractmethod
    async def get_product_data(self) -> List[ProductOut]:
        """Return the whole catalog"""

    @abstractmethod
    async def get_cart_items(self) -> List[CartItemOut]:
        """Return the cart lines in stored order"""

    @abstractmethod
    async def save_cart_items(self, items: List[CartItemOut]) -> None:
        """Replace the cart contents with ``items``"""


class InMemoryCartStore(CartStore):
    # Values are copied in and out so callers never share state with the store.

    def __init__(self, products=None):
        """``products`` is an iterable of (name, price) pairs loaded into the catalog."""
        self._products: Dict[str, ProductOut] = {}
        self._cart: List[CartItemOut] = []
        for name, price in products or []:
            self._put_product(name, price)

    def _put_product(self, name: str, price: int) -> ProductOut:
        if price < 0:
            raise InvalidArgument("invalid price")
        product = ProductOut(name=name, price=price)
        self._products[name] = product
        return product.model_copy()

    async def add_product(self, name: str, price: int) -> ProductOut:
        """Create the product or update its price when it already exists."""
        return self._put_product(name, price)

    async def get_product_by_name(self, name: str) -> ProductOut:
        product = self._products.get(name)
        if product is None:
            raise NotFound("product not found")
        return product.model_copy()

    async def get_product_data(self) -> List[ProductOut]:
        return [p.model_copy() for p in self._products.values()]

    async def get_cart_items(self) -> List[CartItemOut]:
        return [it.model_copy() for it in self._cart]

    async def save_cart_items(self, items: List[CartItemOut]) -> None:
        names = [it.product_name for it in items]
        if len(set(names)) != len(names):
            # same rule as the unique product_name column of the SQL store
            raise StoreFailure("duplicate cart lines")
        self._cart = [it.model_copy() for it in items]
        logger.debug("cart saved in memory: %d line(s)", len(self._cart))
