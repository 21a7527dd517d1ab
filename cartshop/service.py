"""Cart service: validates requests and coordinates catalog and cart store calls.

The service holds no state of its own. Each operation reads from the store,
applies the change and writes the whole cart back. Store errors propagate
unchanged.
"""
import logging
from typing import List

from .errors import CartError, CartResetError, InsufficientFunds, InvalidArgument, NotFound
from .schemas import CartItemOut, CartSummary, PaymentInformation, ProductOut
from .store import CartStore

logger = logging.getLogger(__name__)


def cart_total(items: List[CartItemOut]) -> int:
    return sum(it.price * it.quantity for it in items)


class CartService:
    def __init__(self, store: CartStore):
        self.store = store

    async def add_cart(self, product_name: str, quantity: int) -> None:
        if quantity <= 0:
            logger.warning("rejected add of %r: quantity %s", product_name, quantity)
            raise InvalidArgument("invalid quantity")

        product = await self.store.get_product_by_name(product_name)
        carts = await self.store.get_cart_items()

        for i, item in enumerate(carts):
            if item.product_name == product_name:
                # keep the price captured when the line was first added
                carts[i] = item.model_copy(update={"quantity": item.quantity + quantity})
                break
        else:
            carts.append(CartItemOut(
                product_name=product.name,
                price=product.price,
                quantity=quantity,
            ))

        await self.store.save_cart_items(carts)
        logger.info("added %d x %r to cart", quantity, product_name)

    async def remove_cart(self, product_name: str) -> None:
        carts = await self.store.get_cart_items()
        remaining = [it for it in carts if it.product_name != product_name]
        if len(remaining) == len(carts):
            raise NotFound("product not found")

        await self.store.save_cart_items(remaining)
        logger.info("removed %r from cart", product_name)

    async def show_cart(self) -> List[CartItemOut]:
        return await self.store.get_cart_items()

    async def reset_cart(self) -> None:
        await self.store.save_cart_items([])
        logger.info("cart reset")

    async def get_all_product(self) -> List[ProductOut]:
        return await self.store.get_product_data()

    async def cart_summary(self) -> CartSummary:
        items = await self.store.get_cart_items()
        return CartSummary(items=items, count=len(items), total=cart_total(items))

    async def pay(self, money: int) -> PaymentInformation:
        carts = await self.store.get_cart_items()
        total_price = cart_total(carts)
        if money < total_price:
            logger.warning("payment of %d rejected, cart total is %d", money, total_price)
            raise InsufficientFunds("money is not enough")

        payment = PaymentInformation(
            product_list=carts,
            total_price=total_price,
            money_paid=money,
            change=money - total_price,
        )

        try:
            await self.reset_cart()
        except CartError as e:
            logger.error("payment of %d accepted but cart reset failed: %s", money, e.detail)
            raise CartResetError(f"payment accepted but cart reset failed: {e.detail}", payment) from e

        logger.info("paid %d for %d line(s), change %d", money, len(carts), payment.change)
        return payment
