# cartshop/cart.py
from fastapi import APIRouter, Depends, status

from .deps import get_cart_service
from .schemas import CartAddRequest, CartSummary
from .service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("", response_model=CartSummary)
async def get_cart(service: CartService = Depends(get_cart_service)):
    return await service.cart_summary()


@router.get("/count")
async def get_cart_count(service: CartService = Depends(get_cart_service)):
    items = await service.show_cart()
    return {"count": len(items)}


@router.post("/add", response_model=CartSummary, status_code=status.HTTP_201_CREATED)
async def add_to_cart(
    payload: CartAddRequest,
    service: CartService = Depends(get_cart_service),
):
    await service.add_cart(payload.product_name, payload.quantity)
    return await service.cart_summary()


@router.delete("", status_code=204)
async def clear_cart(service: CartService = Depends(get_cart_service)):
    await service.reset_cart()
    return


# :path keeps product names containing "/" in one segment
@router.delete("/items/{product_name:path}", status_code=204)
async def remove_cart_item(
    product_name: str,
    service: CartService = Depends(get_cart_service),
):
    await service.remove_cart(product_name)
    return
