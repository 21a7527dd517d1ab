from fastapi import Request

from .service import CartService


def get_cart_service(request: Request) -> CartService:
    return CartService(request.app.state.store)
