# cartshop/checkout.py
from fastapi import APIRouter, Depends

from .deps import get_cart_service
from .schemas import PaymentInformation, PayRequest
from .service import CartService

router = APIRouter(prefix="/api/checkout", tags=["checkout"])


# 💳 Pay for the whole cart; the cart is emptied once the payment is accepted
@router.post("/pay", response_model=PaymentInformation)
async def pay(payload: PayRequest, service: CartService = Depends(get_cart_service)):
    return await service.pay(payload.money)
