# cartshop/shop.py
from fastapi import APIRouter, Depends
from typing import List

from .deps import get_cart_service
from .schemas import ProductOut
from .service import CartService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
async def list_products(service: CartService = Depends(get_cart_service)):
    return await service.get_all_product()
