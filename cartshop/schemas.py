# cartshop/schemas.py
from pydantic import BaseModel
from typing import List


# 🛍️ Product
class ProductOut(BaseModel):
    name: str
    price: int

    class Config:
        from_attributes = True


# 🛒 Cart line
class CartItemOut(BaseModel):
    product_name: str
    price: int
    quantity: int

    class Config:
        from_attributes = True


# 💳 Result of a successful payment (not persisted)
class PaymentInformation(BaseModel):
    product_list: List[CartItemOut]
    total_price: int
    money_paid: int
    change: int


class CartAddRequest(BaseModel):
    product_name: str
    quantity: int


class PayRequest(BaseModel):
    money: int


# 📊 Cart summary (single response format for /api/cart)
class CartSummary(BaseModel):
    items: List[CartItemOut]
    count: int
    total: int
