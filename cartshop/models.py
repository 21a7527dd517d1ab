from sqlalchemy import Column, Integer, String, CheckConstraint, Index

from .database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    price = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_nonneg"),
    )


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    position = Column(Integer, nullable=False)
    product_name = Column(String(255), nullable=False, unique=True)  # one line per product
    price = Column(Integer, nullable=False)  # price snapshot taken when the line was added
    quantity = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_cartitem_price_nonneg"),
        CheckConstraint("quantity > 0", name="ck_cartitem_quantity_pos"),
        Index("ix_cart_items_position", "position"),
    )
