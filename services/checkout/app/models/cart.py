from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field
from services.checkout.app.models.checkout import AddressOut


class CustomerOut(BaseModel):
    id: int
    name: str
    email: str
    addresses: list[AddressOut] = Field(default_factory=list)


class CartItemOut(BaseModel):
    product_id: int
    product_name: str
    unit_price: Decimal
    quantity: int


class CartOut(BaseModel):
    cart_id: int
    customer: CustomerOut
    items: list[CartItemOut] = Field(default_factory=list)
    checked_out: bool
