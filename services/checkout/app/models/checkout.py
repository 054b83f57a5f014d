from __future__ import annotations

from decimal import Decimal

from packages.shared.schemas.methods import PaymentMethod, ShippingMethod
from pydantic import BaseModel, Field


class CheckoutRequest(BaseModel):
    cart_id: int
    address_id: int
    shipping_method: ShippingMethod
    payment_method: PaymentMethod


class AddressOut(BaseModel):
    id: int
    customer_id: int
    street: str
    city: str
    state: str
    zip_code: str


class OrderItemOut(BaseModel):
    product_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


class OrderOut(BaseModel):
    order_id: int
    customer_id: int
    shipping_address: AddressOut
    shipping_method: ShippingMethod
    payment_method: PaymentMethod
    ordered_at: str

    items: list[OrderItemOut] = Field(default_factory=list)
    total: Decimal
