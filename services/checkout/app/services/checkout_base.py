from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Protocol

from packages.shared.schemas.methods import PaymentMethod, ShippingMethod


class CheckoutError(Exception):
    """Base class for checkout errors."""


class CheckoutNotFoundError(CheckoutError):
    entity = "Entity"

    def __init__(self, entity_id: int) -> None:
        super().__init__(f"{self.entity} not found: id={entity_id}")
        self.entity_id = entity_id


class CartNotFoundError(CheckoutNotFoundError):
    entity = "Cart"


class AddressNotFoundError(CheckoutNotFoundError):
    entity = "Address"


class InvalidCartStateError(CheckoutError):
    """The cart cannot be checked out in its current state."""


class CartAlreadyCheckedOutError(InvalidCartStateError):
    def __init__(self, cart_id: int) -> None:
        super().__init__(f"Cart is already checked out: id={cart_id}")
        self.cart_id = cart_id


class CheckoutConflictError(InvalidCartStateError):
    def __init__(self, cart_id: int, expected_version: int) -> None:
        super().__init__(
            "Cart was modified by a concurrent checkout. "
            f"id={cart_id} expected_version={expected_version}"
        )
        self.cart_id = cart_id
        self.expected_version = expected_version


@dataclass(frozen=True, slots=True)
class Product:
    id: int
    name: str
    price: Decimal


@dataclass(frozen=True, slots=True)
class CartItem:
    # Resolved once by the cart store when the cart is loaded.
    product: Product
    quantity: int


@dataclass(slots=True)
class Cart:
    id: int
    customer_id: int
    items: list[CartItem] = field(default_factory=list)
    checked_out: bool = False
    version: int = 1


@dataclass(frozen=True, slots=True)
class CustomerAddress:
    id: int
    customer_id: int
    street: str
    city: str
    state: str
    zip_code: str


@dataclass(frozen=True, slots=True)
class OrderItem:
    product_name: str
    quantity: int
    unit_price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True, slots=True)
class Order:
    customer_id: int
    shipping_address: CustomerAddress
    shipping_method: ShippingMethod
    payment_method: PaymentMethod
    ordered_at: datetime
    items: tuple[OrderItem, ...]
    total: Decimal
    id: int | None = None


class CartStore(Protocol):
    def find_by_id(self, cart_id: int) -> Cart | None: ...

    def save(self, cart: Cart) -> Cart:
        """Persist the cart, raising CheckoutConflictError on a stale version."""
        ...


class AddressStore(Protocol):
    def find_by_id(self, address_id: int) -> CustomerAddress | None: ...


class OrderStore(Protocol):
    def save(self, order: Order) -> Order: ...
