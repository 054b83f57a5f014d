from __future__ import annotations

import threading
from dataclasses import replace
from itertools import count

from services.checkout.app.services.checkout_base import (
    Cart,
    CheckoutConflictError,
    CustomerAddress,
    Order,
)


def _copy_cart(cart: Cart) -> Cart:
    return replace(cart, items=list(cart.items))


class InMemoryCartStore:
    """Cart store backed by a dict.

    Lookups hand out copies, so a caller's edits only become visible through save(), which
    compares the caller's version with the stored one.
    """

    def __init__(self) -> None:
        self._carts: dict[int, Cart] = {}
        self._lock = threading.Lock()

    def add(self, cart: Cart) -> None:
        self._carts[cart.id] = _copy_cart(cart)

    def find_by_id(self, cart_id: int) -> Cart | None:
        with self._lock:
            cart = self._carts.get(cart_id)
            return _copy_cart(cart) if cart is not None else None

    def save(self, cart: Cart) -> Cart:
        with self._lock:
            current = self._carts.get(cart.id)
            if current is not None and current.version != cart.version:
                raise CheckoutConflictError(cart.id, cart.version)

            cart.version += 1
            self._carts[cart.id] = _copy_cart(cart)
            return cart


class InMemoryAddressStore:
    def __init__(self) -> None:
        self._addresses: dict[int, CustomerAddress] = {}

    def add(self, address: CustomerAddress) -> None:
        self._addresses[address.id] = address

    def find_by_id(self, address_id: int) -> CustomerAddress | None:
        return self._addresses.get(address_id)


class InMemoryOrderStore:
    def __init__(self) -> None:
        self._orders: dict[int, Order] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def save(self, order: Order) -> Order:
        with self._lock:
            saved = replace(order, id=next(self._ids))
            self._orders[saved.id] = saved
            return saved

    def get(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def all(self) -> list[Order]:
        return list(self._orders.values())
