from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from packages.shared.schemas.methods import PaymentMethod, ShippingMethod
from services.checkout.app.services.checkout_base import (
    Cart,
    CheckoutConflictError,
    CustomerAddress,
    Order,
)
from services.checkout.app.services.store import InMemoryCartStore, InMemoryOrderStore


def test_cart_lookup_returns_a_copy() -> None:
    store = InMemoryCartStore()
    store.add(Cart(id=1, customer_id=1))

    loaded = store.find_by_id(1)
    assert loaded is not None
    loaded.checked_out = True

    assert store.find_by_id(1).checked_out is False


def test_cart_save_bumps_version() -> None:
    store = InMemoryCartStore()
    store.add(Cart(id=1, customer_id=1))

    cart = store.find_by_id(1)
    cart.checked_out = True
    store.save(cart)

    assert cart.version == 2
    assert store.find_by_id(1).version == 2
    assert store.find_by_id(1).checked_out is True


def test_stale_cart_save_conflicts() -> None:
    store = InMemoryCartStore()
    store.add(Cart(id=1, customer_id=1))

    first = store.find_by_id(1)
    second = store.find_by_id(1)
    store.save(first)

    with pytest.raises(CheckoutConflictError, match="expected_version=1"):
        store.save(second)


def test_order_store_assigns_sequential_ids() -> None:
    store = InMemoryOrderStore()
    address = CustomerAddress(
        id=1, customer_id=1, street="Main St", city="Springfield", state="IL", zip_code="12345"
    )
    order = Order(
        customer_id=1,
        shipping_address=address,
        shipping_method=ShippingMethod.STANDARD,
        payment_method=PaymentMethod.PIX,
        ordered_at=datetime.now(timezone.utc),
        items=(),
        total=Decimal("0"),
    )

    first = store.save(order)
    second = store.save(order)

    assert order.id is None
    assert (first.id, second.id) == (1, 2)
    assert store.get(2) == second
    assert store.all() == [first, second]
