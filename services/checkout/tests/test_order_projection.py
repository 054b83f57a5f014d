from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from packages.shared.schemas.methods import PaymentMethod, ShippingMethod
from services.checkout.app.routers.checkout import order_to_out
from services.checkout.app.services.checkout_base import CustomerAddress, Order, OrderItem

ADDRESS = CustomerAddress(
    id=1, customer_id=1, street="Main St", city="Springfield", state="IL", zip_code="12345"
)


def _order(order_id: int | None) -> Order:
    return Order(
        id=order_id,
        customer_id=1,
        shipping_address=ADDRESS,
        shipping_method=ShippingMethod.STANDARD,
        payment_method=PaymentMethod.PIX,
        ordered_at=datetime(2026, 1, 2, tzinfo=timezone.utc),
        items=(OrderItem(product_name="Product 1", quantity=2, unit_price=Decimal("10.99")),),
        total=Decimal("21.98"),
    )


def test_order_to_out_maps_persisted_order() -> None:
    out = order_to_out(_order(7))

    assert out.order_id == 7
    assert out.ordered_at == "2026-01-02T00:00:00+00:00"
    assert out.items[0].subtotal == Decimal("21.98")


def test_order_to_out_rejects_unsaved_order() -> None:
    with pytest.raises(ValueError, match="not been persisted"):
        order_to_out(_order(None))
