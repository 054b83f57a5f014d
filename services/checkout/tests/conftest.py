from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

import pytest


@dataclass
class SeededIds:
    customer_id: int
    address_id: int
    cart_id: int
    empty_cart_id: int
    other_customer_address_id: int


@pytest.fixture()
def sqlite_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    db_path = tmp_path / "checkout_test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_path}")
    monkeypatch.setenv("CHECKOUT_DB_AUTO_CREATE", "true")
    monkeypatch.delenv("CHECKOUT_ENFORCE_ADDRESS_OWNER", raising=False)
    return db_path


def seed_checkout_data() -> SeededIds:
    from services.checkout.app.db.database import session_scope
    from services.checkout.app.db.init_db import init_db
    from services.checkout.app.db.models import (
        Cart,
        CartItem,
        Customer,
        CustomerAddress,
        Product,
    )

    init_db()

    with session_scope() as db:
        customer = Customer(name="John Doe", email="john@example.com")
        other = Customer(name="Jane Roe", email="jane@example.com")
        customer.addresses.append(
            CustomerAddress(street="Main St", city="Springfield", state="IL", zip_code="12345")
        )
        other.addresses.append(
            CustomerAddress(street="Elm St", city="Shelbyville", state="IL", zip_code="54321")
        )

        product_1 = Product(name="Product 1", price=Decimal("10.99"))
        product_2 = Product(name="Product 2", price=Decimal("5.50"))

        cart = Cart(customer=customer, checked_out=False)
        cart.items = [
            CartItem(product=product_1, quantity=2, position=0),
            CartItem(product=product_2, quantity=3, position=1),
        ]
        empty_cart = Cart(customer=customer, checked_out=False)

        db.add_all([customer, other, product_1, product_2, cart, empty_cart])
        db.flush()

        return SeededIds(
            customer_id=customer.id,
            address_id=customer.addresses[0].id,
            cart_id=cart.id,
            empty_cart_id=empty_cart.id,
            other_customer_address_id=other.addresses[0].id,
        )


@pytest.fixture()
def seeded(sqlite_db: Path) -> SeededIds:
    del sqlite_db
    return seed_checkout_data()
