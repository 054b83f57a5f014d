from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from packages.shared.schemas.methods import PaymentMethod, ShippingMethod
from services.checkout.app.db import models
from services.checkout.app.services.checkout_base import (
    Cart,
    CartItem,
    CheckoutConflictError,
    CustomerAddress,
    Order,
    OrderItem,
    Product,
)
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError


def to_address(row: models.CustomerAddress) -> CustomerAddress:
    return CustomerAddress(
        id=row.id,
        customer_id=row.customer_id,
        street=row.street,
        city=row.city,
        state=row.state,
        zip_code=row.zip_code,
    )


def to_product(row: models.Product) -> Product:
    return Product(id=row.id, name=row.name, price=row.price)


def to_cart(row: models.Cart) -> Cart:
    return Cart(
        id=row.id,
        customer_id=row.customer_id,
        items=[CartItem(product=to_product(it.product), quantity=it.quantity) for it in row.items],
        checked_out=row.checked_out,
        version=row.version,
    )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored timestamps are always UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_order(row: models.Order) -> Order:
    return Order(
        id=row.id,
        customer_id=row.customer_id,
        shipping_address=to_address(row.shipping_address),
        shipping_method=ShippingMethod(row.shipping_method),
        payment_method=PaymentMethod(row.payment_method),
        ordered_at=_as_utc(row.ordered_at),
        items=tuple(
            OrderItem(product_name=it.product_name, quantity=it.quantity, unit_price=it.unit_price)
            for it in row.items
        ),
        total=row.total,
    )


class SqlCartStore:
    """Cart store on a SQLAlchemy session.

    save() flushes but does not commit; the caller owns the transaction.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, cart_id: int) -> Cart | None:
        row = self._db.get(models.Cart, cart_id)
        if row is None:
            return None
        return to_cart(row)

    def save(self, cart: Cart) -> Cart:
        row = self._db.get(models.Cart, cart.id)
        if row is None or row.version != cart.version:
            raise CheckoutConflictError(cart.id, cart.version)

        row.checked_out = cart.checked_out
        try:
            self._db.flush()
        except StaleDataError as e:
            raise CheckoutConflictError(cart.id, cart.version) from e

        cart.version = row.version
        return cart


class SqlAddressStore:
    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, address_id: int) -> CustomerAddress | None:
        row = self._db.get(models.CustomerAddress, address_id)
        if row is None:
            return None
        return to_address(row)


class SqlOrderStore:
    def __init__(self, db: Session) -> None:
        self._db = db

    def save(self, order: Order) -> Order:
        row = models.Order(
            customer_id=order.customer_id,
            shipping_address_id=order.shipping_address.id,
            shipping_method=order.shipping_method.value,
            payment_method=order.payment_method.value,
            total=order.total,
            ordered_at=order.ordered_at,
            items=[
                models.OrderItem(
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    position=position,
                )
                for position, item in enumerate(order.items)
            ],
        )
        self._db.add(row)
        self._db.flush()
        return replace(order, id=row.id)

    def get(self, order_id: int) -> Order | None:
        row = self._db.get(models.Order, order_id)
        if row is None:
            return None
        return to_order(row)
