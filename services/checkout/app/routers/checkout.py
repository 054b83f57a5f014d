from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from services.checkout.app.db.deps import get_db
from services.checkout.app.models.checkout import (
    AddressOut,
    CheckoutRequest,
    OrderItemOut,
    OrderOut,
)
from services.checkout.app.services.checkout_base import (
    CheckoutNotFoundError,
    InvalidCartStateError,
    Order,
)
from services.checkout.app.services.checkout_factory import get_checkout_service
from services.checkout.app.services.sql_store import SqlOrderStore
from sqlalchemy.orm import Session

router = APIRouter()


def _raise_checkout_http_error(e: Exception) -> None:
    if isinstance(e, CheckoutNotFoundError):
        raise HTTPException(status_code=404, detail=str(e)) from e

    if isinstance(e, InvalidCartStateError):
        raise HTTPException(status_code=409, detail=str(e)) from e

    raise HTTPException(status_code=500, detail="Internal Server Error") from e


def order_to_out(order: Order) -> OrderOut:
    if order.id is None:
        raise ValueError("Order has not been persisted")

    address = order.shipping_address
    return OrderOut(
        order_id=order.id,
        customer_id=order.customer_id,
        shipping_address=AddressOut(
            id=address.id,
            customer_id=address.customer_id,
            street=address.street,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
        ),
        shipping_method=order.shipping_method,
        payment_method=order.payment_method,
        ordered_at=order.ordered_at.isoformat(),
        items=[
            OrderItemOut(
                product_name=item.product_name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                subtotal=item.subtotal,
            )
            for item in order.items
        ],
        total=order.total,
    )


@router.post("/v1/checkout", response_model=OrderOut)
def checkout(payload: CheckoutRequest, db: Session = Depends(get_db)) -> OrderOut:
    try:
        service = get_checkout_service(db)
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    try:
        order = service.checkout(
            cart_id=payload.cart_id,
            address_id=payload.address_id,
            shipping_method=payload.shipping_method,
            payment_method=payload.payment_method,
        )
        db.commit()
    except Exception as e:
        db.rollback()
        _raise_checkout_http_error(e)

    return order_to_out(order)


@router.get("/v1/orders/{order_id}", response_model=OrderOut)
def get_order(order_id: int, db: Session = Depends(get_db)) -> OrderOut:
    order = SqlOrderStore(db).get(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")

    return order_to_out(order)
