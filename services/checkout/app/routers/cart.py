from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from services.checkout.app.db.deps import get_db
from services.checkout.app.db.models import Cart
from services.checkout.app.models.cart import CartItemOut, CartOut, CustomerOut
from services.checkout.app.models.checkout import AddressOut
from sqlalchemy.orm import Session

router = APIRouter()


@router.get("/v1/carts/{cart_id}", response_model=CartOut)
def get_cart(cart_id: int, db: Session = Depends(get_db)) -> CartOut:
    cart = db.get(Cart, cart_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="Cart not found")

    customer = cart.customer
    return CartOut(
        cart_id=cart.id,
        customer=CustomerOut(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            addresses=[
                AddressOut(
                    id=a.id,
                    customer_id=a.customer_id,
                    street=a.street,
                    city=a.city,
                    state=a.state,
                    zip_code=a.zip_code,
                )
                for a in customer.addresses
            ],
        ),
        items=[
            CartItemOut(
                product_id=it.product_id,
                product_name=it.product.name,
                unit_price=it.product.price,
                quantity=it.quantity,
            )
            for it in cart.items
        ],
        checked_out=cart.checked_out,
    )
