from __future__ import annotations

import argparse
from decimal import Decimal

from services.checkout.app.db.database import session_scope
from services.checkout.app.db.init_db import init_db
from services.checkout.app.db.models import (
    Cart,
    CartItem,
    Customer,
    CustomerAddress,
    Product,
)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed a demo customer with an open cart")
    parser.add_argument("--customer-name", default="John Doe")
    parser.add_argument("--customer-email", default="john@example.com")
    parser.add_argument("--street", default="Main St")
    parser.add_argument("--city", default="Springfield")
    parser.add_argument("--state", default="IL")
    parser.add_argument("--zip-code", default="12345")
    args = parser.parse_args()

    init_db()

    with session_scope() as db:
        customer = db.query(Customer).filter(Customer.email == args.customer_email).one_or_none()
        if customer is None:
            customer = Customer(name=args.customer_name, email=args.customer_email)
            db.add(customer)
            db.flush()

        if not customer.addresses:
            customer.addresses.append(
                CustomerAddress(
                    street=args.street,
                    city=args.city,
                    state=args.state,
                    zip_code=args.zip_code,
                )
            )

        products = []
        for name, price in (("Product 1", "10.99"), ("Product 2", "5.50")):
            product = db.query(Product).filter(Product.name == name).one_or_none()
            if product is None:
                product = Product(name=name, price=Decimal(price))
                db.add(product)
            products.append(product)
        db.flush()

        # Always add a fresh open cart so the demo can be checked out again.
        cart = Cart(customer_id=customer.id, checked_out=False)
        cart.items = [
            CartItem(product_id=product.id, quantity=qty, position=position)
            for position, (product, qty) in enumerate(zip(products, (2, 3)))
        ]
        db.add(cart)
        db.flush()

        address_id = customer.addresses[0].id if customer.addresses else None
        print(f"Seeded customer={customer.id} cart={cart.id} address={address_id}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
