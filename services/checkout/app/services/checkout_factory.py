from __future__ import annotations

import os

from services.checkout.app.services.checkout import CheckoutService
from services.checkout.app.services.sql_store import SqlAddressStore, SqlCartStore, SqlOrderStore
from sqlalchemy.orm import Session

_TRUTHY = {"1", "true", "yes", "y"}
_FALSY = {"0", "false", "no", "n", ""}


def enforce_address_owner() -> bool:
    """Read the address ownership policy.

    Off by default: any existing address may be used for any cart. Set
    CHECKOUT_ENFORCE_ADDRESS_OWNER=true to only accept the cart customer's own addresses.
    """

    raw = os.getenv("CHECKOUT_ENFORCE_ADDRESS_OWNER", "false").strip().lower()

    if raw in _TRUTHY:
        return True

    if raw in _FALSY:
        return False

    raise ValueError(
        f"Unknown CHECKOUT_ENFORCE_ADDRESS_OWNER={raw!r}. Expected true or false."
    )


def get_checkout_service(db: Session) -> CheckoutService:
    return CheckoutService(
        carts=SqlCartStore(db),
        addresses=SqlAddressStore(db),
        orders=SqlOrderStore(db),
        enforce_address_owner=enforce_address_owner(),
    )
