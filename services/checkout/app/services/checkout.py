from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from packages.shared.schemas.methods import PaymentMethod, ShippingMethod
from services.checkout.app.services.checkout_base import (
    AddressNotFoundError,
    AddressStore,
    Cart,
    CartAlreadyCheckedOutError,
    CartNotFoundError,
    CartStore,
    CheckoutConflictError,
    CustomerAddress,
    Order,
    OrderItem,
    OrderStore,
)
from services.checkout.app.utils.logging import get_logger

logger = get_logger(__name__)


def snapshot_items(cart: Cart) -> tuple[OrderItem, ...]:
    return tuple(
        OrderItem(
            product_name=item.product.name,
            quantity=item.quantity,
            unit_price=item.product.price,
        )
        for item in cart.items
    )


def order_total(items: tuple[OrderItem, ...]) -> Decimal:
    return sum((item.subtotal for item in items), Decimal("0"))


class CheckoutService:
    """Turns an open cart into a persisted order.

    The cart is resolved and guarded before the address store is consulted, and nothing is
    written until the order has been fully built. Quantities are taken as given.
    """

    def __init__(
        self,
        carts: CartStore,
        addresses: AddressStore,
        orders: OrderStore,
        *,
        enforce_address_owner: bool = False,
    ) -> None:
        self._carts = carts
        self._addresses = addresses
        self._orders = orders
        self._enforce_address_owner = enforce_address_owner

    def checkout(
        self,
        cart_id: int,
        address_id: int,
        shipping_method: ShippingMethod,
        payment_method: PaymentMethod,
    ) -> Order:
        log = logger.bind(cart_id=cart_id, address_id=address_id)
        log.info("checkout_started")

        cart = self._carts.find_by_id(cart_id)
        if cart is None:
            log.warning("checkout_rejected", reason="cart_not_found")
            raise CartNotFoundError(cart_id)

        if cart.checked_out:
            log.warning("checkout_rejected", reason="already_checked_out")
            raise CartAlreadyCheckedOutError(cart.id)

        address = self._resolve_address(cart, address_id)
        if address is None:
            log.warning("checkout_rejected", reason="address_not_found")
            raise AddressNotFoundError(address_id)

        items = snapshot_items(cart)
        order = Order(
            customer_id=cart.customer_id,
            shipping_address=address,
            shipping_method=shipping_method,
            payment_method=payment_method,
            ordered_at=datetime.now(timezone.utc),
            items=items,
            total=order_total(items),
        )

        cart.checked_out = True
        try:
            self._carts.save(cart)
        except CheckoutConflictError:
            cart.checked_out = False
            log.warning("checkout_rejected", reason="concurrent_checkout")
            raise

        try:
            saved = self._orders.save(order)
        except Exception:
            # Put the cart back so it can be checked out again.
            cart.checked_out = False
            self._carts.save(cart)
            log.warning("checkout_rejected", reason="order_save_failed")
            raise

        log.info(
            "checkout_completed",
            order_id=saved.id,
            item_count=len(saved.items),
            total=str(saved.total),
        )
        return saved

    def _resolve_address(self, cart: Cart, address_id: int) -> CustomerAddress | None:
        address = self._addresses.find_by_id(address_id)
        if address is None:
            return None

        # Another customer's address is reported as missing rather than forbidden.
        if self._enforce_address_owner and address.customer_id != cart.customer_id:
            return None

        return address
