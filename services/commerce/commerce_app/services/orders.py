"""
Order placement and history.

Placing an order turns the user's cart into an immutable :class:`Order`,
takes the ordered units out of stock, and empties the cart.  The stock
check, stock decrement, order insert and cart clear happen under the
store lock so two orders can never oversell the same product.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from ..errors import ValidationError
from ..models import Order, OrderStatus, newest_first
from ..store import CommerceStore
from .cart import CartService

logger = logging.getLogger(__name__)


class OrderService:
    """Order use cases."""

    def __init__(self, store: CommerceStore):
        self.store = store
        self.carts = CartService(store)

    def create_order(self, user_id: str) -> dict[str, Any]:
        """
        Convert the user's cart into a pending order.

        Raises:
            ValidationError: If the cart is empty, or if any item now asks
                for more units than are in stock.  The cart is left intact
                in that case.  The API has no way to shrink or clear a
                cart, so a cart holding more units than remain in stock
                stays unorderable until stock is raised again.
            InternalError: If a cart item references a missing product.
        """
        with self.store.user_lock(user_id), self.store.lock:
            items = self.store.get_cart(user_id)
            if not items:
                raise ValidationError("Cart is empty")

            entries = self.carts.resolve_items(items)

            for item, product in entries:
                if item.quantity > product.stock:
                    raise ValidationError(f"Insufficient stock for {product.name}")

            order = Order(
                id=uuid.uuid4().hex,
                user_id=user_id,
                items=Order.snapshot_items(entries),
                total=CartService.total_of(entries),
                status=OrderStatus.PENDING.value,
            )

            for item, product in entries:
                product.stock -= item.quantity

            self.store.add_order(order)
            self.store.clear_cart(user_id)

        logger.info(
            "Created order %s for user %s: %s items, total %s",
            order.id,
            user_id,
            len(order.items),
            order.total,
        )
        return {
            "message": "Order created successfully",
            "order": {
                "id": order.id,
                "total": order.total,
                "status": order.status,
                "itemCount": len(order.items),
            },
        }

    def list_orders(self, user_id: str) -> dict[str, Any]:
        """Return the user's orders, newest first, as summaries."""
        orders = newest_first(self.store.orders_for_user(user_id))
        return {"orders": [order.summary() for order in orders]}
