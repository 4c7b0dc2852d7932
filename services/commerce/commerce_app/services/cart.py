"""
Per-user shopping carts.

Each user owns at most one cart: an ordered list of :class:`CartItem`
entries keyed by user id in the store.  Mutations for one user are
serialised with :meth:`CommerceStore.user_lock` so concurrent adds cannot
lose an update.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from ..errors import InternalError, NotFoundError, ValidationError
from ..models import CartItem, Product
from ..store import CommerceStore

logger = logging.getLogger(__name__)


def validate_quantity(quantity: Any) -> int:
    """Return *quantity* as a positive int, defaulting to 1 when omitted."""
    if quantity is None:
        return 1
    # bool is an int subclass; ``true`` is not a quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError("quantity must be a positive integer")
    return quantity


class CartService:
    """Cart queries and commands."""

    def __init__(self, store: CommerceStore):
        self.store = store

    def resolve_items(self, items: list[CartItem]) -> list[tuple[CartItem, Product]]:
        """
        Pair every cart item with its product.

        Raises:
            InternalError: If an item points at a product that no longer
                exists.
        """
        resolved = []
        for item in items:
            product = self.store.get_product(item.product_id)
            if product is None:
                raise InternalError(
                    f"Cart item {item.id} references missing product {item.product_id}"
                )
            resolved.append((item, product))
        return resolved

    @staticmethod
    def total_of(entries: list[tuple[CartItem, Product]]) -> int | float:
        return sum(product.price * item.quantity for item, product in entries)

    def get_cart(self, user_id: str) -> dict[str, Any]:
        """Return the cart with each item's product and the running total."""
        items = self.store.get_cart(user_id)
        entries = self.resolve_items(items)
        return {
            "items": [
                {**item.to_dict(), "product": product.to_dict()}
                for item, product in entries
            ],
            "total": self.total_of(entries),
            "itemCount": len(items),
        }

    def add_item(self, user_id: str, product_id: Any, quantity: Any = None) -> dict[str, Any]:
        """
        Add *quantity* units of a product to the user's cart.

        An existing entry for the product has its quantity increased;
        otherwise a new entry is appended.  The resulting quantity must not
        exceed the product's current stock.

        Raises:
            ValidationError: Missing product id, bad quantity, or not enough
                stock.
            NotFoundError: Unknown product.
        """
        if not product_id or not isinstance(product_id, str):
            raise ValidationError("Product ID required")
        quantity = validate_quantity(quantity)

        product = self.store.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found")

        with self.store.user_lock(user_id):
            items = self.store.get_cart(user_id)
            existing = next((i for i in items if i.product_id == product_id), None)
            already_in_cart = existing.quantity if existing else 0

            if already_in_cart + quantity > product.stock:
                raise ValidationError("Insufficient stock")

            if existing:
                existing.quantity += quantity
            else:
                items.append(
                    CartItem(id=uuid.uuid4().hex, product_id=product_id, quantity=quantity)
                )
            self.store.save_cart(user_id, items)

        logger.info(
            "User %s added %s x %s to cart (%s entries)",
            user_id,
            quantity,
            product_id,
            len(items),
        )
        return {"message": "Item added to cart", "cartSize": len(items)}
