"""
In-memory data models for the commerce service.

The service keeps everything in process memory, so the models are plain
dataclasses rather than ORM rows.  Each model knows how to serialise
itself to the camelCase JSON shape the load-test scenarios expect.

Key Concepts Demonstrated:
- ``str``/``Enum`` dual inheritance for ergonomic serialisation
- Safe serialisation that excludes sensitive fields
- Timezone-aware datetime handling
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ProductCategory(str, Enum):
    """The fixed set of catalog categories."""

    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    BOOKS = "Books"
    HOME = "Home"


class OrderStatus(str, Enum):
    """Order lifecycle statuses.  Only ``PENDING`` is ever assigned."""

    PENDING = "pending"


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc_iso(value: datetime) -> str:
    """
    Serialize a datetime to an ISO-8601 UTC string.

    Naive values are assumed to be UTC; aware values are converted.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat()


@dataclass
class Profile:
    name: str
    address: str = ""
    phone: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "address": self.address, "phone": self.phone}


@dataclass
class User:
    """
    A registered shopper.

    Attributes:
        id: Opaque identifier (``user_<n>`` for seeded accounts, a uuid4
            hex string for self-registered ones).
        username: Unique login name.
        email: Unique email address; also accepted as a login name.
        password_hash: Werkzeug-generated hash, never serialised.
        profile: Display name, address and phone.
        created_at: Registration time, UTC.
    """

    id: str
    username: str
    email: str
    password_hash: str
    profile: Profile
    created_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        """
        Return the public user projection.

        ``password_hash`` is intentionally excluded so this output can be
        returned directly in JSON API responses.
        """
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "profile": self.profile.to_dict(),
            "createdAt": to_utc_iso(self.created_at),
        }

    def __repr__(self) -> str:
        return f"<User {self.id}: {self.username}>"


@dataclass
class Product:
    id: str
    name: str
    price: int
    category: str
    stock: int
    description: str
    rating: float
    reviews: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "stock": self.stock,
            "description": self.description,
            "rating": self.rating,
            "reviews": self.reviews,
        }

    def __repr__(self) -> str:
        return f"<Product {self.id}: {self.name}>"


@dataclass
class CartItem:
    id: str
    product_id: str
    quantity: int
    added_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "productId": self.product_id,
            "quantity": self.quantity,
            "addedAt": to_utc_iso(self.added_at),
        }


@dataclass
class Order:
    """
    An order created from a cart.

    ``items`` holds point-in-time copies of the cart entries together
    with the product as it looked when the order was placed, so later
    catalog changes never rewrite order history.
    """

    id: str
    user_id: str
    items: list[dict[str, Any]]
    total: int | float
    status: str = OrderStatus.PENDING.value
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def snapshot_items(cls, entries: list[tuple[CartItem, Product]]) -> list[dict[str, Any]]:
        """Deep-copy cart entries and their products into order line items."""
        return [
            {**item.to_dict(), "product": copy.deepcopy(product.to_dict())}
            for item, product in entries
        ]

    def summary(self) -> dict[str, Any]:
        """Lightweight projection used by listings (no item detail)."""
        return {
            "id": self.id,
            "total": self.total,
            "status": self.status,
            "itemCount": len(self.items),
            "createdAt": to_utc_iso(self.created_at),
        }

    def __repr__(self) -> str:
        return f"<Order {self.id}: {self.total}>"


def newest_first(orders: list[Order]) -> list[Order]:
    """
    Sort orders newest first.

    *orders* must be in placement order.  Orders sharing a timestamp are
    ranked by that position, so the later-placed one still comes first.
    """
    ranked = sorted(
        enumerate(orders),
        key=lambda pair: (pair[1].created_at, pair[0]),
        reverse=True,
    )
    return [order for _, order in ranked]
