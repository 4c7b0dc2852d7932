"""
In-memory state store for the commerce service.

``CommerceStore`` owns the four keyed collections the service works over
(users, products, orders and per-user carts).  One instance is created by
the application factory and shared by every request; tests build their
own instances so no state leaks between them.

Locking model:
    * ``user_lock(user_id)`` serialises cart mutations for one user.
    * ``lock`` guards cross-collection updates (registration uniqueness,
      stock check-and-decrement, order placement).  Readers that iterate a
      collection take a snapshot under it.
"""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from werkzeug.security import generate_password_hash

from .errors import ConflictError
from .models import CartItem, Order, Product, ProductCategory, Profile, User

logger = logging.getLogger(__name__)


class CommerceStore:
    """Process-local repository for users, products, carts and orders."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.products: dict[str, Product] = {}
        self.orders: dict[str, Order] = {}
        self.carts: dict[str, list[CartItem]] = {}

        # Hash indexes for login lookups and uniqueness checks
        self._user_ids_by_username: dict[str, str] = {}
        self._user_ids_by_email: dict[str, str] = {}

        self.lock = threading.RLock()
        self._user_locks: dict[str, threading.Lock] = {}
        self._user_locks_guard = threading.Lock()

    # -----------------------------------------------------------------
    # Seeding
    # -----------------------------------------------------------------

    @classmethod
    def seeded(
        cls,
        *,
        catalog_size: int,
        seed_users: int,
        seed_password: str,
        seed: int | None = None,
    ) -> CommerceStore:
        """Build a store pre-populated with a synthetic catalog and accounts."""
        store = cls()
        rng = random.Random(seed)
        store.seed_catalog(catalog_size, rng)
        store.seed_users(seed_users, seed_password)
        logger.info(
            "Seeded store with %s products and %s users",
            len(store.products),
            len(store.users),
        )
        return store

    def seed_catalog(self, size: int, rng: random.Random) -> None:
        """Generate ``prod_1`` .. ``prod_<size>`` with random attributes."""
        categories = [category.value for category in ProductCategory]
        for index in range(1, size + 1):
            self.add_product(
                Product(
                    id=f"prod_{index}",
                    name=f"Product {index}",
                    price=rng.randint(10, 509),
                    category=rng.choice(categories),
                    stock=rng.randint(1, 100),
                    description=f"High-quality Product {index} with excellent features",
                    rating=round(rng.uniform(3.0, 5.0), 1),
                    reviews=rng.randint(10, 509),
                )
            )

    def seed_users(self, count: int, password: str) -> None:
        """Create ``user1`` .. ``user<count>`` sharing one password."""
        if count <= 0:
            return
        # All seeded accounts share a password, so hash it once.
        password_hash = generate_password_hash(password)
        for index in range(1, count + 1):
            self.add_user(
                User(
                    id=f"user_{index}",
                    username=f"user{index}",
                    email=f"user{index}@example.com",
                    password_hash=password_hash,
                    profile=Profile(
                        name=f"User {index}",
                        address=f"{index} Test Street, Test City",
                        phone=f"555-000-{index:04d}",
                    ),
                )
            )

    # -----------------------------------------------------------------
    # Users
    # -----------------------------------------------------------------

    def add_user(self, user: User) -> User:
        """
        Store a new user, enforcing username and email uniqueness.

        Raises:
            ConflictError: If the username or email is already taken.
        """
        with self.lock:
            if (
                user.username in self._user_ids_by_username
                or user.email in self._user_ids_by_email
            ):
                raise ConflictError("User already exists")
            self.users[user.id] = user
            self._user_ids_by_username[user.username] = user.id
            self._user_ids_by_email[user.email] = user.id
        return user

    def get_user(self, user_id: str) -> User | None:
        return self.users.get(user_id)

    def user_count(self) -> int:
        with self.lock:
            return len(self.users)

    def find_user_by_login(self, login: str) -> User | None:
        """Find a user whose username or email equals *login* exactly."""
        user_id = self._user_ids_by_username.get(login) or self._user_ids_by_email.get(login)
        if user_id is None:
            return None
        return self.users.get(user_id)

    # -----------------------------------------------------------------
    # Products
    # -----------------------------------------------------------------

    def add_product(self, product: Product) -> Product:
        self.products[product.id] = product
        return product

    def get_product(self, product_id: str) -> Product | None:
        return self.products.get(product_id)

    def list_products(self) -> list[Product]:
        """Return all products in catalog order."""
        with self.lock:
            return list(self.products.values())

    # -----------------------------------------------------------------
    # Carts
    # -----------------------------------------------------------------

    @contextmanager
    def user_lock(self, user_id: str) -> Iterator[None]:
        """Hold the per-user lock that serialises cart mutations."""
        with self._user_locks_guard:
            lock = self._user_locks.setdefault(user_id, threading.Lock())
        with lock:
            yield

    def get_cart(self, user_id: str) -> list[CartItem]:
        """Return a shallow copy of the user's cart (empty when absent)."""
        return list(self.carts.get(user_id, []))

    def save_cart(self, user_id: str, items: list[CartItem]) -> None:
        self.carts[user_id] = items

    def clear_cart(self, user_id: str) -> None:
        self.carts.pop(user_id, None)

    # -----------------------------------------------------------------
    # Orders
    # -----------------------------------------------------------------

    def add_order(self, order: Order) -> Order:
        with self.lock:
            self.orders[order.id] = order
        return order

    def list_orders(self) -> list[Order]:
        """Snapshot of all orders in placement order."""
        with self.lock:
            return list(self.orders.values())

    def orders_for_user(self, user_id: str) -> list[Order]:
        """The user's orders in placement order."""
        return [order for order in self.list_orders() if order.user_id == user_id]

    # -----------------------------------------------------------------
    # Introspection
    # -----------------------------------------------------------------

    def counts(self) -> dict[str, int]:
        """Collection sizes, reported by the health endpoint."""
        with self.lock:
            return {
                "users": len(self.users),
                "products": len(self.products),
                "orders": len(self.orders),
                "carts": len(self.carts),
            }
