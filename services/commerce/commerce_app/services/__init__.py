"""
Use-case classes for the commerce service.

Each service wraps the shared :class:`~commerce_app.store.CommerceStore`
and raises :mod:`commerce_app.errors` exceptions on failure; the route
layer only translates HTTP requests into calls on these classes.
"""

from .accounts import AccountService
from .analytics import AnalyticsService
from .cart import CartService
from .catalog import CatalogService
from .orders import OrderService

__all__ = [
    "AccountService",
    "AnalyticsService",
    "CartService",
    "CatalogService",
    "OrderService",
]
