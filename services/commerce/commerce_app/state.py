"""Accessors for the per-app store and the services built on it."""

from __future__ import annotations

from flask import current_app

from .services import (
    AccountService,
    AnalyticsService,
    CartService,
    CatalogService,
    OrderService,
)
from .store import CommerceStore

STORE_EXTENSION_KEY = "commerce_store"


def get_store() -> CommerceStore:
    """Return the store attached to the current application."""
    return current_app.extensions[STORE_EXTENSION_KEY]


def account_service() -> AccountService:
    cfg = current_app.config
    return AccountService(
        get_store(),
        private_key=cfg["JWT_PRIVATE_KEY"],
        public_key=cfg["JWT_PUBLIC_KEY"],
        expiry_hours=cfg["JWT_EXPIRY_HOURS"],
        clock_skew_seconds=cfg.get("JWT_CLOCK_SKEW_SECONDS", 30),
    )


def catalog_service() -> CatalogService:
    return CatalogService(get_store(), max_limit=current_app.config.get("MAX_PAGE_LIMIT", 100))


def cart_service() -> CartService:
    return CartService(get_store())


def order_service() -> OrderService:
    return OrderService(get_store())


def analytics_service() -> AnalyticsService:
    return AnalyticsService(get_store())
