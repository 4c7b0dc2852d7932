"""
REST API endpoints for the mock commerce service.

Every handler is a thin adapter: it pulls arguments out of the request,
calls the matching service, and returns JSON.  Failures are raised as
:mod:`commerce_app.errors` exceptions and turned into ``{"error": ...}``
responses by the handlers registered in :func:`commerce_app.create_app`.

Endpoints:
    POST /api/auth/register     - Create an account (returns a token)
    POST /api/auth/login        - Log in by username or email
    GET  /api/products          - Paginated, filterable product listing
    GET  /api/products/<id>     - Single product
    GET  /api/cart              - Current user's cart (auth)
    POST /api/cart              - Add a product to the cart (auth)
    POST /api/orders            - Place an order from the cart (auth)
    GET  /api/orders            - Current user's orders (auth)
    GET  /api/analytics         - Store-wide statistics (auth)
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, Response, g, jsonify, request

from ..auth import require_auth
from ..latency import simulated_latency
from ..state import (
    account_service,
    analytics_service,
    cart_service,
    catalog_service,
    order_service,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("commerce_api", __name__)


def _json_body() -> dict[str, Any]:
    """Parsed JSON object body, or ``{}`` for anything else."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# =====================================================================
# Authentication
# =====================================================================


@api_bp.route("/auth/register", methods=["POST"])
@simulated_latency("auth.register")
def register() -> tuple[Response, int]:
    """
    Register a new user account.

    Returns:
        201 with ``token`` and the public ``user`` on success.
        400 if a field is missing; 409 if the username or email is taken.
    """
    data = _json_body()
    result = account_service().register(
        data.get("username"), data.get("email"), data.get("password")
    )
    return jsonify({"message": "User registered successfully", **result}), 201


@api_bp.route("/auth/login", methods=["POST"])
@simulated_latency("auth.login")
def login() -> tuple[Response, int]:
    """
    Authenticate a user and issue a JWT.

    The ``username`` field also accepts an email address.  The vague
    ``"Invalid credentials"`` message avoids revealing which half was
    wrong.
    """
    data = _json_body()
    result = account_service().login(data.get("username"), data.get("password"))
    return jsonify({"message": "Login successful", **result}), 200


# =====================================================================
# Products
# =====================================================================


@api_bp.route("/products", methods=["GET"])
@simulated_latency("products.list")
def list_products() -> tuple[Response, int]:
    """List products with ``page``, ``limit``, ``category``, ``search`` and ``sort``."""
    result = catalog_service().list_products(
        page=request.args.get("page"),
        limit=request.args.get("limit"),
        category=request.args.get("category"),
        search=request.args.get("search"),
        sort=request.args.get("sort"),
    )
    return jsonify(result), 200


@api_bp.route("/products/<product_id>", methods=["GET"])
@simulated_latency("products.get")
def get_product(product_id: str) -> tuple[Response, int]:
    return jsonify(catalog_service().get_product(product_id)), 200


# =====================================================================
# Cart
# =====================================================================


@api_bp.route("/cart", methods=["GET"])
@require_auth
@simulated_latency("cart.get")
def get_cart() -> tuple[Response, int]:
    return jsonify(cart_service().get_cart(g.user_id)), 200


@api_bp.route("/cart", methods=["POST"])
@require_auth
@simulated_latency("cart.add")
def add_to_cart() -> tuple[Response, int]:
    """
    Add a product to the current user's cart.

    Expects ``productId`` and an optional ``quantity`` (default 1).
    """
    data = _json_body()
    result = cart_service().add_item(g.user_id, data.get("productId"), data.get("quantity"))
    return jsonify(result), 200


# =====================================================================
# Orders
# =====================================================================


@api_bp.route("/orders", methods=["POST"])
@require_auth
@simulated_latency("orders.create")
def create_order() -> tuple[Response, int]:
    logger.info("POST /api/orders - Placing order for user_id=%s", g.user_id)
    return jsonify(order_service().create_order(g.user_id)), 201


@api_bp.route("/orders", methods=["GET"])
@require_auth
@simulated_latency("orders.list")
def list_orders() -> tuple[Response, int]:
    return jsonify(order_service().list_orders(g.user_id)), 200


# =====================================================================
# Analytics
# =====================================================================


@api_bp.route("/analytics", methods=["GET"])
@require_auth
@simulated_latency("analytics")
def get_analytics() -> tuple[Response, int]:
    """Store-wide statistics; carries the longest simulated latency."""
    return jsonify(analytics_service().get_analytics()), 200
