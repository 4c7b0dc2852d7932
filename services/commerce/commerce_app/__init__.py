"""
Mock commerce service Flask application factory.

Provides the ``create_app`` factory function used to build the commerce
API that load tests are pointed at: authentication, a synthetic product
catalog, carts, orders and analytics, all over in-memory state.

Key Concepts Demonstrated:
- Application factory pattern (create_app)
- Injected state store so every test gets an isolated dataset
- Blueprint-based route registration
- Centralised JSON error handling for domain exceptions
"""

from __future__ import annotations

import logging

from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

try:
    from services.commerce.config import get_config, load_commerce_keys
except ModuleNotFoundError:  # pragma: no cover - fallback for service-local execution
    from config import get_config, load_commerce_keys

from .errors import CommerceError
from .latency import EXTENSION_KEY as LATENCY_EXTENSION_KEY
from .latency import SimulatedLatency
from .state import STORE_EXTENSION_KEY
from .store import CommerceStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    """Map domain exceptions and routing misses to JSON error bodies."""

    @app.errorhandler(CommerceError)
    def handle_commerce_error(error: CommerceError) -> tuple[Response, int]:
        if error.status_code >= 500:
            logger.error("Internal failure: %s", error.message)
        return jsonify({"error": error.public_message}), error.status_code

    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_unmatched(_error) -> tuple[Response, int]:
        return jsonify({"error": "Endpoint not found"}), 404

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception) -> tuple[Response, int]:
        if isinstance(error, HTTPException):
            return jsonify({"error": error.description}), error.code
        logger.exception("Unhandled exception: %s", error)
        return jsonify({"error": "Internal server error"}), 500


def _register_response_headers(app: Flask) -> None:
    """Add CORS and static security headers to every response."""

    @app.after_request
    def add_response_headers(response: Response) -> Response:
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = app.config["FRAME_OPTIONS"]
        response.headers["Referrer-Policy"] = "no-referrer"
        # Let a browser-hosted dashboard call the API cross-origin
        response.headers["Access-Control-Allow-Origin"] = app.config["CORS_ALLOWED_ORIGIN"]
        response.headers["Access-Control-Allow-Headers"] = "Authorization, Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        return response


def create_app(
    config_name: str | None = None,
    store: CommerceStore | None = None,
    latency: SimulatedLatency | None = None,
) -> Flask:
    """
    Create and configure the commerce service Flask application.

    Args:
        config_name: The configuration environment to load (e.g.
            ``"development"``, ``"testing"``, ``"production"``).  When
            ``None``, the value is resolved from the ``FLASK_ENV``
            environment variable, defaulting to ``"development"``.
        store: State store to serve.  When ``None``, a store seeded from
            the configured catalog size and seed users is created.
        latency: Simulated-latency hook.  When ``None``, one is built from
            ``SIMULATED_LATENCY_ENABLED`` and ``SIMULATED_LATENCY_SCALE``.

    Returns:
        A fully configured :class:`~flask.Flask` application instance.
    """
    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    private_key, public_key = load_commerce_keys(
        testing=bool(app.config.get("TESTING")),
        allow_dev_keys=app.config["ALLOW_DEV_KEYS"],
    )
    app.config["JWT_PRIVATE_KEY"] = private_key
    app.config["JWT_PUBLIC_KEY"] = public_key

    logger.info("Creating commerce service app with config: %s", config_class.__name__)

    if store is None:
        store = CommerceStore.seeded(
            catalog_size=app.config["CATALOG_SIZE"],
            seed_users=app.config["SEED_USERS"],
            seed_password=app.config["SEED_USER_PASSWORD"],
            seed=app.config.get("CATALOG_SEED"),
        )
    if latency is None:
        latency = SimulatedLatency(
            enabled=app.config["SIMULATED_LATENCY_ENABLED"],
            scale=app.config["SIMULATED_LATENCY_SCALE"],
        )
    app.extensions[STORE_EXTENSION_KEY] = store
    app.extensions[LATENCY_EXTENSION_KEY] = latency

    # Import inside the factory to avoid circular imports
    from .routes.api import api_bp
    from .routes.health import health_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    _register_error_handlers(app)
    _register_response_headers(app)

    return app
