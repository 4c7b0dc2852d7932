"""
Dashboard service Flask application factory.

Builds the single-page load-testing dashboard: a server-rendered page, a
small JSON API the page polls, a background health monitor pointed at the
commerce API, and the mock test runner.

Key Concepts Demonstrated:
- Application factory pattern (``create_app``)
- Stateless presentation service with in-memory UI state
- Injected collaborators (monitor, runner) for isolated tests
"""

from __future__ import annotations

import logging

from flask import Flask

try:
    from services.dashboard.config import get_config
except ModuleNotFoundError:  # pragma: no cover - fallback for service-local execution
    from config import get_config

from .health import HealthMonitor
from .runner import TestRunner

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

MONITOR_EXTENSION_KEY = "dashboard_monitor"
RUNNER_EXTENSION_KEY = "dashboard_runner"


def create_app(
    config_name: str | None = None,
    monitor: HealthMonitor | None = None,
    runner: TestRunner | None = None,
) -> Flask:
    """
    Create and configure the dashboard application.

    Args:
        config_name: Optional configuration environment name.  When
            *None*, the value is read from ``FLASK_ENV``.
        monitor: Health monitor to use; built from config when omitted.
        runner: Test runner to use; built around *monitor* when omitted.

    Returns:
        A configured Flask application.  The monitor's polling thread is
        started only when ``HEALTH_MONITOR_ENABLED`` is set.
    """
    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating dashboard app with config: %s", config_class.__name__)

    if monitor is None:
        monitor = HealthMonitor(
            app.config["COMMERCE_API_URL"],
            interval=app.config["HEALTH_POLL_INTERVAL"],
            timeout=app.config["HEALTH_CHECK_TIMEOUT"],
        )
    if runner is None:
        runner = TestRunner(
            monitor,
            min_delay=app.config["TEST_MIN_DELAY_SECONDS"],
            max_delay=app.config["TEST_MAX_DELAY_SECONDS"],
        )
    app.extensions[MONITOR_EXTENSION_KEY] = monitor
    app.extensions[RUNNER_EXTENSION_KEY] = runner

    from .routes.views import views_bp

    app.register_blueprint(views_bp)

    if app.config["HEALTH_MONITOR_ENABLED"]:
        monitor.start()

    return app
