"""
Dashboard page and the JSON endpoints its script polls.

Routes:
    GET  /                      - Render the dashboard page
    GET  /api/status            - Server indicator plus all test records
    POST /api/tests/<name>/run  - Start a mock test run
    GET  /api/health            - The dashboard's own liveness probe
"""

from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, jsonify, render_template

from ..health import HealthMonitor
from ..models import (
    LOAD_PHASES,
    PERFORMANCE_METRICS,
    PERFORMANCE_SUMMARY,
    SCENARIO_WEIGHTS,
)
from ..runner import DashboardError, TestRunner

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


def _monitor() -> HealthMonitor:
    return current_app.extensions["dashboard_monitor"]


def _runner() -> TestRunner:
    return current_app.extensions["dashboard_runner"]


def _status_payload() -> dict[str, object]:
    runner = _runner()
    return {
        **_monitor().to_dict(),
        "current_test": runner.current_test,
        "tests": [
            {**test.to_dict(), "can_run": runner.can_run(test.name)}
            for test in runner.tests
        ],
    }


@views_bp.errorhandler(DashboardError)
def handle_dashboard_error(error: DashboardError) -> tuple[Response, int]:
    return jsonify({"error": error.message}), error.status_code


@views_bp.route("/")
def index() -> str:
    """Render the dashboard with the current state baked in."""
    runner = _runner()
    return render_template(
        "dashboard.html",
        server_online=_monitor().online,
        tests=runner.tests,
        can_run={test.name: runner.can_run(test.name) for test in runner.tests},
        metrics=PERFORMANCE_METRICS,
        scenarios=SCENARIO_WEIGHTS,
        phases=LOAD_PHASES,
        summary=PERFORMANCE_SUMMARY,
        commerce_api_url=current_app.config["COMMERCE_API_URL"],
        poll_interval_ms=int(current_app.config["HEALTH_POLL_INTERVAL"] * 1000),
    )


@views_bp.route("/api/status", methods=["GET"])
def status() -> tuple[Response, int]:
    return jsonify(_status_payload()), 200


@views_bp.route("/api/tests/<name>/run", methods=["POST"])
def run_test(name: str) -> tuple[Response, int]:
    """
    Start a mock run.

    Returns:
        202 with the test record; 404 unknown test; 409 already running;
        503 while the commerce API is offline.
    """
    test = _runner().run(name)
    return jsonify(test.to_dict()), 202


@views_bp.route("/api/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    return jsonify({"status": "healthy", "service": "dashboard"}), 200
