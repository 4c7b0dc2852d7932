"""
Health-check endpoint.

``GET /health`` is public and sits outside ``/api`` so the dashboard (and
load balancers) can poll it without a token.
"""

from __future__ import annotations

import resource
import sys
import time
from datetime import datetime, timezone

from flask import Blueprint, Response, jsonify

from ..state import get_store

health_bp = Blueprint("health", __name__)

_PROCESS_STARTED = time.monotonic()


def _peak_rss_kb() -> int:
    """Peak resident set size of this process in KiB."""
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # macOS reports bytes, Linux reports KiB
    if sys.platform == "darwin":
        return peak // 1024
    return peak


@health_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """
    Liveness probe.

    Returns:
        200 with ``status``, ``timestamp``, ``uptime`` (seconds since the
        process started) and ``memory`` (peak RSS plus collection sizes).
    """
    return (
        jsonify(
            {
                "status": "healthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "uptime": round(time.monotonic() - _PROCESS_STARTED, 3),
                "memory": {"peakRssKb": _peak_rss_kb(), **get_store().counts()},
            }
        ),
        200,
    )
