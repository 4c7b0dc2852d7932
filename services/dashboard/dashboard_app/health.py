"""
Commerce API availability monitor.

``HealthMonitor`` polls ``<COMMERCE_API_URL>/health`` on a fixed interval
from a daemon thread and reduces the answer to a single online/offline
flag.  There is no retry or backoff: a failed poll flips the flag to
offline until the next successful one.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone

import requests

logger = logging.getLogger(__name__)


class HealthMonitor:
    """
    Track whether the commerce API answers its health probe.

    Args:
        base_url: Commerce API base URL.
        interval: Seconds between polls.
        timeout: Per-request timeout in seconds.
    """

    def __init__(self, base_url: str, *, interval: float = 5.0, timeout: float = 2.0):
        self.health_url = f"{base_url.rstrip('/')}/health"
        self.interval = interval
        self.timeout = timeout
        self.online = False
        self.last_checked: datetime | None = None
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def check(self) -> bool:
        """Poll once, update :attr:`online`, and return it."""
        try:
            response = requests.get(self.health_url, timeout=self.timeout)
            online = 200 <= response.status_code < 300
        except requests.RequestException as exc:
            logger.debug("Health check failed: %s", exc)
            online = False

        if online != self.online:
            if online:
                logger.info("Commerce API is online at %s", self.health_url)
            else:
                logger.warning("Commerce API is offline at %s", self.health_url)

        self.online = online
        self.last_checked = datetime.now(timezone.utc)
        return online

    def _run(self) -> None:
        while not self._stop.is_set():
            self.check()
            self._stop.wait(self.interval)

    def start(self) -> None:
        """Start polling in a daemon thread (no-op if already running)."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="health-monitor", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self.interval + self.timeout)
            self._thread = None

    def to_dict(self) -> dict[str, object]:
        return {
            "server_online": self.online,
            "last_checked": self.last_checked.isoformat() if self.last_checked else None,
        }
