"""
Simulated processing latency.

The mock endpoints do almost no work, so each one pauses for a random
interval to give load-test reports believable response times.  The pause
is a demo knob only: it is configured per endpoint, scaled globally, and
disabled entirely under the testing configuration.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from functools import wraps

from flask import current_app

logger = logging.getLogger(__name__)

# (min_ms, max_ms) per endpoint key
DEFAULT_LATENCY_RANGES_MS: dict[str, tuple[int, int]] = {
    "auth.register": (50, 200),
    "auth.login": (100, 300),
    "products.list": (20, 100),
    "products.get": (30, 150),
    "cart.get": (50, 200),
    "cart.add": (100, 300),
    "orders.create": (200, 500),
    "orders.list": (100, 300),
    "analytics": (500, 1500),
}

EXTENSION_KEY = "commerce_latency"


class SimulatedLatency:
    """
    Sleep for a random, per-endpoint interval.

    Args:
        enabled: When False, :meth:`pause` returns immediately.
        scale: Multiplier applied to every range (``0.5`` halves delays).
        ranges: Mapping of endpoint key to ``(min_ms, max_ms)``.
        sleep: Injected sleep function, ``time.sleep`` by default.
        rng: Random source, for reproducible delays.
    """

    def __init__(
        self,
        *,
        enabled: bool = True,
        scale: float = 1.0,
        ranges: dict[str, tuple[int, int]] | None = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ):
        self.enabled = enabled
        self.scale = scale
        self.ranges = dict(DEFAULT_LATENCY_RANGES_MS if ranges is None else ranges)
        self._sleep = sleep
        self._rng = rng or random.Random()

    def delay_for(self, endpoint: str) -> float:
        """Return the delay in seconds to apply for *endpoint* (0 if none)."""
        if not self.enabled or self.scale <= 0:
            return 0.0
        bounds = self.ranges.get(endpoint)
        if bounds is None:
            return 0.0
        low, high = bounds
        return self._rng.randint(low, high) * self.scale / 1000.0

    def pause(self, endpoint: str) -> float:
        """Sleep for the endpoint's simulated delay and return it."""
        delay = self.delay_for(endpoint)
        if delay > 0:
            self._sleep(delay)
        return delay


def simulated_latency(endpoint: str):
    """
    Decorator that pauses before a view runs.

    Looks up the app's :class:`SimulatedLatency` in ``app.extensions``;
    views on apps without one run undelayed.
    """

    def decorator(view_func):
        @wraps(view_func)
        def wrapper(*args, **kwargs):
            latency = current_app.extensions.get(EXTENSION_KEY)
            if latency is not None:
                latency.pause(endpoint)
            return view_func(*args, **kwargs)

        return wrapper

    return decorator
