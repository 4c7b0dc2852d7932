"""
Shared pytest fixtures for dashboard service tests.

The dashboard's two collaborators are replaced with controllable
versions: a real :class:`HealthMonitor` whose ``online`` flag tests set
directly, and a :class:`TestRunner` whose scheduler only records
callbacks so a test decides when a run completes.

Key SDET Concepts Demonstrated:
- Dependency injection instead of patching module globals
- Deterministic randomness via a seeded ``random.Random``
- Manual control of deferred work (no sleeping in tests)
"""

from __future__ import annotations

import os
import random
from collections.abc import Callable

import pytest

os.environ["FLASK_ENV"] = "testing"

from dashboard_app import create_app
from dashboard_app.health import HealthMonitor
from dashboard_app.runner import TestRunner


class RecordingScheduler:
    """Stores scheduled callbacks instead of running them later."""

    def __init__(self):
        self.pending: list[tuple[float, Callable[[], None]]] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> None:
        self.pending.append((delay, callback))

    def run_all(self) -> None:
        pending, self.pending = self.pending, []
        for _delay, callback in pending:
            callback()


@pytest.fixture
def scheduler() -> RecordingScheduler:
    return RecordingScheduler()


@pytest.fixture
def monitor() -> HealthMonitor:
    """A monitor pointed at a non-routable host that starts out online."""
    health_monitor = HealthMonitor("http://commerce.test", interval=0.01, timeout=0.1)
    health_monitor.online = True
    return health_monitor


@pytest.fixture
def runner(monitor, scheduler) -> TestRunner:
    return TestRunner(
        monitor,
        min_delay=3,
        max_delay=8,
        scheduler=scheduler,
        rng=random.Random(42),
    )


@pytest.fixture
def app(monitor, runner):
    application = create_app("testing", monitor=monitor, runner=runner)
    yield application


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client
