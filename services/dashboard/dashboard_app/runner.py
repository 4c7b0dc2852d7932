"""
Mock load-test runner.

Running a test never generates traffic: the test is marked ``running``,
and after a random delay it is marked ``completed`` with randomly
generated metrics.  The scheduler and random source are injectable so
tests can complete runs synchronously and deterministically.
"""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Callable

from .health import HealthMonitor
from .models import TEST_NAMES, TestResult, TestStatus

logger = logging.getLogger(__name__)

# Schedules ``callback`` to run after ``delay`` seconds
Scheduler = Callable[[float, Callable[[], None]], None]


class DashboardError(Exception):
    """Base class for runner failures surfaced to the UI."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownTestError(DashboardError):
    status_code = 404


class TestAlreadyRunningError(DashboardError):
    __test__ = False
    status_code = 409


class ServerOfflineError(DashboardError):
    status_code = 503


def timer_scheduler(delay: float, callback: Callable[[], None]) -> None:
    """Default scheduler: a daemon ``threading.Timer``."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()


class TestRunner:
    """
    Owns the fixed list of mock tests and their state.

    Args:
        monitor: Health monitor consulted before a run starts.
        min_delay: Lower bound of the completion delay, seconds.
        max_delay: Upper bound of the completion delay, seconds.
        scheduler: Function used to defer completion.
        rng: Random source for delays and metrics.
    """

    __test__ = False

    def __init__(
        self,
        monitor: HealthMonitor,
        *,
        min_delay: float = 3.0,
        max_delay: float = 8.0,
        scheduler: Scheduler = timer_scheduler,
        rng: random.Random | None = None,
    ):
        self.monitor = monitor
        self.min_delay = min_delay
        self.max_delay = max_delay
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._tests = {name: TestResult(name=name) for name in TEST_NAMES}
        self.current_test: str | None = None

    @property
    def tests(self) -> list[TestResult]:
        return list(self._tests.values())

    def get(self, name: str) -> TestResult:
        try:
            return self._tests[name]
        except KeyError:
            raise UnknownTestError(f"Unknown test: {name}") from None

    def can_run(self, name: str) -> bool:
        """Whether the Run button for *name* should be enabled."""
        return self.monitor.online and self.get(name).status is not TestStatus.RUNNING

    def run(self, name: str) -> TestResult:
        """
        Start a mock run of *name*.

        Raises:
            UnknownTestError: *name* is not one of the fixed tests.
            ServerOfflineError: The commerce API is reported offline.
            TestAlreadyRunningError: *name* is already running.
        """
        with self._lock:
            test = self.get(name)
            if not self.monitor.online:
                raise ServerOfflineError("Server is offline")
            if test.status is TestStatus.RUNNING:
                raise TestAlreadyRunningError(f"{name} is already running")

            test.status = TestStatus.RUNNING
            test.clear_metrics()
            self.current_test = name

        delay = self._rng.uniform(self.min_delay, self.max_delay)
        logger.info("Started %s; completing in %.1fs", name, delay)
        self._scheduler(delay, lambda: self.complete(name))
        return test

    def complete(self, name: str) -> TestResult:
        """Mark *name* completed and fill in fabricated metrics."""
        rng = self._rng
        with self._lock:
            test = self.get(name)
            test.status = TestStatus.COMPLETED
            test.duration = rng.randint(60, 359)
            test.requests = rng.randint(1000, 10999)
            test.errors = rng.randint(0, 49)
            test.avg_response_time = rng.randint(50, 549)
            test.throughput = rng.randint(100, 599)
            if self.current_test == name:
                self.current_test = None

        logger.info(
            "Completed %s: %s requests, %s errors", name, test.requests, test.errors
        )
        return test
