"""
Dashboard data models.

Holds the mock test records the runner mutates and the static content the
page displays (metric cards, scenario weights, load phases).  None of the
figures are measured; they are illustrative only.

Key Concepts Demonstrated:
- ``str``/``Enum`` dual inheritance for ergonomic serialisation
- Dataclasses for mutable, JSON-friendly records
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TestStatus(str, Enum):
    """
    Lifecycle of a mock test.

    Attributes:
        PENDING: Never run.
        RUNNING: Waiting for its randomised completion delay.
        COMPLETED: Finished; metrics are populated.
        FAILED: Reserved for display; the mock runner never fails a test.
    """

    # Keep pytest from collecting this class
    __test__ = False

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


TEST_NAMES = ("Load Test", "Stress Test", "Spike Test", "Endurance Test")


@dataclass
class TestResult:
    """A named mock test and, once completed, its fabricated metrics."""

    __test__ = False

    name: str
    status: TestStatus = TestStatus.PENDING
    duration: int | None = None
    requests: int | None = None
    errors: int | None = None
    avg_response_time: int | None = None
    throughput: int | None = None

    def clear_metrics(self) -> None:
        self.duration = None
        self.requests = None
        self.errors = None
        self.avg_response_time = None
        self.throughput = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "duration": self.duration,
            "requests": self.requests,
            "errors": self.errors,
            "avgResponseTime": self.avg_response_time,
            "throughput": self.throughput,
        }


@dataclass(frozen=True)
class MetricCard:
    title: str
    value: str
    change: str


PERFORMANCE_METRICS = (
    MetricCard("Avg Response Time", "127ms", "+12%"),
    MetricCard("Requests/sec", "1,247", "+5.2%"),
    MetricCard("Error Rate", "0.3%", "-0.1%"),
    MetricCard("Concurrent Users", "850", "+15%"),
)

# Mirrors the Locust user-class weights in tests/performance
SCENARIO_WEIGHTS = (
    ("User Registration & Shopping", 40),
    ("Login & Purchase Flow", 35),
    ("Product Search & Browse", 20),
    ("Analytics Dashboard", 5),
)

# Mirrors LOAD_PHASES in tests/performance/data.py: (label, seconds, users)
LOAD_PHASES = (
    ("Warm up", 60, 5),
    ("Normal load", 120, 20),
    ("Peak load", 180, 50),
    ("Cool down", 60, 10),
)

PERFORMANCE_SUMMARY = (
    ("98.7%", "Success Rate"),
    ("2.3s", "95th Percentile"),
    ("1,247", "Peak RPS"),
)
