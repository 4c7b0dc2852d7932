"""
Unit tests for the mock load-test runner.

Key SDET Concepts Demonstrated:
- State-machine testing (pending, running, completed)
- Guard-clause ordering for error precedence
- Seeded randomness for repeatable metric ranges
"""

from __future__ import annotations

import pytest

from dashboard_app.models import TEST_NAMES, TestStatus
from dashboard_app.runner import (
    ServerOfflineError,
    TestAlreadyRunningError,
    UnknownTestError,
)

pytestmark = pytest.mark.unit


def test_all_tests_start_pending(runner):
    """Test that the four fixed tests exist and have no metrics yet."""
    # Assert
    assert [test.name for test in runner.tests] == list(TEST_NAMES)
    for test in runner.tests:
        assert test.status is TestStatus.PENDING
        assert test.requests is None
    assert runner.current_test is None


def test_run_marks_running_and_schedules_completion(runner, scheduler):
    """Test that a run flips to running and schedules completion within bounds."""
    # Act
    result = runner.run("Load Test")

    # Assert
    assert result.status is TestStatus.RUNNING
    assert runner.current_test == "Load Test"
    assert len(scheduler.pending) == 1
    delay, _callback = scheduler.pending[0]
    assert 3 <= delay <= 8


def test_completion_fills_metrics_in_range(runner, scheduler):
    """Test that completing a run produces metrics inside the documented ranges."""
    # Arrange
    runner.run("Stress Test")

    # Act
    scheduler.run_all()

    # Assert
    test = runner.get("Stress Test")
    assert test.status is TestStatus.COMPLETED
    assert 60 <= test.duration <= 359
    assert 1000 <= test.requests <= 10999
    assert 0 <= test.errors <= 49
    assert 50 <= test.avg_response_time <= 549
    assert 100 <= test.throughput <= 599
    assert runner.current_test is None


def test_rerun_clears_previous_metrics(runner, scheduler):
    """Test that starting a completed test again wipes its old metrics."""
    # Arrange
    runner.run("Spike Test")
    scheduler.run_all()

    # Act
    result = runner.run("Spike Test")

    # Assert
    assert result.status is TestStatus.RUNNING
    assert result.requests is None
    assert result.throughput is None


def test_cannot_run_while_running(runner):
    """Test that a running test cannot be started twice."""
    # Arrange
    runner.run("Load Test")

    # Act & Assert
    with pytest.raises(TestAlreadyRunningError):
        runner.run("Load Test")
    assert runner.can_run("Load Test") is False


def test_other_tests_can_run_concurrently(runner):
    """Test that a different test can start while one is running."""
    # Arrange
    runner.run("Load Test")

    # Act
    runner.run("Endurance Test")

    # Assert
    assert runner.get("Load Test").status is TestStatus.RUNNING
    assert runner.current_test == "Endurance Test"


def test_offline_server_blocks_runs(runner, monitor):
    """Test that no test may start while the commerce API is offline."""
    # Arrange
    monitor.online = False

    # Act & Assert
    with pytest.raises(ServerOfflineError, match="Server is offline"):
        runner.run("Load Test")
    assert runner.can_run("Load Test") is False
    assert runner.get("Load Test").status is TestStatus.PENDING


def test_unknown_test_is_reported_before_offline(runner, monitor):
    """Test that an unknown name wins over the offline check."""
    # Arrange
    monitor.online = False

    # Act & Assert
    with pytest.raises(UnknownTestError):
        runner.run("Soak Test")


def test_completion_after_going_offline_still_lands(runner, monitor, scheduler):
    """Test that a run already in flight completes even if the server goes offline."""
    # Arrange
    runner.run("Load Test")
    monitor.online = False

    # Act
    scheduler.run_all()

    # Assert
    assert runner.get("Load Test").status is TestStatus.COMPLETED


def test_to_dict_uses_camel_case_metric_keys(runner, scheduler):
    """Test the serialised shape consumed by the page script."""
    # Arrange
    runner.run("Load Test")
    scheduler.run_all()

    # Act
    data = runner.get("Load Test").to_dict()

    # Assert
    assert set(data) == {
        "name", "status", "duration", "requests", "errors", "avgResponseTime", "throughput",
    }
    assert data["status"] == "completed"
