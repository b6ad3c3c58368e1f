# File: tests/test_failures.py
import pytest

from argos.watcher.failures import FailureTracker


def test_counts_and_resets():
    tracker = FailureTracker(3)
    assert tracker.count == 0
    assert tracker.increment() == 1
    assert tracker.increment() == 2
    assert not tracker.threshold_reached()
    tracker.reset()
    assert tracker.count == 0


def test_threshold_reached_at_exact_maximum():
    tracker = FailureTracker(2)
    tracker.increment()
    assert not tracker.threshold_reached()
    tracker.increment()
    assert tracker.threshold_reached()
    tracker.increment()
    assert tracker.threshold_reached()


def test_single_failure_threshold():
    tracker = FailureTracker(1)
    tracker.increment()
    assert tracker.threshold_reached()


@pytest.mark.parametrize("value", [0, -1])
def test_rejects_non_positive_maximum(value):
    with pytest.raises(ValueError):
        FailureTracker(value)
