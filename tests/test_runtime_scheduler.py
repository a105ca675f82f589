"""Tests for the frame-clock scheduler."""

import pytest

from qbloch.runtime import Scheduler


def test_callback_runs_when_due():
    """A callback waits until its delay has elapsed."""
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(100.0, lambda: calls.append("a"))

    assert scheduler.advance(99.0) == 0
    assert calls == []
    assert scheduler.advance(1.0) == 1
    assert calls == ["a"]
    assert scheduler.now_ms == 100.0


def test_due_order_and_ties():
    """Callbacks run by due time, ties in scheduling order."""
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(50.0, lambda: calls.append("late"))
    scheduler.call_later(10.0, lambda: calls.append("first"))
    scheduler.call_later(10.0, lambda: calls.append("second"))

    scheduler.advance(100.0)
    assert calls == ["first", "second", "late"]


def test_now_ms_inside_callback():
    """Each callback sees the clock at its own due time."""
    scheduler = Scheduler()
    seen = []
    scheduler.call_later(30.0, lambda: seen.append(scheduler.now_ms))
    scheduler.advance(100.0)
    assert seen == [30.0]
    assert scheduler.now_ms == 100.0


def test_cancel():
    """Cancelled calls never run and report as not pending."""
    scheduler = Scheduler()
    calls = []
    handle = scheduler.call_later(10.0, lambda: calls.append(1))
    assert scheduler.pending() == 1
    assert scheduler.cancel(handle) is True
    assert scheduler.cancel(handle) is False
    assert scheduler.pending() == 0

    scheduler.advance(20.0)
    assert calls == []


def test_cancel_after_run_returns_false():
    """A call that already ran cannot be cancelled."""
    scheduler = Scheduler()
    handle = scheduler.call_later(0.0, lambda: None)
    scheduler.advance(0.0)
    assert handle.done
    assert scheduler.cancel(handle) is False


def test_nested_scheduling_within_window():
    """A callback scheduled from a callback runs if it falls due in the same window."""
    scheduler = Scheduler()
    calls = []

    def outer():
        calls.append("outer")
        scheduler.call_later(10.0, lambda: calls.append("inner"))

    scheduler.call_later(10.0, outer)
    scheduler.advance(25.0)
    assert calls == ["outer", "inner"]


def test_negative_delay_rejected():
    """Negative delays raise ValueError."""
    with pytest.raises(ValueError, match="delay_ms must be non-negative"):
        Scheduler().call_later(-1.0, lambda: None)


def test_negative_advance_is_noop():
    """The clock never moves backwards."""
    scheduler = Scheduler()
    scheduler.advance(10.0)
    scheduler.advance(-5.0)
    assert scheduler.now_ms == 10.0
