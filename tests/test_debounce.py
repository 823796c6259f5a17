"""
Tests for DebouncedCall (QTimer-backed coalescing).
"""
from lienzo.core.debounce import DebouncedCall


def test_zero_interval_calls_synchronously():
    calls = []
    task = DebouncedCall(lambda: calls.append(1), 0)
    task.schedule()
    task.schedule()
    assert calls == [1, 1]
    assert not task.pending


def test_only_last_schedule_fires(qtbot):
    calls = []
    task = DebouncedCall(lambda: calls.append(1), 25)
    for _ in range(10):
        task.schedule()
    assert task.pending
    qtbot.waitUntil(lambda: calls == [1], timeout=1000)
    qtbot.wait(60)
    assert calls == [1]
    assert not task.pending


def test_cancel_drops_pending(qtbot):
    calls = []
    task = DebouncedCall(lambda: calls.append(1), 25)
    task.schedule()
    task.cancel()
    qtbot.wait(60)
    assert calls == []


def test_close_releases_timer(qtbot):
    calls = []
    task = DebouncedCall(lambda: calls.append(1), 25)
    task.schedule()
    task.close()
    assert task.closed
    assert not task.pending
    task.schedule()
    qtbot.wait(60)
    assert calls == []
