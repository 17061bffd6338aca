"""Tests for the background refresh task."""

import threading

import pytest

from zpredict.database import ScoreStore, make_table
from zpredict.refresh import RefreshTask


class CountingFetch:
    """Fetch stub returning a new table each call and signalling each call."""

    def __init__(self, fail_first: bool = False):
        self.calls = 0
        self.fail_first = fail_first
        self.called = threading.Event()

    def __call__(self):
        self.calls += 1
        self.called.set()
        if self.fail_first and self.calls == 1:
            raise RuntimeError("boom")
        return make_table({f"/call{self.calls}": float(self.calls)})


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        RefreshTask(ScoreStore(), CountingFetch(), interval=0)


def test_refresh_now_publishes_table():
    store = ScoreStore()
    task = RefreshTask(store, CountingFetch(), interval=60)
    task.refresh_now()
    assert dict(store.snapshot()) == {"/call1": 1.0}


def test_start_refreshes_immediately_and_stop_joins():
    store = ScoreStore()
    fetch = CountingFetch()
    task = RefreshTask(store, fetch, interval=60)

    task.start()
    assert fetch.called.wait(5)
    task.stop()

    assert not task.running
    assert fetch.calls == 1
    assert dict(store.snapshot()) == {"/call1": 1.0}


def test_context_manager_stops_task():
    fetch = CountingFetch()
    with RefreshTask(ScoreStore(), fetch, interval=60) as task:
        assert fetch.called.wait(5)
        assert task.running
    assert not task.running


def test_start_twice_keeps_one_thread():
    fetch = CountingFetch()
    task = RefreshTask(ScoreStore(), fetch, interval=60)
    task.start()
    thread = task._thread
    task.start()
    assert task._thread is thread
    task.stop()


def test_failed_refresh_keeps_previous_table_and_loop_alive():
    store = ScoreStore({"/old": 1.0})
    fetch = CountingFetch(fail_first=True)
    task = RefreshTask(store, fetch, interval=0.01)

    task.start()
    try:
        for _ in range(500):
            if fetch.calls >= 2:
                break
            fetch.called.clear()
            fetch.called.wait(0.1)
    finally:
        task.stop()

    assert fetch.calls >= 2
    assert "/old" not in store.snapshot()
