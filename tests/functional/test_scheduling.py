import asyncio
import threading

import pytest

from arrowkit.functional.scheduling import resolve_after, schedule_once


def test_schedule_once_runs_callback_once():
    calls = []
    timer = schedule_once(calls.append, 0.01, "done")
    timer.join(timeout=5)

    assert isinstance(timer, threading.Timer)
    assert timer.daemon
    assert calls == ["done"]


def test_schedule_once_rejects_negative_delay():
    with pytest.raises(ValueError):
        schedule_once(lambda: None, -1)


def test_resolve_after():
    assert asyncio.run(resolve_after("Data loaded")) == "Data loaded"
    assert asyncio.run(resolve_after(42, delay=0.01)) == 42
