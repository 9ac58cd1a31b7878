from __future__ import annotations

import queue
from types import SimpleNamespace

import pytest

main_window = pytest.importorskip("frontend.main_window", exc_type=ImportError)
DashboardApp = main_window.DashboardApp


class StubClient:
    def fetch_status(self):
        return "UP"


def _window_stub():
    shown, scheduled = [], []
    stub = SimpleNamespace(
        client=StubClient(),
        _results=queue.Queue(),
        show_status=shown.append,
        after=lambda delay, callback: scheduled.append((delay, callback)),
    )
    return stub, shown, scheduled


def test_refresh_hands_result_to_queue_instead_of_widgets():
    stub, shown, scheduled = _window_stub()

    DashboardApp.refresh(stub)

    assert stub._results.get(timeout=2) == "UP"
    assert shown == []
    assert scheduled == []


def test_poll_drains_results_on_the_ui_loop_and_reschedules():
    stub, shown, scheduled = _window_stub()
    stub._results.put("UP")
    stub._results.put("ERROR")
    stub._poll_results = lambda: None

    DashboardApp._poll_results(stub)

    assert shown == ["UP", "ERROR"]
    assert scheduled == [(main_window.POLL_INTERVAL_MS, stub._poll_results)]
