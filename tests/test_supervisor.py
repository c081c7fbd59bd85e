# -*- coding: utf-8 -*-
"""Tests for the busy-indicator supervisor."""

from __future__ import annotations

import time

import pytest

from conftest import FakeProcess
from thememanager.core.supervisor import OperationSupervisor
from thememanager.errors import IndicatorError, OperationError


def _supervisor(events: list[str], process: FakeProcess | None = None, **kwargs) -> OperationSupervisor:
    proc = process or FakeProcess(events)

    def launcher(message: str) -> FakeProcess:
        events.append(f"launch:{message}")
        return proc

    return OperationSupervisor(launcher, sleep=lambda seconds: events.append(f"sleep:{seconds}"), **kwargs)


def test_indicator_wraps_operation_in_order() -> None:
    events: list[str] = []
    supervisor = _supervisor(events)

    result = supervisor.run("Applying theme 'Dark'...", lambda: events.append("op") or "done")

    assert result == "done"
    assert events == ["launch:Applying theme 'Dark'...", "op", "sleep:0.5", "terminate", "wait"]


def test_indicator_is_stopped_when_operation_raises() -> None:
    events: list[str] = []
    supervisor = _supervisor(events)

    def failing() -> None:
        events.append("op")
        raise OperationError("disk full")

    with pytest.raises(OperationError, match="disk full"):
        supervisor.run("Purging...", failing)
    assert events[-3:] == ["sleep:0.5", "terminate", "wait"]


def test_unexpected_exception_is_reraised_unchanged() -> None:
    events: list[str] = []
    error = KeyError("missing")

    def failing() -> None:
        raise error

    with pytest.raises(KeyError) as caught:
        _supervisor(events).run("Syncing catalog...", failing)
    assert caught.value is error
    assert "terminate" in events


def test_launch_failure_skips_operation() -> None:
    ran: list[str] = []

    def launcher(_message: str):
        raise IndicatorError("no presenter")

    supervisor = OperationSupervisor(launcher, sleep=lambda _s: None)
    with pytest.raises(IndicatorError):
        supervisor.run("Downloading...", lambda: ran.append("op"))
    assert ran == []


def test_indicator_is_killed_when_terminate_is_ignored() -> None:
    events: list[str] = []
    process = FakeProcess(events, exits_on_terminate=False)
    _supervisor(events, process).run("Creating theme backup...", lambda: None)
    assert events[-4:] == ["terminate", "wait-timeout", "kill", "wait"]


def test_indicator_that_already_exited_is_left_alone() -> None:
    events: list[str] = []
    process = FakeProcess(events)
    process.returncode = 0
    _supervisor(events, process).run("Syncing catalog...", lambda: None)
    assert "terminate" not in events


def test_instant_operation_still_takes_minimum_duration() -> None:
    supervisor = OperationSupervisor(lambda _message: FakeProcess(), min_display_seconds=0.05)
    started = time.monotonic()
    supervisor.run("Applying...", lambda: None)
    assert time.monotonic() - started >= 0.05
