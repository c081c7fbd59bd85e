# -*- coding: utf-8 -*-
"""Run a blocking operation while a busy indicator process is on screen."""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Callable
from contextlib import contextmanager
from typing import Any, Iterator, TypeVar

from thememanager.constants import INDICATOR_MIN_DISPLAY_SECONDS, INDICATOR_STOP_GRACE_SECONDS

logger = logging.getLogger(__name__)

T = TypeVar("T")

IndicatorLauncher = Callable[[str], Any]


class OperationSupervisor:
    """Pair every blocking operation with a busy indicator.

    The indicator is launched before the operation runs. Whatever the
    operation does, it stays visible for at least `min_display_seconds`
    after the operation finishes and is then terminated. A launch failure
    propagates before the operation is attempted.
    """

    def __init__(
        self,
        launcher: IndicatorLauncher,
        *,
        min_display_seconds: float = INDICATOR_MIN_DISPLAY_SECONDS,
        stop_grace_seconds: float = INDICATOR_STOP_GRACE_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._launcher = launcher
        self.min_display_seconds = float(min_display_seconds)
        self.stop_grace_seconds = float(stop_grace_seconds)
        self._sleep = sleep

    def run(self, message: str, operation: Callable[[], T]) -> T:
        with self._indicator(message):
            started = time.monotonic()
            try:
                return operation()
            finally:
                logger.debug("Operation %r finished after %.3fs", message, time.monotonic() - started)
                self._sleep(self.min_display_seconds)

    @contextmanager
    def _indicator(self, message: str) -> Iterator[Any]:
        process = self._launcher(message)
        try:
            yield process
        finally:
            self._stop(process)

    def _stop(self, process: Any) -> None:
        if process.poll() is not None:
            logger.debug("Busy indicator already exited with %s", process.returncode)
            return
        process.terminate()
        try:
            process.wait(timeout=self.stop_grace_seconds)
        except subprocess.TimeoutExpired:
            logger.warning("Busy indicator ignored terminate, killing it")
            process.kill()
            process.wait()
