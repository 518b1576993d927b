"""Stopwatch abstraction for testable elapsed-time logic."""

from __future__ import annotations

import time
from typing import Protocol

from deadline_tracker.exceptions import StopwatchStateError

_NANOS_PER_MILLI = 1_000_000


class Stopwatch(Protocol):
    """Protocol for measuring elapsed time.  Inject a fake in tests."""

    @property
    def is_running(self) -> bool: ...

    def start(self) -> Stopwatch: ...

    def reset(self) -> Stopwatch: ...

    def elapsed_millis(self) -> int: ...


class MonotonicStopwatch:
    """Default stopwatch backed by ``time.monotonic_ns``."""

    def __init__(self) -> None:
        self._running = False
        self._elapsed_ns = 0
        self._started_ns = 0

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> MonotonicStopwatch:
        if self._running:
            raise StopwatchStateError("Stopwatch is already running")
        self._running = True
        self._started_ns = time.monotonic_ns()
        return self

    def reset(self) -> MonotonicStopwatch:
        self._running = False
        self._elapsed_ns = 0
        return self

    def elapsed_millis(self) -> int:
        elapsed = self._elapsed_ns
        if self._running:
            elapsed += time.monotonic_ns() - self._started_ns
        return elapsed // _NANOS_PER_MILLI
