"""Shared test fixtures."""

import pytest

from deadline_tracker import DeadlineTracker


class FakeStopwatch:
    """Stopwatch that only moves when ``advance`` is called."""

    def __init__(self, elapsed: int = 0, running: bool = False):
        self._elapsed = elapsed
        self._running = running
        self.starts = 0
        self.resets = 0

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> "FakeStopwatch":
        self._running = True
        self.starts += 1
        return self

    def reset(self) -> "FakeStopwatch":
        self._running = False
        self._elapsed = 0
        self.resets += 1
        return self

    def elapsed_millis(self) -> int:
        return self._elapsed

    def advance(self, millis: int) -> None:
        self._elapsed += millis


@pytest.fixture
def stopwatch():
    return FakeStopwatch()


@pytest.fixture
def tracker(stopwatch):
    return DeadlineTracker(stopwatch)


@pytest.fixture
def make_stopwatch():
    return FakeStopwatch
