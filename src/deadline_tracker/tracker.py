"""DeadlineTracker — a stopwatch that also knows when time is up."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from deadline_tracker._internal.clock import MonotonicStopwatch, Stopwatch
from deadline_tracker.exceptions import InvalidDeadlineError, NoDeadlineError
from deadline_tracker.schema import DeadlineConfig, DeadlineSnapshot

logger = logging.getLogger(__name__)

# Smallest value millis_before_deadline() hands out; 0 would read as "no deadline".
_MIN_REMAINING_MILLIS = 1


class DeadlineTracker:
    """Tracks a millisecond deadline against a running stopwatch.

    The stopwatch starts as soon as the tracker is created, with a deadline
    of ``0`` meaning there is no deadline.  The deadline is reached once the
    elapsed time is equal to or greater than the deadline.

    Instances are not thread-safe: ``set_deadline`` and ``reset`` mutate
    state without locking.  Give each concurrent operation its own tracker
    or guard a shared one externally.

    Parameters:
        stopwatch: Stopwatch to use.  Reset first if it is already running,
                   then started.  Defaults to a fresh ``MonotonicStopwatch``.

    Example:
        tracker = DeadlineTracker()
        tracker.set_deadline(5_000)
        while not tracker.timed_out():
            if attempt(timeout_ms=tracker.millis_before_deadline()):
                break
            if tracker.would_sleeping_timeout(backoff_ms):
                break
            time.sleep(backoff_ms / 1000)
    """

    def __init__(self, stopwatch: Stopwatch | None = None) -> None:
        if stopwatch is None:
            stopwatch = MonotonicStopwatch()
        elif stopwatch.is_running:
            stopwatch.reset()
        self._stopwatch = stopwatch.start()
        self._deadline = 0

    @classmethod
    def from_config(
        cls,
        config: DeadlineConfig | Mapping[str, Any],
        stopwatch: Stopwatch | None = None,
    ) -> DeadlineTracker:
        """Build a started tracker with the deadline taken from *config*."""
        if not isinstance(config, DeadlineConfig):
            config = DeadlineConfig.model_validate(config)
        tracker = cls(stopwatch)
        tracker.set_deadline(config.deadline_millis)
        return tracker

    # ── queries ──────────────────────────────────────────────

    def has_deadline(self) -> bool:
        """Return ``True`` if a non-zero deadline was set."""
        return self._deadline != 0

    def timed_out(self) -> bool:
        """Return ``True`` if we're at or past the deadline.

        Always ``False`` when no deadline was set.
        """
        if not self.has_deadline():
            return False
        return self._deadline - self._stopwatch.elapsed_millis() <= 0

    def millis_before_deadline(self) -> int:
        """Return the milliseconds left before the deadline is reached.

        The result is meant to be passed straight down as a timeout, where
        ``0`` means "no timeout" and negatives are refused, so ``1`` is
        returned once the remaining time drops to zero or below.

        Raises:
            NoDeadlineError: if no deadline is set.  Check ``has_deadline()``
                first; an unbounded tracker has no finite answer.
        """
        if not self.has_deadline():
            raise NoDeadlineError()
        remaining = self._deadline - self._stopwatch.elapsed_millis()
        if remaining <= 0:
            return _MIN_REMAINING_MILLIS
        return remaining

    def elapsed_millis(self) -> int:
        return self._stopwatch.elapsed_millis()

    def would_sleeping_timeout(self, planned_sleep_millis: int) -> bool:
        """Return ``True`` if sleeping *planned_sleep_millis* would pass the deadline."""
        if not self.has_deadline():
            return False
        return self.millis_before_deadline() - planned_sleep_millis <= 0

    # ── mutation ─────────────────────────────────────────────

    @property
    def deadline(self) -> int:
        """Current deadline in milliseconds; ``0`` means no deadline."""
        return self._deadline

    @deadline.setter
    def deadline(self, deadline_millis: int) -> None:
        self.set_deadline(deadline_millis)

    def set_deadline(self, deadline_millis: int) -> None:
        """Set a new deadline without restarting the stopwatch.

        Time already elapsed keeps counting against the new deadline.

        Raises:
            InvalidDeadlineError: if *deadline_millis* is negative.
        """
        if deadline_millis < 0:
            raise InvalidDeadlineError(deadline_millis)
        self._deadline = deadline_millis
        logger.debug("Deadline set to %dms (elapsed=%dms)", deadline_millis, self.elapsed_millis())

    def reset(self) -> None:
        """Clear the deadline and restart the stopwatch from zero."""
        self._deadline = 0
        self._stopwatch.reset()
        self._stopwatch.start()
        logger.debug("Deadline tracker reset")

    # ── introspection ────────────────────────────────────────

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of this tracker."""
        bounded = self.has_deadline()
        snapshot = DeadlineSnapshot(
            deadline_millis=self._deadline,
            elapsed_millis=self.elapsed_millis(),
            has_deadline=bounded,
            timed_out=self.timed_out(),
            millis_before_deadline=self.millis_before_deadline() if bounded else None,
        )
        return snapshot.model_dump()

    def __str__(self) -> str:
        return f"DeadlineTracker(timeout={self._deadline}, elapsed={self.elapsed_millis()})"

    __repr__ = __str__
