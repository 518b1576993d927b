"""deadline_tracker — deadline accounting for retry loops and RPC dispatchers.

A tracker starts a stopwatch when created.  Give it a budget in
milliseconds and poll it between attempts: ``0`` means no deadline, and
the remaining time is never reported as less than 1ms.
"""

from deadline_tracker._internal.clock import MonotonicStopwatch, Stopwatch
from deadline_tracker.exceptions import (
    DeadlineTrackerError,
    InvalidDeadlineError,
    NoDeadlineError,
    StopwatchStateError,
)
from deadline_tracker.schema import DeadlineConfig, DeadlineSnapshot
from deadline_tracker.tracker import DeadlineTracker

__all__ = [
    "DeadlineConfig",
    "DeadlineSnapshot",
    "DeadlineTracker",
    "DeadlineTrackerError",
    "InvalidDeadlineError",
    "MonotonicStopwatch",
    "NoDeadlineError",
    "Stopwatch",
    "StopwatchStateError",
]
