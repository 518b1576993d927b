"""Custom exceptions for the deadline_tracker package."""

from __future__ import annotations


class DeadlineTrackerError(Exception):
    """Base exception for all deadline-tracking errors."""


class InvalidDeadlineError(DeadlineTrackerError, ValueError):
    """Raised when a negative deadline is set."""

    def __init__(self, deadline: int) -> None:
        self.deadline = deadline
        super().__init__(
            f"The deadline must be greater or equal to 0, the passed value is {deadline}"
        )


class NoDeadlineError(DeadlineTrackerError, RuntimeError):
    """Raised when the remaining time is requested from an unbounded tracker."""

    def __init__(self) -> None:
        super().__init__(
            "This tracker doesn't have a deadline set so it cannot "
            "answer millis_before_deadline()"
        )


class StopwatchStateError(DeadlineTrackerError, RuntimeError):
    """Raised when a stopwatch is driven into an invalid state."""
