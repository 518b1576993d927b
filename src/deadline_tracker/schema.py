"""Pydantic models for tracker configuration and diagnostic snapshots."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DeadlineConfig(BaseModel):
    """Deadline configuration for one operation window.

    Attributes:
        deadline_millis: Time budget in milliseconds, measured from the
                         moment the tracker starts.  ``0`` means no deadline.
    """

    deadline_millis: int = Field(default=0, ge=0)


class DeadlineSnapshot(BaseModel):
    """Point-in-time view of a tracker, suitable for logs or JSON payloads.

    Attributes:
        deadline_millis:        Configured budget (``0`` when unbounded).
        elapsed_millis:         Time elapsed since start or last reset.
        has_deadline:           ``True`` if a non-zero budget is set.
        timed_out:              ``True`` once the budget is used up.
        millis_before_deadline: Remaining time (floored at 1), or ``None``
                                when there is no deadline.
    """

    deadline_millis: int
    elapsed_millis: int
    has_deadline: bool
    timed_out: bool
    millis_before_deadline: int | None = None
