"""
deadline_tracker — Retry loop

One tracker covers the whole retry window.  Each attempt gets the
remaining time as its timeout, and the loop gives up before a backoff
sleep would overshoot the budget.
"""

import logging
import random
import time

from deadline_tracker import DeadlineConfig, DeadlineTracker

# ─── A flaky remote call (stand-in for your RPC client) ───


def flaky_call(timeout_ms: int) -> str:
    time.sleep(min(timeout_ms, 50) / 1000)
    if random.random() < 0.7:
        raise ConnectionError("server busy")
    return "ok"


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s")

    tracker = DeadlineTracker.from_config(DeadlineConfig(deadline_millis=500))
    backoff_ms = 20
    attempt = 0

    while not tracker.timed_out():
        attempt += 1
        try:
            result = flaky_call(tracker.millis_before_deadline())
        except ConnectionError as exc:
            print(f"  attempt {attempt}: {exc}  {tracker}")
        else:
            print(f"  attempt {attempt}: {result}  {tracker}")
            break

        if tracker.would_sleeping_timeout(backoff_ms):
            print(f"  backoff of {backoff_ms}ms would pass the deadline, giving up")
            break
        time.sleep(backoff_ms / 1000)
        backoff_ms *= 2

    print(tracker.export())

    # Reuse the same tracker for a fresh, unbounded operation
    tracker.reset()
    print(f"after reset: {tracker}  has_deadline={tracker.has_deadline()}")


if __name__ == "__main__":
    main()
