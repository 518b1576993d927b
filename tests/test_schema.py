"""Tests for configuration and snapshot models."""

import pytest
from pydantic import ValidationError

from deadline_tracker import DeadlineConfig, DeadlineSnapshot, DeadlineTracker


def test_config_defaults():
    assert DeadlineConfig().deadline_millis == 0


def test_config_rejects_negative():
    with pytest.raises(ValidationError):
        DeadlineConfig(deadline_millis=-1)


def test_from_config(stopwatch):
    tracker = DeadlineTracker.from_config(DeadlineConfig(deadline_millis=1_000), stopwatch)
    assert tracker.deadline == 1_000
    assert stopwatch.is_running


def test_from_mapping(stopwatch):
    tracker = DeadlineTracker.from_config({"deadline_millis": 250}, stopwatch)
    assert tracker.deadline == 250


def test_from_mapping_validates():
    with pytest.raises(ValidationError):
        DeadlineTracker.from_config({"deadline_millis": -5})


def test_from_empty_mapping_is_unbounded(stopwatch):
    tracker = DeadlineTracker.from_config({}, stopwatch)
    assert tracker.has_deadline() is False


def test_export_unbounded(tracker, stopwatch):
    stopwatch.advance(12)
    assert tracker.export() == {
        "deadline_millis": 0,
        "elapsed_millis": 12,
        "has_deadline": False,
        "timed_out": False,
        "millis_before_deadline": None,
    }


def test_export_bounded(tracker, stopwatch):
    tracker.set_deadline(100)
    stopwatch.advance(40)
    data = tracker.export()
    assert data["has_deadline"] is True
    assert data["timed_out"] is False
    assert data["millis_before_deadline"] == 60


def test_export_past_deadline(tracker, stopwatch):
    tracker.set_deadline(100)
    stopwatch.advance(500)
    data = tracker.export()
    assert data["timed_out"] is True
    assert data["millis_before_deadline"] == 1


def test_export_round_trips_through_model(tracker):
    tracker.set_deadline(100)
    snapshot = DeadlineSnapshot.model_validate(tracker.export())
    assert snapshot.deadline_millis == 100
