"""Tests for status messages and display formatting."""

import pytest

from closeby.tracker.status import (
    format_distance,
    format_progress,
    progress_color,
    status_message,
)
from closeby.tracker.tracker_config import TrackerConfig


@pytest.mark.parametrize(
    "progress, text",
    [
        (1.0, "You've arrived at your destination!"),
        (0.96, "You've arrived at your destination!"),
        (0.95, "You've arrived at your destination!"),
        (0.9, "Almost there! You're very close!"),
        (0.85, "Almost there! You're very close!"),
        (0.7, "Getting closer! Keep going!"),
        (0.5, "You're making good progress!"),
        (0.3, "You're making good progress!"),
        (0.29, "On your way! Keep going!"),
        (0.0, "On your way! Keep going!"),
    ],
)
def test_status_message_thresholds(progress, text):
    assert status_message(progress).text == text


def test_status_message_clamps_input():
    assert status_message(-1.0).text == "On your way! Keep going!"
    assert status_message(3.0).text == "You've arrived at your destination!"


def test_status_message_uses_config_thresholds():
    config = TrackerConfig(
        status_thresholds=((0.5, "half"), (0.9, "nearly")),
        default_status_message="start",
    )
    assert status_message(0.95, config).text == "nearly"
    assert status_message(0.6, config).text == "half"
    assert status_message(0.1, config).text == "start"


def test_progress_color_gradient():
    assert progress_color(0.0) == (1.0, 0.0, 0.0)
    assert progress_color(0.25) == (1.0, 0.5, 0.0)
    assert progress_color(0.5) == (1.0, 1.0, 0.0)
    assert progress_color(0.75) == (0.5, 1.0, 0.0)
    assert progress_color(1.0) == (0.0, 1.0, 0.0)


def test_status_message_carries_color():
    assert status_message(0.0).color == (1.0, 0.0, 0.0)
    assert status_message(1.0).color == (0.0, 1.0, 0.0)


def test_format_distance():
    assert format_distance(0) == "0 meters"
    assert format_distance(999.9) == "999 meters"
    assert format_distance(1000) == "1.0 km"
    assert format_distance(1512) == "1.5 km"


def test_format_progress():
    assert format_progress(0.0) == "0%"
    assert format_progress(0.5) == "50%"
    assert format_progress(1.2) == "100%"
