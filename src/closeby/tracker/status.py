# status.py
# Pure display helpers: progress → message/colour, distance → text.

from typing import Optional, Tuple

from .geo_utils import clamp
from .models import StatusMessage
from .tracker_config import TrackerConfig


def progress_color(progress: float) -> Tuple[float, float, float]:
    """
    RGB colour for a progress fraction.

    Red at 0, yellow at 0.5, green at 1, linear in between.
    """
    p = clamp(progress)
    if p < 0.5:
        return (1.0, p * 2, 0.0)
    return (1.0 - (p - 0.5) * 2, 1.0, 0.0)


def status_message(progress: float, config: Optional[TrackerConfig] = None) -> StatusMessage:
    """
    Message for the highest threshold the progress has reached.

    Args:
        progress: Fraction of the baseline distance already covered.
        config:   Supplies thresholds; defaults to TrackerConfig().

    Returns:
        StatusMessage with text and display colour.
    """
    config = config or TrackerConfig()
    p = clamp(progress)
    text = config.default_status_message
    for threshold, message in sorted(config.status_thresholds, reverse=True):
        if p >= threshold:
            text = message
            break
    return StatusMessage(text=text, color=progress_color(p))


def format_distance(meters: float, config: Optional[TrackerConfig] = None) -> str:
    config = config or TrackerConfig()
    if meters < config.km_display_threshold_m:
        return f"{int(meters)} meters"
    return f"{meters / 1000:.1f} km"


def format_progress(progress: float) -> str:
    return f"{int(clamp(progress) * 100)}%"
