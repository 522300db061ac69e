# tracker_config.py
# All tuneable constants in one place.
# Pass a TrackerConfig instance to every module that needs settings.

import os
from dataclasses import dataclass
from typing import Tuple


# ---------------------------------------------------------------------------
# Progress messages, highest threshold first
# ---------------------------------------------------------------------------

STATUS_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (0.95, "You've arrived at your destination!"),
    (0.85, "Almost there! You're very close!"),
    (0.6,  "Getting closer! Keep going!"),
    (0.3,  "You're making good progress!"),
)

DEFAULT_STATUS_MESSAGE: str = "On your way! Keep going!"


# ---------------------------------------------------------------------------
# Main config
# ---------------------------------------------------------------------------

@dataclass
class TrackerConfig:
    # Status display
    status_thresholds: Tuple[Tuple[float, str], ...] = STATUS_THRESHOLDS
    default_status_message: str = DEFAULT_STATUS_MESSAGE
    km_display_threshold_m: float = 1000.0

    # Map region
    default_center: Tuple[float, float] = (41.0082, 28.9784)   # Istanbul
    default_span_deg: float = 0.05
    follow_span_deg: float = 0.01
    preview_padding: float = 1.5
    preview_min_span_deg: float = 0.005

    # Logging
    log_dir: str = "."                     # directory for saved JSON files
    session_log_filename: str = "tracking_session.jsonl"
    destination_filename: str = "active_destination.json"

    @property
    def arrived_threshold(self) -> float:
        return max(t for t, _ in self.status_thresholds)

    @property
    def session_log_filepath(self) -> str:
        return os.path.join(self.log_dir, self.session_log_filename)

    @property
    def destination_filepath(self) -> str:
        return os.path.join(self.log_dir, self.destination_filename)
