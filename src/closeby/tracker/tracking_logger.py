# tracking_logger.py
# Handles all file I/O for the tracker.
# Saves the active destination and tracking events as JSON.

import json
import os
import logging
from datetime import datetime
from typing import Optional

from .models import Coord, Destination, TrackingUpdate
from .tracker_config import TrackerConfig

# Standard Python logger — configure at app entry point if needed
logger = logging.getLogger(__name__)


class TrackingLogger:
    """
    Persists the active destination and tracking events to JSON files.

    Args:
        config: TrackerConfig instance for file paths and directories.
    """

    def __init__(self, config: Optional[TrackerConfig] = None) -> None:
        self.config = config or TrackerConfig()
        os.makedirs(self.config.log_dir, exist_ok=True)

    # ------------------------------------------------------------------
    # Destination persistence
    # ------------------------------------------------------------------

    def save_destination(self, destination: Destination) -> bool:
        """
        Serialize the tracked destination to JSON.

        Returns:
            True on success, False on failure.
        """
        filepath = self.config.destination_filepath
        try:
            data = {
                "saved_at": datetime.now().isoformat(),
                "destination": destination.to_dict(),
            }
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            logger.info(f"Destination saved to {filepath} ({destination.name}).")
            return True
        except OSError as e:
            logger.error(f"Failed to save destination to {filepath}: {e}")
            return False

    def load_destination(self, filepath: Optional[str] = None) -> Optional[Destination]:
        """
        Load a previously saved destination.

        Args:
            filepath: Path override; uses config default if omitted.

        Returns:
            Destination, or None if loading failed.
        """
        path = filepath or self.config.destination_filepath
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            destination = Destination.from_dict(data["destination"])
            logger.info(f"Destination loaded from {path} ({destination.name}).")
            return destination
        except (OSError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Failed to load destination from {path}: {e}")
            return None

    # ------------------------------------------------------------------
    # Session event logging
    # ------------------------------------------------------------------

    def log_event(self, update: TrackingUpdate, position: Coord) -> None:
        """Append a single tracking event to the session log file."""
        entry = {
            "timestamp": datetime.now().isoformat(),
            "lat": position.lat,
            "lon": position.lon,
            "status": update.status.value,
            "distance_m": update.distance_m,
            "progress": update.progress,
            "message": update.message,
        }
        try:
            with open(self.config.session_log_filepath, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, ensure_ascii=False) + "\n")
        except OSError as e:
            logger.error(f"Failed to write event log: {e}")
