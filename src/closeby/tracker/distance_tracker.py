# distance_tracker.py
# State machine that tracks straight-line progress toward one destination.
# Call start() once, then on_position_update() on every GPS update.

import logging
import threading
from typing import Optional

from .geo_utils import clamp
from .models import (
    Coord,
    Destination,
    RouteLine,
    StatusMessage,
    TrackingSession,
    TrackingStatus,
    TrackingUpdate,
)
from .status import status_message
from .tracker_config import TrackerConfig

logger = logging.getLogger(__name__)


def compute_progress(distance_m: float, baseline_m: Optional[float]) -> float:
    """Fraction of the baseline already closed, clamped to [0, 1]."""
    if baseline_m is None or baseline_m <= 0:
        return 0.0
    return clamp(1.0 - distance_m / baseline_m)


class DistanceTracker:
    """
    Stateful distance/progress tracker holding at most one session.

    Usage:
        tracker = DistanceTracker(config)
        tracker.start(destination, current_position)

        # Inside GPS loop:
        update = tracker.on_position_update(current_coord)
    """

    def __init__(self, config: Optional[TrackerConfig] = None) -> None:
        self.config = config or TrackerConfig()
        self._session: Optional[TrackingSession] = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, destination: Destination, current_position: Optional[Coord] = None) -> TrackingSession:
        """
        Begin tracking a destination, discarding any previous session.

        Args:
            destination:      Place to track.
            current_position: Latest known fix, if any. Without it the
                              baseline is captured by the next update.

        Returns:
            The new TrackingSession.
        """
        with self._lock:
            if self._session is not None:
                logger.info(f"Replacing tracking session for {self._session.destination.name}.")
            session = TrackingSession(destination=destination)
            self._session = session
            if current_position is not None and not current_position.is_finite:
                logger.warning(f"Ignoring invalid start position {current_position}.")
                current_position = None
            if current_position is not None:
                self._apply(session, current_position)
            else:
                logger.info(f"Tracking {destination.name}: waiting for first position.")
        return session

    def stop(self) -> None:
        """End the current session; later updates are ignored."""
        with self._lock:
            if self._session is not None:
                self._session.active = False
                logger.info(f"Stopped tracking {self._session.destination.name}.")
            self._session = None

    # ------------------------------------------------------------------
    # Read-only properties
    # ------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[TrackingSession]:
        return self._session

    @property
    def destination(self) -> Optional[Destination]:
        return self._session.destination if self._session else None

    # ------------------------------------------------------------------
    # Core method — call on every GPS update
    # ------------------------------------------------------------------

    def on_position_update(self, current_position: Coord) -> Optional[TrackingUpdate]:
        """
        Recompute distance, progress and route line for a new position.

        Args:
            current_position: Current geographic position.

        Returns:
            TrackingUpdate, or None when no session is active or the
            fix is not a finite coordinate.
        """
        with self._lock:
            if self._session is None:
                return None
            if not current_position.is_finite:
                logger.warning(f"Ignoring invalid position fix {current_position}.")
                return None
            return self._apply(self._session, current_position)

    def status_message(self, progress: float) -> StatusMessage:
        return status_message(progress, self.config)

    def _apply(self, session: TrackingSession, position: Coord) -> TrackingUpdate:
        destination = session.destination
        distance = position.distance_to(destination.coord)

        if session.baseline_distance_m is None:
            session.baseline_distance_m = distance
            logger.info(f"Baseline to {destination.name}: {distance:.1f} m")
        session.current_distance_m = distance

        progress = compute_progress(distance, session.baseline_distance_m)
        status = status_message(progress, self.config)
        arrived = progress >= self.config.arrived_threshold

        return TrackingUpdate(
            status=TrackingStatus.ARRIVED if arrived else TrackingStatus.TRACKING,
            message=status.text,
            distance_m=distance,
            progress=progress,
            route_line=RouteLine(position, destination.coord),
            color=status.color,
            destination=destination,
        )
