# tracking_system.py
# Public entry point for distance tracking.
# Owns no business logic — delegates everything to specialist modules.

import logging
from typing import Optional, Tuple

from .distance_tracker import DistanceTracker
from .location_source import LocationSource
from .models import Coord, Destination, MapRegion, PositionSample, TrackingStatus, TrackingUpdate
from .region_follower import RegionFollower
from .status import format_distance
from .tracker_config import TrackerConfig
from .tracking_logger import TrackingLogger

logger = logging.getLogger(__name__)


class TrackingSystem:
    """
    High-level tracking facade.

    Typical lifecycle:
        source = LocationSource()
        system = TrackingSystem(source=source)
        system.select_place(destination)
        system.start_tracking()

        # GPS driver:
        source.publish(PositionSample(Coord(lat, lon)))
        # or directly:
        update = system.update(Coord(lat, lon))

    Args:
        config: Optional TrackerConfig; defaults to TrackerConfig().
        source: Optional LocationSource to subscribe to.
    """

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        source: Optional[LocationSource] = None,
    ) -> None:
        self.config = config or TrackerConfig()
        self._source = source or LocationSource()

        # Specialist modules
        self._tracker  = DistanceTracker(self.config)
        self._follower = RegionFollower(self.config)
        self._logger   = TrackingLogger(self.config)

        self._selected: Optional[Destination] = None
        self._last_update: Optional[TrackingUpdate] = None
        self._holds_suppression = False
        self._unsubscribe = self._source.subscribe(self._on_sample)

    # ------------------------------------------------------------------
    # Place selection
    # ------------------------------------------------------------------

    def select_place(self, destination: Destination) -> None:
        """Remember a place picked from search or a long press."""
        self._selected = destination
        logger.info(f"Selected place: {destination.name} ({destination.address})")

    # ------------------------------------------------------------------
    # Tracking control
    # ------------------------------------------------------------------

    def start_tracking(self, destination: Optional[Destination] = None) -> Tuple[bool, str]:
        """
        Begin tracking the given destination, or the selected place.

        Returns:
            (success, message)
        """
        target = destination or self._selected
        if target is None:
            msg = "No place selected."
            logger.warning(msg)
            return False, msg

        self._selected = target
        last = self._source.last_sample
        position = last.coord if last else None
        session = self._tracker.start(target, position)
        self._last_update = None
        self._logger.save_destination(target)

        # Tracker sheet is open from here on
        if not self._holds_suppression:
            self._follower.suppress()
            self._holds_suppression = True

        if session.current_distance_m is None:
            msg = f"Tracking {target.name}. Calculating distance..."
        else:
            msg = f"Tracking {target.name}. {format_distance(session.current_distance_m, self.config)} away."
        logger.info(msg)
        return True, msg

    def stop_tracking(self) -> None:
        """End the current tracking session."""
        self._tracker.stop()
        if self._holds_suppression:
            self._follower.resume()
            self._holds_suppression = False
        self._last_update = None
        logger.info("Tracking stopped by user.")

    def sheet_open(self):
        """Context manager: keep the map still while a sheet is shown."""
        return self._follower.suppressed_while()

    def close(self) -> None:
        """Detach from the location source."""
        self._unsubscribe()

    # ------------------------------------------------------------------
    # GPS update — call this on every position fix
    # ------------------------------------------------------------------

    def update(self, position: Coord) -> TrackingUpdate:
        """
        Process a new position and return the current tracking state.

        Args:
            position: Current geographic coordinate.

        Returns:
            TrackingUpdate; status INACTIVE when nothing is tracked.
        """
        if not position.is_finite:
            logger.warning(f"Dropping invalid position fix {position}.")
            return self._current_state()

        self._follower.on_position(position)

        result = self._tracker.on_position_update(position)
        if result is None:
            result = TrackingUpdate(
                status=TrackingStatus.INACTIVE,
                message="Tracking is not active.",
            )
        else:
            self._last_update = result

        self._logger.log_event(result, position)
        return result

    def _on_sample(self, sample: PositionSample) -> None:
        self.update(sample.coord)

    def _current_state(self) -> TrackingUpdate:
        if not self._tracker.is_active:
            return TrackingUpdate(
                status=TrackingStatus.INACTIVE,
                message="Tracking is not active.",
            )
        if self._last_update is not None:
            return self._last_update
        return TrackingUpdate(
            status=TrackingStatus.WAITING,
            message="Calculating distance...",
            destination=self._tracker.destination,
        )

    # ------------------------------------------------------------------
    # Convenience read-only properties
    # ------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self._tracker.is_active

    @property
    def destination(self) -> Optional[Destination]:
        return self._tracker.destination or self._selected

    @property
    def region(self) -> MapRegion:
        return self._follower.region

    @property
    def last_update(self) -> Optional[TrackingUpdate]:
        return self._last_update

    def preview_region(self) -> Optional[MapRegion]:
        """Region framing the latest route line, for the tracker sheet map."""
        if self._last_update is None or self._last_update.route_line is None:
            return None
        return self._follower.frame_route(self._last_update.route_line)
