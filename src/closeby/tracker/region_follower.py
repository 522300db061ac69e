# region_follower.py
# Decides where the map should look.
# Follows the user unless a sheet is open, and frames route previews.

from contextlib import contextmanager
from typing import Iterator, Optional

from .models import Coord, MapRegion, RouteLine
from .tracker_config import TrackerConfig


class RegionFollower:
    """
    Map recentering policy.

    While suppressed, position updates leave the region alone so an open
    sheet is not yanked around by the map underneath it. Suppression nests:
    each suppress() needs its own resume().
    """

    def __init__(self, config: Optional[TrackerConfig] = None) -> None:
        self.config = config or TrackerConfig()
        lat, lon = self.config.default_center
        span = self.config.default_span_deg
        self._region = MapRegion(Coord(lat, lon), span, span)
        self._suppress_depth = 0

    @property
    def region(self) -> MapRegion:
        return self._region

    @property
    def suppressed(self) -> bool:
        return self._suppress_depth > 0

    def suppress(self) -> None:
        self._suppress_depth += 1

    def resume(self) -> None:
        if self._suppress_depth > 0:
            self._suppress_depth -= 1

    @contextmanager
    def suppressed_while(self) -> Iterator[None]:
        self.suppress()
        try:
            yield
        finally:
            self.resume()

    def on_position(self, coord: Coord) -> Optional[MapRegion]:
        """Recenter on coord; returns the new region, or None when suppressed."""
        if self.suppressed:
            return None
        span = self.config.follow_span_deg
        self._region = MapRegion(coord, span, span)
        return self._region

    def frame_route(self, route_line: RouteLine) -> MapRegion:
        """Region that shows both ends of the route line with some padding."""
        origin, destination = route_line.coordinates()
        pad = self.config.preview_padding
        min_span = self.config.preview_min_span_deg
        lat_delta = abs(origin.lat - destination.lat) * pad
        lon_delta = abs(origin.lon - destination.lon) * pad
        return MapRegion(
            center=route_line.midpoint,
            lat_delta=max(min_span, lat_delta),
            lon_delta=max(min_span, lon_delta),
        )
