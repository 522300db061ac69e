# models.py
# Shared data structures and enums used across all modules.

import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from shapely.geometry import LineString

from .geo_utils import calculate_bearing, haversine_distance, midpoint


class InvalidCoordinateError(ValueError):
    """Latitude/longitude outside the valid range, or not a number."""


# ---------------------------------------------------------------------------
# Coordinate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Coord:
    """Immutable geographic coordinate."""
    lat: float
    lon: float

    @staticmethod
    def checked(lat: float, lon: float) -> "Coord":
        """Build a Coord, rejecting NaN and out-of-range values."""
        try:
            lat, lon = float(lat), float(lon)
        except (TypeError, ValueError) as e:
            raise InvalidCoordinateError(f"Not a coordinate: ({lat!r}, {lon!r})") from e
        if math.isnan(lat) or math.isnan(lon):
            raise InvalidCoordinateError(f"NaN in coordinate: ({lat}, {lon})")
        if not -90.0 <= lat <= 90.0:
            raise InvalidCoordinateError(f"Latitude out of range: {lat}")
        if not -180.0 <= lon <= 180.0:
            raise InvalidCoordinateError(f"Longitude out of range: {lon}")
        return Coord(lat, lon)

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.lat) and math.isfinite(self.lon)

    def distance_to(self, other: "Coord") -> float:
        return haversine_distance(self.lat, self.lon, other.lat, other.lon)


@dataclass(frozen=True)
class PositionSample:
    """One fix delivered by a location source."""
    coord: Coord
    altitude: Optional[float] = None     # metres
    accuracy: Optional[float] = None     # horizontal, metres
    timestamp: float = field(default_factory=time.time)


# ---------------------------------------------------------------------------
# Destination
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Destination:
    """A place picked by search or long-press reverse geocoding."""
    name: str
    address: str
    coord: Coord

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "address": self.address,
            "location": {"lat": self.coord.lat, "lon": self.coord.lon},
        }

    @staticmethod
    def from_dict(d: dict) -> "Destination":
        return Destination(
            name=d["name"],
            address=d["address"],
            coord=Coord(d["location"]["lat"], d["location"]["lon"]),
        )


# ---------------------------------------------------------------------------
# Route line
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RouteLine:
    """Straight two-point line from the current position to the destination."""
    origin: Coord
    destination: Coord

    @property
    def length_m(self) -> float:
        return self.origin.distance_to(self.destination)

    @property
    def bearing(self) -> float:
        return calculate_bearing(
            self.origin.lat, self.origin.lon,
            self.destination.lat, self.destination.lon,
        )

    @property
    def midpoint(self) -> Coord:
        lat, lon = midpoint(
            self.origin.lat, self.origin.lon,
            self.destination.lat, self.destination.lon,
        )
        return Coord(lat, lon)

    def coordinates(self) -> Tuple[Coord, Coord]:
        return self.origin, self.destination

    def to_linestring(self) -> LineString:
        # Shapely works in x/y, i.e. lon/lat
        return LineString([
            (self.origin.lon, self.origin.lat),
            (self.destination.lon, self.destination.lat),
        ])


# ---------------------------------------------------------------------------
# Map region
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MapRegion:
    """Visible map area: center plus span in degrees."""
    center: Coord
    lat_delta: float
    lon_delta: float


# ---------------------------------------------------------------------------
# Tracking state
# ---------------------------------------------------------------------------

class TrackingStatus(Enum):
    INACTIVE  = "inactive"
    WAITING   = "waiting"      # session started, no position yet
    TRACKING  = "tracking"
    ARRIVED   = "arrived"


@dataclass
class TrackingSession:
    """Mutable record owned by DistanceTracker for one destination."""
    destination: Destination
    baseline_distance_m: Optional[float] = None
    current_distance_m: Optional[float] = None
    active: bool = True

    @property
    def has_baseline(self) -> bool:
        return self.baseline_distance_m is not None


@dataclass(frozen=True)
class StatusMessage:
    text: str
    color: Tuple[float, float, float]   # RGB, each in [0, 1]


@dataclass
class TrackingUpdate:
    """Returned for every position update."""
    status: TrackingStatus
    message: str
    distance_m: Optional[float] = None
    progress: float = 0.0
    route_line: Optional[RouteLine] = None
    color: Optional[Tuple[float, float, float]] = None
    destination: Optional[Destination] = None
