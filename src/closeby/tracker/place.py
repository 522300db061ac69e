# place.py
# Turns search results and reverse-geocode answers into Destinations.
# The geocoding / search providers themselves live outside this package.

import logging
from typing import Iterable, Optional

from .models import Coord, Destination

logger = logging.getLogger(__name__)

NO_ADDRESS = "No address available"
ADDRESS_UNAVAILABLE = "Address unavailable"
DEFAULT_PLACE_NAME = "Selected Location"


def format_address(parts: Iterable[Optional[str]]) -> str:
    """
    Join placemark parts into one display line.

    Args:
        parts: Thoroughfare, sub-thoroughfare, locality, administrative
               area and postal code, any of which may be missing.

    Returns:
        Comma separated address, or NO_ADDRESS when every part is empty.
    """
    address = ", ".join(p.strip() for p in parts if p and p.strip())
    return address or NO_ADDRESS


def format_coordinate(coord: Coord) -> str:
    return f"{coord.lat:.6f}, {coord.lon:.6f}"


def destination_from_search(
    name: Optional[str],
    coord: Coord,
    address_parts: Iterable[Optional[str]] = (),
) -> Destination:
    """Destination for a tapped search result."""
    return Destination(
        name=name or DEFAULT_PLACE_NAME,
        address=format_address(address_parts),
        coord=coord,
    )


def destination_from_geocode(
    coord: Coord,
    address_parts: Optional[Iterable[Optional[str]]] = None,
    name: Optional[str] = None,
    error: Optional[BaseException] = None,
) -> Destination:
    """
    Destination for a long-pressed map point.

    A failed lookup (error set, or no placemark) still yields a usable
    destination with a generic address; there is no retry.
    """
    if error is not None or address_parts is None:
        logger.warning(f"Reverse geocoding failed for {format_coordinate(coord)}: {error}")
        return Destination(
            name=name or DEFAULT_PLACE_NAME,
            address=ADDRESS_UNAVAILABLE,
            coord=coord,
        )
    return Destination(
        name=name or DEFAULT_PLACE_NAME,
        address=format_address(address_parts),
        coord=coord,
    )
