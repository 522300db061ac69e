"""Tests for map region policy and place selection helpers."""

import logging

import pytest

from closeby.tracker.models import Coord, MapRegion, RouteLine
from closeby.tracker.place import (
    ADDRESS_UNAVAILABLE,
    NO_ADDRESS,
    destination_from_geocode,
    destination_from_search,
    format_address,
    format_coordinate,
)
from closeby.tracker.region_follower import RegionFollower


# ---------------------------------------------------------------------------
# RegionFollower
# ---------------------------------------------------------------------------

def test_default_region_is_istanbul():
    region = RegionFollower().region
    assert region == MapRegion(Coord(41.0082, 28.9784), 0.05, 0.05)


def test_follows_positions_with_close_span():
    follower = RegionFollower()
    region = follower.on_position(Coord(40.0, 30.0))

    assert region == MapRegion(Coord(40.0, 30.0), 0.01, 0.01)
    assert follower.region == region


def test_suppressed_follower_keeps_region():
    follower = RegionFollower()
    follower.on_position(Coord(40.0, 30.0))
    follower.suppress()

    assert follower.on_position(Coord(10.0, 10.0)) is None
    assert follower.region.center == Coord(40.0, 30.0)

    follower.resume()
    assert follower.on_position(Coord(10.0, 10.0)).center == Coord(10.0, 10.0)


def test_suppressed_while_restores_flag():
    follower = RegionFollower()
    with follower.suppressed_while():
        assert follower.suppressed
        assert follower.on_position(Coord(1.0, 1.0)) is None
    assert not follower.suppressed


def test_frame_route_pads_and_enforces_minimum_span():
    follower = RegionFollower()
    region = follower.frame_route(RouteLine(Coord(0.0, 0.0), Coord(0.0, 0.01)))

    assert region.center == Coord(0.0, 0.005)
    assert region.lat_delta == 0.005
    assert region.lon_delta == pytest.approx(0.015)


# ---------------------------------------------------------------------------
# Place selection
# ---------------------------------------------------------------------------

def test_format_address_skips_missing_parts():
    parts = ["Istiklal Cd.", None, "Beyoglu", "", "34430"]
    assert format_address(parts) == "Istiklal Cd., Beyoglu, 34430"


def test_format_address_empty():
    assert format_address([None, "", "  "]) == NO_ADDRESS


def test_format_coordinate():
    assert format_coordinate(Coord(41.0082, 28.9784)) == "41.008200, 28.978400"


def test_destination_from_search_defaults_name():
    dest = destination_from_search(None, Coord(1.0, 2.0), ["Main St"])
    assert dest.name == "Selected Location"
    assert dest.address == "Main St"


def test_destination_from_geocode_success():
    dest = destination_from_geocode(Coord(1.0, 2.0), ["Main St", "7"], name="Home")
    assert dest.name == "Home"
    assert dest.address == "Main St, 7"


def test_destination_from_geocode_failure(caplog):
    with caplog.at_level(logging.WARNING):
        dest = destination_from_geocode(Coord(1.0, 2.0), error=RuntimeError("offline"))

    assert dest.address == ADDRESS_UNAVAILABLE
    assert dest.coord == Coord(1.0, 2.0)
    assert "offline" in caplog.text


def test_suppression_nests():
    follower = RegionFollower()
    follower.suppress()
    with follower.suppressed_while():
        assert follower.suppressed
    assert follower.suppressed

    follower.resume()
    follower.resume()
    assert not follower.suppressed
    assert follower.on_position(Coord(1.0, 1.0)) is not None
