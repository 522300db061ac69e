# main.py
# Entry point — replays a GPS trace through TrackingSystem.
# In production, publish real fixes into a LocationSource instead.
#
# Usage:
#   python -m closeby.tracker.main
#   python -m closeby.tracker.main --trace walk.csv --dest-lat 41.01 --dest-lon 28.98

import argparse
import logging
from typing import List, Optional

import pandas as pd
from tqdm import tqdm

from .location_source import LocationSource
from .models import Coord, InvalidCoordinateError, PositionSample, TrackingStatus
from .place import destination_from_search, format_coordinate
from .status import format_distance, format_progress
from .tracker_config import TrackerConfig
from .tracking_system import TrackingSystem

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# Built-in scenario: ~1.1 km due east along the equator
# ------------------------------------------------------------------
SCENARIO_DESTINATION = Coord(0.0, 0.01)
SCENARIO_TRACE = [
    Coord(0.0, 0.0),     # Start
    Coord(0.0, 0.0025),
    Coord(0.0, 0.005),   # Halfway
    Coord(0.0, 0.0075),
    Coord(0.0, 0.009),
    Coord(0.0, 0.01),    # Arrival
]


def load_trace(path: str) -> List[PositionSample]:
    """
    Read a CSV trace with lat/lon columns (altitude/accuracy optional).

    Rows with invalid coordinates are skipped with a warning.
    """
    df = pd.read_csv(path)
    missing = {"lat", "lon"} - set(df.columns)
    if missing:
        raise ValueError(f"{path}: missing column(s) {sorted(missing)}")

    samples: List[PositionSample] = []
    for idx, row in df.iterrows():
        try:
            coord = Coord.checked(row["lat"], row["lon"])
        except InvalidCoordinateError as e:
            logger.warning(f"{path} row {idx}: {e}")
            continue
        samples.append(PositionSample(
            coord=coord,
            altitude=_optional_float(row.get("altitude")),
            accuracy=_optional_float(row.get("accuracy")),
        ))
    return samples


def _optional_float(value) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return float(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Replay a GPS trace toward a destination.")
    parser.add_argument("--trace", help="CSV file with lat,lon columns")
    parser.add_argument("--dest-lat", type=float, default=SCENARIO_DESTINATION.lat)
    parser.add_argument("--dest-lon", type=float, default=SCENARIO_DESTINATION.lon)
    parser.add_argument("--dest-name", default="Destination")
    parser.add_argument("--log-dir", default="logs")
    parser.add_argument("--quiet", action="store_true", help="progress bar instead of per-fix output")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # ------------------------------------------------------------------
    # Logging setup — configure once here, all modules inherit
    # ------------------------------------------------------------------
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        dest_coord = Coord.checked(args.dest_lat, args.dest_lon)
    except InvalidCoordinateError as e:
        print(f"[Main] Invalid destination: {e}")
        return 2

    if args.trace:
        try:
            samples = load_trace(args.trace)
        except (OSError, ValueError) as e:
            # pandas parser errors are ValueErrors too
            print(f"[Main] Could not read trace: {e}")
            return 1
    else:
        samples = [PositionSample(c) for c in SCENARIO_TRACE]

    if not samples:
        print("[Main] Trace contains no usable positions.")
        return 1

    config = TrackerConfig(log_dir=args.log_dir)
    source = LocationSource()
    system = TrackingSystem(config=config, source=source)

    destination = destination_from_search(args.dest_name, dest_coord)
    system.select_place(destination)
    success, msg = system.start_tracking()
    print(f"[Main] {msg}")
    if not success:
        return 1

    print("\n--- GPS Loop Active ---")
    feed = tqdm(samples, desc="trace") if args.quiet else samples
    for sample in feed:
        source.publish(sample)
        result = system.last_update
        if result is None:
            continue

        if not args.quiet:
            print(
                f"  GPS {format_coordinate(sample.coord)} → "
                f"{format_distance(result.distance_m, config)}, "
                f"{format_progress(result.progress)} — {result.message}"
            )

        if result.status == TrackingStatus.ARRIVED:
            print("  ✓  Destination reached. Tracking ended.")
            break

    system.stop_tracking()
    system.close()

    print("\n--- Session complete ---")
    print(f"    Log files written to: {config.log_dir}/")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
