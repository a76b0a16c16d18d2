#!/usr/bin/env python3
"""CLI script for inspecting a GPX file.

Usage:
    # Print route statistics
    python backend/scripts/analyze_gpx.py content/tracks/berlin_marathon.gpx

    # Dump the full parsed route as JSON
    python backend/scripts/analyze_gpx.py content/tracks/berlin_marathon.gpx --json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from racejournal.features.gpx import GPXParseError, RouteData, parse_track
from racejournal.shared.formatters import (
    format_distance_km,
    format_duration,
    format_pace,
)


def print_summary(route: RouteData) -> None:
    """Print human-readable route statistics."""
    stats = route.statistics

    print(f"Points:         {stats.point_count}")
    print(f"Distance:       {format_distance_km(stats.distance_km)}")
    print(f"Elevation gain: {stats.elevation_gain_m:.0f} m")
    if stats.min_elevation_m is not None and stats.max_elevation_m is not None:
        print(f"Elevation:      {stats.min_elevation_m:.0f} - {stats.max_elevation_m:.0f} m")

    if stats.total_time_seconds is None:
        print("Time:           N/A (no time data)")
    else:
        print(f"Time:           {format_duration(stats.total_time_seconds)}")

    if stats.average_pace_min_per_km is not None:
        print(f"Pace:           {format_pace(stats.average_pace_min_per_km * 60)}")
        mile_pace = format_pace(stats.average_pace_min_per_mile * 60)
        print(f"                {mile_pace.replace('/km', '/mi')}")

    if route.bounds:
        b = route.bounds
        print(f"Bounds:         lat {b.min_lat:.5f}..{b.max_lat:.5f}, lon {b.min_lon:.5f}..{b.max_lon:.5f}")


def main() -> int:
    parser = argparse.ArgumentParser(description="GPX route statistics")
    parser.add_argument("path", type=Path, help="GPX file to analyze")
    parser.add_argument("--json", action="store_true", help="Dump parsed route as JSON")
    args = parser.parse_args()

    try:
        route = parse_track(args.path.read_bytes())
    except GPXParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(route.model_dump_json(indent=2))
    else:
        print_summary(route)
    return 0


if __name__ == "__main__":
    sys.exit(main())
