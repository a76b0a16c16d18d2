"""
Route statistics calculator.

Pure functions over a list of GeoSample: distance, elevation gain,
moving time and pace. Nothing here raises on bad data; an empty or
single-point track yields zero distance and no pace.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from racejournal.shared.constants import MAX_TIME_GAP_SECONDS, TIME_DATA_PROBE_POINTS
from racejournal.shared.geo import haversine, km_to_miles

from .schemas import GeoSample, RouteStatistics

logger = logging.getLogger(__name__)


def compute_statistics(samples: Sequence[GeoSample]) -> RouteStatistics:
    """
    Calculate route statistics for an ordered list of samples.

    Distance is the sum of haversine distances between consecutive
    samples. Elevation gain counts climbs only. Time is the sum of
    consecutive timestamp deltas in the (0, 3600) second window.

    Args:
        samples: Track points in recorded order

    Returns:
        RouteStatistics
    """
    has_time_data = _has_time_data(samples)
    logger.debug(
        f"Track has {'time data' if has_time_data else 'no time data'} "
        f"({len(samples)} points)"
    )

    distance_km = 0.0
    elevation_gain = 0.0
    total_time = 0.0

    for prev, curr in zip(samples, samples[1:]):
        distance_km += haversine(
            prev.latitude, prev.longitude,
            curr.latitude, curr.longitude
        )

        if has_time_data:
            delta = _time_delta_seconds(prev.timestamp, curr.timestamp)
            if delta is not None and 0 < delta < MAX_TIME_GAP_SECONDS:
                total_time += delta

        if prev.elevation is not None and curr.elevation is not None:
            if curr.elevation > prev.elevation:
                elevation_gain += curr.elevation - prev.elevation

    elevations = [s.elevation for s in samples if s.elevation is not None]

    total_time_seconds = total_time if has_time_data and total_time > 0 else None
    pace_km, pace_mile = calculate_pace(total_time_seconds, distance_km, has_time_data)

    return RouteStatistics(
        distance_km=distance_km,
        elevation_gain_m=elevation_gain,
        min_elevation_m=min(elevations) if elevations else None,
        max_elevation_m=max(elevations) if elevations else None,
        point_count=len(samples),
        has_time_data=has_time_data,
        total_time_seconds=total_time_seconds,
        average_pace_min_per_km=pace_km,
        average_pace_min_per_mile=pace_mile,
    )


def calculate_pace(
    total_time_seconds: Optional[float],
    distance_km: float,
    has_time_data: bool,
) -> tuple[Optional[float], Optional[float]]:
    """
    Average pace in minutes per km and minutes per mile.

    Both values are None unless the track has time data, a positive
    total time and a positive distance.
    """
    if not has_time_data:
        return None, None
    if total_time_seconds is None or total_time_seconds <= 0:
        return None, None
    if distance_km <= 0:
        return None, None

    pace_seconds_per_km = total_time_seconds / distance_km
    pace_seconds_per_mile = total_time_seconds / km_to_miles(distance_km)

    return pace_seconds_per_km / 60, pace_seconds_per_mile / 60


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    Timestamps without an offset are taken as UTC.
    Returns None for missing or unparsable values.
    """
    if not value:
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _has_time_data(samples: Sequence[GeoSample]) -> bool:
    """True if any of the first TIME_DATA_PROBE_POINTS samples has a timestamp."""
    return any(s.timestamp for s in samples[:TIME_DATA_PROBE_POINTS])


def _time_delta_seconds(prev: Optional[str], curr: Optional[str]) -> Optional[float]:
    """Seconds from prev to curr, or None if either does not parse."""
    prev_time = parse_timestamp(prev)
    curr_time = parse_timestamp(curr)
    if prev_time is None or curr_time is None:
        return None
    return (curr_time - prev_time).total_seconds()
