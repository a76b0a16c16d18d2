"""
Shared utilities (NOT business logic).

Usage:
    from racejournal.shared import haversine, format_pace
    from racejournal.shared.constants import RaceDistance
"""
from .geo import (
    haversine,
    km_to_miles,
    EARTH_RADIUS_KM,
    KM_TO_MILES,
)
from .formatters import (
    format_pace,
    format_duration,
    format_distance_km,
)
from .constants import (
    RaceDistance,
    NOMINAL_DISTANCE_KM,
    KNOWN_DISTANCE_LABELS,
    TIME_DATA_PROBE_POINTS,
    MAX_TIME_GAP_SECONDS,
)

__all__ = [
    # geo
    "haversine",
    "km_to_miles",
    "EARTH_RADIUS_KM",
    "KM_TO_MILES",
    # formatters
    "format_pace",
    "format_duration",
    "format_distance_km",
    # constants
    "RaceDistance",
    "NOMINAL_DISTANCE_KM",
    "KNOWN_DISTANCE_LABELS",
    "TIME_DATA_PROBE_POINTS",
    "MAX_TIME_GAP_SECONDS",
]
