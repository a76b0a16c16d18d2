"""
Unified constants for race categories and track analysis.

This module provides a single source of truth for race distance naming
across the entire application.
"""

from enum import Enum


class RaceDistance(str, Enum):
    """
    Categorical race distance chosen by the user for a journal entry.

    Used in:
    - Favorite distance tally
    - Legacy race_type fallback
    """
    FIVE_K = "5K"
    TEN_K = "10K"
    HALF_MARATHON = "Half Marathon"
    MARATHON = "Marathon"
    ULTRA = "Ultra"
    TRIATHLON = "Triathlon"
    OTHER = "Other"


# Nominal length of each category in km.
# Used for labelling only, never added to measured totals or pace.
NOMINAL_DISTANCE_KM: dict[RaceDistance, float] = {
    RaceDistance.FIVE_K: 5.0,
    RaceDistance.TEN_K: 10.0,
    RaceDistance.HALF_MARATHON: 21.0975,
    RaceDistance.MARATHON: 42.195,
    RaceDistance.ULTRA: 50.0,  # estimate
    RaceDistance.TRIATHLON: 51.5,  # Olympic distance
    RaceDistance.OTHER: 0.0,
}

# All category labels as plain strings
KNOWN_DISTANCE_LABELS: list[str] = [d.value for d in RaceDistance]


# Only the first N samples are inspected for timestamps
TIME_DATA_PROBE_POINTS = 10

# Time gaps at or above this (pauses, clock jumps) are not counted
MAX_TIME_GAP_SECONDS = 3600.0
