"""
Formatting utilities for display.

Used by the API, the stats composer and developer scripts.
"""

import math


def format_pace(seconds_per_km: float | None) -> str | None:
    """
    Format pace as 'M:SS/km'.

    Args:
        seconds_per_km: Pace in seconds per km

    Returns:
        Formatted string (e.g., '5:30/km'), or None when there is no pace
    """
    if not seconds_per_km or seconds_per_km <= 0 or not math.isfinite(seconds_per_km):
        return None

    minutes = int(seconds_per_km // 60)
    seconds = int(seconds_per_km % 60)

    return f"{minutes}:{seconds:02d}/km"


def format_duration(seconds: float) -> str:
    """Format seconds as human-readable time string.

    553   → "9:13"
    3125  → "52:05"
    3760  → "1:02:40"
    """
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.50 km')
    """
    return f"{km:.2f} km"
