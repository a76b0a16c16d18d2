"""
GPX file handling module.

Usage:
    from racejournal.features.gpx import parse_track, compute_statistics
    from racejournal.features.gpx import RouteData, RouteStatistics

Components:
- parse_track: Parse GPX markup into RouteData
- compute_statistics: Distance, elevation, time and pace for samples
- calculate_bounds / combine_bounds: Map viewport boxes
- GeoSample, BoundingBox, RouteStatistics, RouteData: Pydantic schemas
"""

from .bounds import calculate_bounds, combine_bounds
from .parser import (
    GPXParseError,
    InvalidGPXFormatError,
    NoTrackPointsError,
    parse_track,
)
from .schemas import BoundingBox, GeoSample, RouteData, RouteStatistics
from .stats import calculate_pace, compute_statistics, parse_timestamp

__all__ = [
    # Parser
    "parse_track",
    "GPXParseError",
    "InvalidGPXFormatError",
    "NoTrackPointsError",
    # Statistics
    "compute_statistics",
    "calculate_pace",
    "parse_timestamp",
    # Bounds
    "calculate_bounds",
    "combine_bounds",
    # Schemas
    "GeoSample",
    "BoundingBox",
    "RouteStatistics",
    "RouteData",
]
