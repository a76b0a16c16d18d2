"""
GPX-related schemas.

Pydantic models for parsed tracks. All of them are frozen: a value is
produced once by its computing function and passed on as is.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GeoSample(BaseModel):
    """Single point in a GPX track."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    elevation: Optional[float] = None  # meters
    timestamp: Optional[str] = None  # ISO-8601, as written in the file


class BoundingBox(BaseModel):
    """Minimal lat/lon rectangle containing a route."""

    model_config = ConfigDict(frozen=True)

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


class RouteStatistics(BaseModel):
    """Distance, elevation and timing aggregates of a track."""

    model_config = ConfigDict(frozen=True)

    # Metrics
    distance_km: float = Field(default=0.0, ge=0)
    elevation_gain_m: float = Field(default=0.0, ge=0)
    min_elevation_m: Optional[float] = None
    max_elevation_m: Optional[float] = None

    # Points count
    point_count: int = Field(default=0, ge=0)

    # Timing (None when the track carries no usable time data)
    has_time_data: bool = False
    total_time_seconds: Optional[float] = None
    average_pace_min_per_km: Optional[float] = None
    average_pace_min_per_mile: Optional[float] = None


class RouteData(BaseModel):
    """Parsed track handed to map rendering, storage and aggregation."""

    model_config = ConfigDict(frozen=True)

    samples: list[GeoSample]
    statistics: RouteStatistics
    bounds: Optional[BoundingBox] = None
