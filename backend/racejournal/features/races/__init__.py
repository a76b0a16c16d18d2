"""Races feature module — cross-entry journal statistics."""

from .models import AggregateStats, RaceEntry
from .stats import (
    compute_aggregate,
    nominal_distance_km,
    parse_finish_time,
    resolve_distance_label,
)

__all__ = [
    "AggregateStats",
    "RaceEntry",
    "compute_aggregate",
    "nominal_distance_km",
    "parse_finish_time",
    "resolve_distance_label",
]
