"""Data models for journal aggregation (dataclasses, no web dependency)."""

from __future__ import annotations

from dataclasses import dataclass

from racejournal.features.gpx.schemas import RouteStatistics


@dataclass(frozen=True)
class RaceEntry:
    """What the composer needs to know about one journal entry."""

    statistics: RouteStatistics | None = None  # from an attached GPX
    race_distance: str | None = None  # "Marathon", "10K", ...
    race_type: str | None = None  # legacy entries keep the category here
    finish_time: str | None = None  # free text: "3:45:30", "52:05", "3125"
    race_name: str | None = None  # for log messages only


@dataclass(frozen=True)
class AggregateStats:
    """Summary across all journal entries."""

    total_races: int = 0
    total_distance_km: float = 0.0  # measured GPS distance only
    average_pace: str | None = None  # "5:30/km"
    average_pace_seconds_per_km: float | None = None
    favorite_distance: str | None = None  # most frequent category label
