"""
Journal Stats Routes

Aggregate statistics over journal entries supplied by the caller.
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from racejournal.features.gpx import RouteStatistics
from racejournal.features.races import RaceEntry, compute_aggregate

router = APIRouter()


# === Pydantic schemas ===


class RaceEntrySchema(BaseModel):
    statistics: Optional[RouteStatistics] = None
    race_distance: Optional[str] = None
    race_type: Optional[str] = None
    finish_time: Optional[str] = None
    race_name: Optional[str] = None


class AggregateRequest(BaseModel):
    entries: list[RaceEntrySchema] = []


class AggregateStatsSchema(BaseModel):
    total_races: int
    total_distance_km: float
    average_pace: Optional[str] = None
    average_pace_seconds_per_km: Optional[float] = None
    favorite_distance: Optional[str] = None


# === Endpoints ===


@router.post("/aggregate", response_model=AggregateStatsSchema)
async def aggregate_stats(request: AggregateRequest):
    """Total distance, average pace and favorite distance across entries."""
    entries = [
        RaceEntry(
            statistics=e.statistics,
            race_distance=e.race_distance,
            race_type=e.race_type,
            finish_time=e.finish_time,
            race_name=e.race_name,
        )
        for e in request.entries
    ]
    result = compute_aggregate(entries)

    return AggregateStatsSchema(
        total_races=result.total_races,
        total_distance_km=result.total_distance_km,
        average_pace=result.average_pace,
        average_pace_seconds_per_km=result.average_pace_seconds_per_km,
        favorite_distance=result.favorite_distance,
    )
