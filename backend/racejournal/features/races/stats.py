"""Aggregate statistics across journal entries."""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Sequence

from racejournal.shared.constants import (
    KNOWN_DISTANCE_LABELS,
    NOMINAL_DISTANCE_KM,
    RaceDistance,
)
from racejournal.shared.formatters import format_pace

from .models import AggregateStats, RaceEntry

logger = logging.getLogger(__name__)

_FINISH_TIME_RE = re.compile(r"^\d+(?::\d+){0,2}$")


def compute_aggregate(entries: Sequence[RaceEntry]) -> AggregateStats:
    """Fold journal entries into total distance, average pace and favorite distance.

    Only measured GPS distance counts towards the total and towards pace;
    category labels are used for the favorite distance tally alone.
    """
    if not entries:
        return AggregateStats()

    total_distance_km = 0.0
    pace_samples: list[float] = []
    distance_counts: Counter[str] = Counter()

    for entry in entries:
        measured_km = _measured_distance_km(entry)
        if measured_km is not None:
            total_distance_km += measured_km

        label = resolve_distance_label(entry)
        if label:
            distance_counts[label] += 1

        pace = _entry_pace_seconds_per_km(entry, measured_km)
        if pace is not None:
            pace_samples.append(pace)

    average_pace_s = None
    if pace_samples:
        average_pace_s = sum(pace_samples) / len(pace_samples)

    # Counter keeps insertion order, so ties go to the first label seen
    favorite = distance_counts.most_common(1)[0][0] if distance_counts else None

    return AggregateStats(
        total_races=len(entries),
        total_distance_km=total_distance_km,
        average_pace=format_pace(average_pace_s),
        average_pace_seconds_per_km=average_pace_s,
        favorite_distance=favorite,
    )


def parse_finish_time(time_str: str | None) -> int | None:
    """Parse a free-text finish time to seconds.

    Formats:
        "3:45:30"  → 13530  (H:MM:SS)
        "52:05"    → 3125   (MM:SS)
        "3125"     → 3125   (seconds)

    Anything else, or a zero time, gives None.
    """
    if not time_str:
        return None
    cleaned = re.sub(r"\s*:\s*", ":", time_str.strip())
    if not _FINISH_TIME_RE.match(cleaned):
        return None

    parts = [int(p) for p in cleaned.split(":")]
    if len(parts) == 3:
        seconds = parts[0] * 3600 + parts[1] * 60 + parts[2]
    elif len(parts) == 2:
        seconds = parts[0] * 60 + parts[1]
    else:
        seconds = parts[0]

    return seconds if seconds > 0 else None


def resolve_distance_label(entry: RaceEntry) -> str | None:
    """Category label of an entry.

    Falls back to `race_type` for legacy entries, but only when it holds
    one of the known categories.
    """
    if entry.race_distance and entry.race_distance.strip():
        return entry.race_distance.strip()
    if entry.race_type in KNOWN_DISTANCE_LABELS:
        return entry.race_type
    return None


def nominal_distance_km(label: str | None) -> float:
    """Nominal length of a category in km, 0 for unknown labels."""
    try:
        return NOMINAL_DISTANCE_KM[RaceDistance(label)]
    except ValueError:
        return 0.0


def _measured_distance_km(entry: RaceEntry) -> float | None:
    """GPS distance of the entry, None if there is none."""
    if entry.statistics is None or entry.statistics.distance_km <= 0:
        return None
    return entry.statistics.distance_km


def _entry_pace_seconds_per_km(
    entry: RaceEntry, measured_km: float | None
) -> float | None:
    """One pace sample for the entry, from measured distance only."""
    name = entry.race_name or "<unnamed>"

    if measured_km is None:
        logger.debug(f"No pace for {name}: no GPS distance")
        return None

    total_time = entry.statistics.total_time_seconds
    if total_time is not None and total_time > 0:
        logger.debug(f"Pace for {name} from GPS time")
        return total_time / measured_km

    if entry.finish_time:
        finish_s = parse_finish_time(entry.finish_time)
        if finish_s is None:
            logger.debug(f"No pace for {name}: unparsable finish time {entry.finish_time!r}")
            return None
        logger.debug(f"Pace for {name} from finish time and GPS distance")
        return finish_s / measured_km

    logger.debug(f"No pace for {name}: no GPS time or finish time")
    return None
