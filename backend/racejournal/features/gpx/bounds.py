"""Bounding boxes for map viewport fitting."""

from typing import Iterable, Optional, Sequence

from .schemas import BoundingBox, GeoSample


def calculate_bounds(samples: Sequence[GeoSample]) -> Optional[BoundingBox]:
    """
    Minimal lat/lon rectangle containing all samples.

    Returns None for an empty sequence.
    """
    if not samples:
        return None

    lats = [s.latitude for s in samples]
    lons = [s.longitude for s in samples]

    return BoundingBox(
        min_lat=min(lats),
        max_lat=max(lats),
        min_lon=min(lons),
        max_lon=max(lons),
    )


def combine_bounds(
    bounds_list: Iterable[Optional[BoundingBox]]
) -> Optional[BoundingBox]:
    """
    Merge the boxes of several routes into one viewport.

    Missing boxes are skipped; returns None if none are left.
    """
    present = [b for b in bounds_list if b is not None]
    if not present:
        return None

    return BoundingBox(
        min_lat=min(b.min_lat for b in present),
        max_lat=max(b.max_lat for b in present),
        min_lon=min(b.min_lon for b in present),
        max_lon=max(b.max_lon for b in present),
    )
