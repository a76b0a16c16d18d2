"""
GPX Parser

Parses GPX markup into an ordered list of GeoSample and wraps it with
route statistics and bounds.

Malformed points (missing or non-numeric lat/lon) are skipped one by one.
Only a document that is not XML at all, or one without a single usable
<trkpt>, is rejected.
"""

import logging
import math
import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from racejournal.shared.formatters import format_distance_km

from .bounds import calculate_bounds
from .schemas import GeoSample, RouteData
from .stats import compute_statistics

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class GPXParseError(ValueError):
    """Base GPX parse error."""
    pass


class InvalidGPXFormatError(GPXParseError):
    """Input is not well-formed XML."""
    pass


class NoTrackPointsError(GPXParseError):
    """Document parsed but holds no usable track points."""
    pass


# =============================================================================
# Parsing
# =============================================================================

def parse_track(content: str | bytes) -> RouteData:
    """
    Parse GPX content and build route data.

    Args:
        content: GPX file content. Bytes are handed to the XML parser
            as is so the declared encoding is honoured.

    Returns:
        RouteData with samples in document order, statistics and bounds

    Raises:
        InvalidGPXFormatError: If the content is not well-formed XML
        NoTrackPointsError: If no <trkpt> has a valid lat/lon
    """
    if isinstance(content, str):
        content = content.lstrip("\ufeff")  # strip BOM if present

    try:
        root = ET.fromstring(content)
    except (ET.ParseError, UnicodeError) as e:
        logger.error(f"Failed to parse GPX: {e}")
        raise InvalidGPXFormatError(f"Invalid GPX file format: {e}") from e

    samples: list[GeoSample] = []
    skipped = 0

    for trkpt in _iter_elements(root, "trkpt"):
        sample = _parse_track_point(trkpt)
        if sample is None:
            skipped += 1
            continue
        samples.append(sample)

    if not samples:
        logger.error(f"GPX has no usable track points ({skipped} skipped)")
        raise NoTrackPointsError("No track points found in GPX file")

    statistics = compute_statistics(samples)
    bounds = calculate_bounds(samples)

    logger.info(
        f"Parsed GPX: {len(samples)} points, {skipped} skipped, "
        f"{format_distance_km(statistics.distance_km)}"
    )

    return RouteData(samples=samples, statistics=statistics, bounds=bounds)


def _parse_track_point(trkpt: ET.Element) -> Optional[GeoSample]:
    """Build a sample from <trkpt>, or None if lat/lon is unusable."""
    lat = _parse_float(trkpt.get("lat"))
    lon = _parse_float(trkpt.get("lon"))
    if lat is None or lon is None:
        logger.debug(
            f"Skipping track point with lat={trkpt.get('lat')!r} lon={trkpt.get('lon')!r}"
        )
        return None

    return GeoSample(
        latitude=lat,
        longitude=lon,
        elevation=_parse_float(_child_text(trkpt, "ele")),
        timestamp=_child_text(trkpt, "time"),
    )


def _parse_float(value: Optional[str]) -> Optional[float]:
    """Parse a finite float, None otherwise."""
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    """Stripped text of the first descendant called `name`, None if empty."""
    for child in _iter_elements(element, name):
        if child is element:
            continue
        text = (child.text or "").strip()
        return text or None
    return None


def _iter_elements(root: ET.Element, name: str) -> Iterator[ET.Element]:
    """Elements with the given local name, in document order.

    GPX 1.0 and 1.1 use different default namespaces, so tags are
    matched without their '{namespace}' prefix.
    """
    for element in root.iter():
        tag = element.tag
        if isinstance(tag, str) and tag.rsplit("}", 1)[-1] == name:
            yield element
