"""
Tests for the GPX track parser.

Covers document-order preservation, lenient point skipping and the two
document-level failures.
"""

import pytest

from racejournal.features.gpx import (
    GPXParseError,
    InvalidGPXFormatError,
    NoTrackPointsError,
    RouteData,
    parse_track,
)


# =============================================================================
# Test Data
# =============================================================================

GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">\n'
)


def make_gpx(*trkpts: str) -> str:
    """Wrap <trkpt> snippets in a single-segment GPX 1.1 document."""
    body = "\n".join(trkpts)
    return f"{GPX_HEADER}<trk><name>Test</name><trkseg>\n{body}\n</trkseg></trk></gpx>"


def trkpt(lat="0", lon="0", ele=None, time=None) -> str:
    attrs = []
    if lat is not None:
        attrs.append(f'lat="{lat}"')
    if lon is not None:
        attrs.append(f'lon="{lon}"')
    children = ""
    if ele is not None:
        children += f"<ele>{ele}</ele>"
    if time is not None:
        children += f"<time>{time}</time>"
    return f'<trkpt {" ".join(attrs)}>{children}</trkpt>'


# =============================================================================
# Test Successful Parsing
# =============================================================================

class TestParseTrack:
    """Tests for parse_track on valid documents."""

    def test_returns_route_data(self):
        route = parse_track(make_gpx(trkpt("0", "0"), trkpt("0", "1")))
        assert isinstance(route, RouteData)
        assert route.statistics.point_count == 2
        assert len(route.samples) == 2

    def test_preserves_document_order(self):
        """Samples come out in document order, never sorted."""
        coords = [(5.0, 1.0), (-3.0, 2.0), (10.0, -7.5), (0.5, 0.5)]
        route = parse_track(make_gpx(*(trkpt(lat, lon) for lat, lon in coords)))
        assert [(s.latitude, s.longitude) for s in route.samples] == coords

    def test_order_across_segments_and_tracks(self):
        text = (
            f"{GPX_HEADER}"
            "<trk><trkseg>"
            '<trkpt lat="1" lon="1"/><trkpt lat="2" lon="2"/>'
            "</trkseg><trkseg>"
            '<trkpt lat="3" lon="3"/>'
            "</trkseg></trk>"
            '<trk><trkseg><trkpt lat="4" lon="4"/></trkseg></trk>'
            "</gpx>"
        )
        route = parse_track(text)
        assert [s.latitude for s in route.samples] == [1.0, 2.0, 3.0, 4.0]

    def test_elevation_and_time_extracted(self):
        route = parse_track(make_gpx(
            trkpt("52.5", "13.4", ele="34.5", time="2024-09-29T07:15:00Z"),
        ))
        sample = route.samples[0]
        assert sample.latitude == 52.5
        assert sample.longitude == 13.4
        assert sample.elevation == 34.5
        assert sample.timestamp == "2024-09-29T07:15:00Z"

    def test_missing_elevation_and_time_are_none(self):
        route = parse_track(make_gpx(trkpt("1", "2")))
        assert route.samples[0].elevation is None
        assert route.samples[0].timestamp is None

    def test_non_numeric_elevation_is_absent(self):
        """Bad <ele> drops the elevation, not the point."""
        route = parse_track(make_gpx(trkpt("1", "2", ele="n/a"), trkpt("1", "3", ele="")))
        assert route.statistics.point_count == 2
        assert all(s.elevation is None for s in route.samples)
        assert route.statistics.min_elevation_m is None

    def test_time_whitespace_stripped(self):
        route = parse_track(make_gpx(trkpt("1", "2", time="  2024-01-01T00:00:00Z\n")))
        assert route.samples[0].timestamp == "2024-01-01T00:00:00Z"

    def test_blank_time_is_absent(self):
        route = parse_track(make_gpx(trkpt("1", "2", time="   ")))
        assert route.samples[0].timestamp is None

    def test_gpx_without_namespace(self):
        text = '<gpx><trk><trkseg><trkpt lat="1" lon="2"><ele>5</ele></trkpt></trkseg></trk></gpx>'
        route = parse_track(text)
        assert route.samples[0].elevation == 5.0

    def test_gpx_1_0_namespace(self):
        text = (
            '<gpx version="1.0" xmlns="http://www.topografix.com/GPX/1/0">'
            '<trk><trkseg><trkpt lat="1" lon="2"/></trkseg></trk></gpx>'
        )
        assert parse_track(text).statistics.point_count == 1

    def test_route_points_are_ignored(self):
        text = (
            f"{GPX_HEADER}"
            '<rte><rtept lat="9" lon="9"/></rte>'
            '<trk><trkseg><trkpt lat="1" lon="1"/></trkseg></trk></gpx>'
        )
        route = parse_track(text)
        assert [s.latitude for s in route.samples] == [1.0]

    def test_bytes_input(self):
        route = parse_track(make_gpx(trkpt("1", "2")).encode("utf-8"))
        assert route.statistics.point_count == 1

    def test_bytes_with_bom(self):
        route = parse_track(b"\xef\xbb\xbf" + make_gpx(trkpt("1", "2")).encode("utf-8"))
        assert route.statistics.point_count == 1

    def test_text_with_bom(self):
        route = parse_track("\ufeff" + make_gpx(trkpt("1", "2")))
        assert route.statistics.point_count == 1

    def test_bounds(self):
        route = parse_track(make_gpx(
            trkpt("10", "-5"), trkpt("12", "3"), trkpt("11", "-8"),
        ))
        assert route.bounds.min_lat == 10.0
        assert route.bounds.max_lat == 12.0
        assert route.bounds.min_lon == -8.0
        assert route.bounds.max_lon == 3.0


# =============================================================================
# Test Lenient Point Skipping
# =============================================================================

class TestMalformedPoints:
    """Malformed points are skipped one by one."""

    @pytest.mark.parametrize("lat,lon", [
        (None, "1"),
        ("1", None),
        ("abc", "1"),
        ("1", "abc"),
        ("", "1"),
        ("NaN", "1"),
        ("1", "inf"),
    ])
    def test_bad_coordinate_skipped(self, lat, lon):
        route = parse_track(make_gpx(trkpt(lat, lon), trkpt("5", "6")))
        assert route.statistics.point_count == 1
        assert route.samples[0].latitude == 5.0

    def test_one_valid_among_ten_malformed(self):
        malformed = [trkpt(None, "1")] * 5 + [trkpt("abc", "1")] * 5
        route = parse_track(make_gpx(*malformed[:4], trkpt("7", "8"), *malformed[4:]))
        assert route.statistics.point_count == 1
        assert route.statistics.distance_km == 0.0

    def test_skipped_point_does_not_break_order(self):
        route = parse_track(make_gpx(
            trkpt("1", "1"), trkpt("x", "2"), trkpt("3", "3"),
        ))
        assert [s.latitude for s in route.samples] == [1.0, 3.0]

    def test_out_of_range_latitude_kept(self):
        """Range is not validated beyond being a finite number."""
        route = parse_track(make_gpx(trkpt("95", "200")))
        assert route.samples[0].latitude == 95.0


# =============================================================================
# Test Document-Level Failures
# =============================================================================

class TestParseFailures:
    """Tests for InvalidGPXFormatError and NoTrackPointsError."""

    def test_no_track_points(self):
        text = f"{GPX_HEADER}<trk><trkseg></trkseg></trk></gpx>"
        with pytest.raises(NoTrackPointsError):
            parse_track(text)

    def test_all_points_malformed(self):
        with pytest.raises(NoTrackPointsError):
            parse_track(make_gpx(trkpt(None, "1"), trkpt("abc", "2")))

    def test_only_route_points(self):
        text = f'{GPX_HEADER}<rte><rtept lat="1" lon="1"/></rte></gpx>'
        with pytest.raises(NoTrackPointsError):
            parse_track(text)

    @pytest.mark.parametrize("text", [
        '<gpx><trk><trkseg><trkpt lat="1" lon="2">',
        "<gpx><trk></gpx>",
        "this is not xml",
        "",
    ])
    def test_malformed_xml(self, text):
        with pytest.raises(InvalidGPXFormatError):
            parse_track(text)

    def test_errors_share_base_class(self):
        """Callers can catch one type (or ValueError) for both failures."""
        assert issubclass(InvalidGPXFormatError, GPXParseError)
        assert issubclass(NoTrackPointsError, GPXParseError)
        assert issubclass(GPXParseError, ValueError)

    def test_invalid_format_message(self):
        with pytest.raises(GPXParseError, match="Invalid GPX file format"):
            parse_track("<gpx>")

    def test_bytes_invalid_in_declared_encoding(self):
        """Bytes that are not valid UTF-8 are a format error."""
        content = (
            b'<gpx><trk><name>\xff\xfe</name><trkseg>'
            b'<trkpt lat="1" lon="2"/></trkseg></trk></gpx>'
        )
        with pytest.raises(InvalidGPXFormatError):
            parse_track(content)

    def test_lone_surrogate_in_text(self):
        with pytest.raises(InvalidGPXFormatError):
            parse_track('<gpx><trk><name>\ud800</name></trk></gpx>')


# =============================================================================
# Test Encodings and Extreme Coordinates
# =============================================================================

class TestEncodingAndCoordinates:
    """Declared encodings and coordinates at the edge of float math."""

    def test_latin1_declared_encoding(self):
        content = (
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            '<gpx><trk><name>Zürich Lauf</name><trkseg>'
            '<trkpt lat="47.37" lon="8.54"/></trkseg></trk></gpx>'
        ).encode("latin-1")
        route = parse_track(content)
        assert route.statistics.point_count == 1
        assert route.samples[0].latitude == 47.37

    def test_near_antipodal_consecutive_points(self):
        route = parse_track(
            '<gpx><trk><trkseg>'
            '<trkpt lat="-70.36958773240134" lon="-161.543791407401557"/>'
            '<trkpt lat="70.36958777371362" lon="18.45620860208663"/>'
            '</trkseg></trk></gpx>'
        )
        assert route.statistics.point_count == 2
        assert route.statistics.distance_km == pytest.approx(20015.09, abs=0.5)

    def test_huge_finite_latitudes(self):
        """Kept as finite numbers; the overflowing leg counts as zero."""
        route = parse_track(
            '<gpx><trk><trkseg>'
            '<trkpt lat="1e308" lon="0"/><trkpt lat="-1e308" lon="0"/>'
            '</trkseg></trk></gpx>'
        )
        assert route.statistics.point_count == 2
        assert route.statistics.distance_km == 0.0
