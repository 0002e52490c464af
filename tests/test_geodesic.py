# -*- coding: utf-8 -*-
"""Tests for the geodesic problems."""

import pytest

from geodatum_lib.context import TransformContext
from geodatum_lib.datum import convert_datum
from geodatum_lib.enums import Datum
from geodatum_lib.enums import ErrorCode
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.errors import OutOfRangeError
from geodatum_lib.geodesic import geodesic_direct
from geodatum_lib.geodesic import geodesic_distance
from geodatum_lib.geodesic import geodesic_inverse
from geodatum_lib.models import GeoCoord
from tests.conftest import LONDON
from tests.conftest import SHANGHAI
from tests.conftest import SYDNEY
from tests.conftest import TOKYO_STATION

ORIGIN = GeoCoord(latitude=0.0, longitude=0.0)

#: Length of one degree of longitude on the WGS84 equator
EQUATOR_DEGREE = 111319.490793


class TestGeodesicInverse:
    """Tests for distance and azimuths between two points."""

    def test_one_degree_along_equator(self, ctx):
        result = geodesic_inverse(ctx, ORIGIN, GeoCoord(latitude=0.0, longitude=1.0))
        assert result.distance == pytest.approx(EQUATOR_DEGREE, abs=1e-3)
        assert result.azimuth1 == pytest.approx(90.0)
        assert result.azimuth2 == pytest.approx(90.0)

    def test_due_north(self, ctx):
        result = geodesic_inverse(ctx, ORIGIN, GeoCoord(latitude=1.0, longitude=0.0))
        assert result.distance == pytest.approx(110574.389, abs=0.01)
        assert result.azimuth1 == pytest.approx(0.0, abs=1e-9)
        assert result.azimuth2 == pytest.approx(0.0, abs=1e-9)

    def test_due_west_azimuth_is_negative(self, ctx):
        result = geodesic_inverse(ctx, ORIGIN, GeoCoord(latitude=0.0, longitude=-1.0))
        assert result.azimuth1 == pytest.approx(-90.0)
        assert -180.0 <= result.azimuth2 < 180.0

    def test_same_point(self, ctx):
        assert geodesic_distance(ctx, LONDON, LONDON) == pytest.approx(0.0, abs=1e-9)

    def test_symmetric_distance(self, ctx):
        assert geodesic_distance(ctx, SHANGHAI, SYDNEY) == pytest.approx(
            geodesic_distance(ctx, SYDNEY, SHANGHAI)
        )

    def test_london_to_sydney(self, ctx):
        # Roughly 17,000 km along the ellipsoid
        assert 16_900_000 < geodesic_distance(ctx, LONDON, SYDNEY) < 17_100_000

    def test_second_point_converted_to_first_datum(self, ctx):
        tokyo = convert_datum(ctx, TOKYO_STATION, Datum.TOKYO)
        assert geodesic_distance(ctx, TOKYO_STATION, tokyo) == pytest.approx(
            0.0, abs=0.01
        )

    def test_uses_context_ellipsoid(self, ctx):
        wgs84 = geodesic_distance(ctx, LONDON, SHANGHAI)
        with TransformContext(Datum.TOKYO) as bessel:
            assert geodesic_distance(bessel, LONDON, SHANGHAI) != pytest.approx(
                wgs84, abs=1.0
            )

    def test_invalid_point(self, ctx, observer):
        with pytest.raises(InvalidCoordinateError):
            geodesic_inverse(ctx, ORIGIN, GeoCoord(latitude=91.0, longitude=0.0))
        assert observer.codes == [ErrorCode.INVALID_COORDINATE]


class TestGeodesicDirect:
    """Tests for travelling a distance along an azimuth."""

    def test_one_degree_east(self, ctx):
        dest = geodesic_direct(ctx, ORIGIN, EQUATOR_DEGREE, 90.0)
        assert dest.latitude == pytest.approx(0.0, abs=1e-9)
        assert dest.longitude == pytest.approx(1.0, abs=1e-8)
        assert dest.altitude == 0.0
        assert dest.datum is Datum.WGS_1984

    def test_zero_distance(self, ctx):
        dest = geodesic_direct(ctx, SHANGHAI, 0.0, 45.0)
        assert dest.latitude == pytest.approx(SHANGHAI.latitude)
        assert dest.longitude == pytest.approx(SHANGHAI.longitude)

    def test_crosses_antimeridian(self, ctx):
        start = GeoCoord(latitude=0.0, longitude=179.5)
        dest = geodesic_direct(ctx, start, EQUATOR_DEGREE, 90.0)
        assert dest.longitude == pytest.approx(-179.5, abs=1e-8)

    def test_consistent_with_inverse(self, ctx):
        result = geodesic_inverse(ctx, LONDON, TOKYO_STATION)
        dest = geodesic_direct(ctx, LONDON, result.distance, result.azimuth1)
        assert dest.latitude == pytest.approx(TOKYO_STATION.latitude, abs=1e-8)
        assert dest.longitude == pytest.approx(TOKYO_STATION.longitude, abs=1e-8)

    def test_keeps_start_datum(self, ctx):
        start = GeoCoord(latitude=35.0, longitude=139.0, datum=Datum.TOKYO)
        assert geodesic_direct(ctx, start, 1000.0, 0.0).datum is Datum.TOKYO

    def test_negative_distance(self, ctx, observer):
        with pytest.raises(OutOfRangeError):
            geodesic_direct(ctx, ORIGIN, -1.0, 0.0)
        assert observer.codes == [ErrorCode.OUT_OF_RANGE]

    @pytest.mark.parametrize(
        ("distance", "azimuth"),
        [(float("nan"), 0.0), (1000.0, float("inf"))],
    )
    def test_non_finite_input(self, ctx, distance, azimuth):
        with pytest.raises(InvalidInputError):
            geodesic_direct(ctx, ORIGIN, distance, azimuth)

    def test_invalid_start(self, ctx):
        with pytest.raises(InvalidCoordinateError):
            geodesic_direct(ctx, GeoCoord(latitude=0.0, longitude=-200.0), 1.0, 0.0)
