# -*- coding: utf-8 -*-
"""Tests for geocentric conversions and the datum transformation table."""

import math

import numpy as np
import pytest

from geodatum_lib.datum import DEFAULT_TRANSFORMS
from geodatum_lib.datum import OSGB36_TO_WGS84
from geodatum_lib.datum import DatumTransformTable
from geodatum_lib.datum import convert_datum
from geodatum_lib.datum import geocentric_to_geodetic
from geodatum_lib.datum import geodetic_to_geocentric
from geodatum_lib.ellipsoid import AIRY_1830
from geodatum_lib.ellipsoid import WGS84
from geodatum_lib.enums import Datum
from geodatum_lib.enums import ErrorCode
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.models import DatumTransform
from geodatum_lib.models import GeoCoord
from tests.conftest import LONDON
from tests.conftest import TOKYO_STATION


class TestGeocentric:
    """Tests for geodetic <-> geocentric conversions."""

    def test_equator_prime_meridian(self):
        xyz = geodetic_to_geocentric(WGS84, 0.0, 0.0, 0.0)
        np.testing.assert_allclose(xyz, [6378137.0, 0.0, 0.0], atol=1e-6)

    def test_north_pole(self):
        xyz = geodetic_to_geocentric(WGS84, 90.0, 0.0, 0.0)
        assert xyz[2] == pytest.approx(WGS84.b, abs=1e-6)

    def test_height_is_added_along_normal(self):
        xyz = geodetic_to_geocentric(WGS84, 0.0, 90.0, 100.0)
        np.testing.assert_allclose(xyz, [0.0, 6378237.0, 0.0], atol=1e-6)

    @pytest.mark.parametrize(
        ("lat", "lon", "height"),
        [
            (51.5074, -0.1278, 45.0),
            (-33.8568, 151.2153, 0.0),
            (89.9, 10.0, 1000.0),
            (90.0, 0.0, 0.0),
            (-89.5, -120.0, 10.0),
            (0.0, 180.0, -20.0),
        ],
    )
    def test_round_trip(self, lat, lon, height):
        xyz = geodetic_to_geocentric(AIRY_1830, lat, lon, height)
        lat2, lon2, height2 = geocentric_to_geodetic(AIRY_1830, xyz)
        assert lat2 == pytest.approx(lat, abs=1e-8)
        if abs(lat) < 90.0:
            assert math.cos(math.radians(lon2 - lon)) == pytest.approx(1.0)
        assert height2 == pytest.approx(height, abs=1e-3)


class TestDatumTransformTable:
    """Tests for DatumTransformTable."""

    def test_unset_pair_is_identity(self):
        table = DatumTransformTable()
        assert table.get(Datum.WGS_1984, Datum.TOKYO).is_identity

    def test_set_stores_both_directions(self):
        table = DatumTransformTable()
        params = DatumTransform(dx=1.0, dy=2.0, dz=3.0)
        table.set(Datum.EUROPEAN_1950, Datum.WGS_1984, params)

        assert table.get(Datum.EUROPEAN_1950, Datum.WGS_1984) == params
        reverse = table.get(Datum.WGS_1984, Datum.EUROPEAN_1950)
        assert (reverse.dx, reverse.dy, reverse.dz) == (-1.0, -2.0, -3.0)

    def test_iteration_yields_explicit_records_only(self):
        table = DatumTransformTable()
        table.set(Datum.TOKYO, Datum.WGS_1984, DatumTransform(dx=1.0))
        assert list(table) == [
            (Datum.TOKYO, Datum.WGS_1984, DatumTransform(dx=1.0))
        ]
        assert len(table) == 1

    def test_setting_reverse_replaces_explicit_record(self):
        table = DatumTransformTable()
        table.set(Datum.TOKYO, Datum.WGS_1984, DatumTransform(dx=1.0))
        table.set(Datum.WGS_1984, Datum.TOKYO, DatumTransform(dx=5.0))
        assert list(table) == [
            (Datum.WGS_1984, Datum.TOKYO, DatumTransform(dx=5.0))
        ]
        assert table.get(Datum.TOKYO, Datum.WGS_1984).dx == -5.0

    def test_same_datum_rejected(self):
        table = DatumTransformTable()
        with pytest.raises(InvalidInputError):
            table.set(Datum.TOKYO, Datum.TOKYO, DatumTransform(dx=1.0))

    def test_seed_defaults(self):
        table = DatumTransformTable()
        table.seed_defaults()
        assert len(table) == len(DEFAULT_TRANSFORMS)
        assert table.get(Datum.NORTH_AMERICAN_1927, Datum.WGS_1984).dx == -8.0
        assert table.get(Datum.WGS_1984, Datum.NORTH_AMERICAN_1927).dx == 8.0
        assert table.get(Datum.WGS_1984, Datum.NORTH_AMERICAN_1983).is_identity


class TestConvertDatum:
    """Tests for convert_datum."""

    def test_same_datum_returns_input(self, ctx):
        assert convert_datum(ctx, LONDON, Datum.WGS_1984) is LONDON

    def test_identity_passthrough_retags(self, ctx):
        result = convert_datum(ctx, LONDON, Datum.NORTH_AMERICAN_1983)
        assert result.datum is Datum.NORTH_AMERICAN_1983
        assert result.as_tuple() == LONDON.as_tuple()

    def test_target_by_name(self, ctx):
        result = convert_datum(ctx, LONDON, "ordnance survey 1936")
        assert result.datum is Datum.ORDNANCE_SURVEY_1936

    def test_unknown_target(self, ctx, observer):
        with pytest.raises(InvalidInputError):
            convert_datum(ctx, LONDON, "Mars 2000")
        assert observer.codes == [ErrorCode.INVALID_INPUT]

    def test_invalid_source(self, ctx):
        with pytest.raises(InvalidCoordinateError):
            convert_datum(ctx, GeoCoord(latitude=100.0, longitude=0.0), Datum.TOKYO)

    def test_wgs84_to_tokyo_direction(self, ctx):
        tokyo = convert_datum(ctx, TOKYO_STATION, Datum.TOKYO)
        assert tokyo.datum is Datum.TOKYO
        # Tokyo datum coordinates lie about 0.0032 degrees south and east
        assert -0.0040 < tokyo.latitude - TOKYO_STATION.latitude < -0.0025
        assert 0.0025 < tokyo.longitude - TOKYO_STATION.longitude < 0.0040

    def test_wgs84_to_osgb36_shift(self, ctx):
        osgb = convert_datum(ctx, LONDON, Datum.ORDNANCE_SURVEY_1936)
        # OSGB36 latitudes in London are ~0.00055 degrees south of WGS84 and
        # longitudes ~0.0016 degrees east
        assert osgb.latitude - LONDON.latitude == pytest.approx(-0.0005, abs=3e-4)
        assert osgb.longitude - LONDON.longitude == pytest.approx(0.0016, abs=3e-4)
        # Ellipsoidal height drops by roughly 46 m onto Airy 1830
        assert osgb.altitude == pytest.approx(-46.0, abs=5.0)

    @pytest.mark.parametrize(
        ("datum", "coord"),
        [
            (Datum.ORDNANCE_SURVEY_1936, LONDON),
            (Datum.TOKYO, TOKYO_STATION),
            (Datum.NORTH_AMERICAN_1927, GeoCoord(latitude=39.0, longitude=-98.0)),
            (Datum.EUROPEAN_1950, GeoCoord(latitude=48.85, longitude=2.35)),
        ],
    )
    def test_round_trip_within_meters(self, ctx, datum, coord):
        there = convert_datum(ctx, coord, datum)
        back = convert_datum(ctx, there, Datum.WGS_1984)
        # 1e-5 degrees is about a meter
        assert back.latitude == pytest.approx(coord.latitude, abs=5e-5)
        assert back.longitude == pytest.approx(coord.longitude, abs=5e-5)
        assert back.datum is Datum.WGS_1984

    def test_custom_params_round_trip(self, bare_ctx):
        bare_ctx.set_transform_params(
            Datum.WGS_1984,
            Datum.EUROPEAN_1950,
            DatumTransform(dx=87.0, dy=98.0, dz=121.0, rz=0.5, scale=1.5),
        )
        coord = GeoCoord(latitude=41.9, longitude=12.5, altitude=20.0)
        there = convert_datum(bare_ctx, coord, Datum.EUROPEAN_1950)
        back = convert_datum(bare_ctx, there, Datum.WGS_1984)
        assert back.latitude == pytest.approx(coord.latitude, abs=5e-5)
        assert back.longitude == pytest.approx(coord.longitude, abs=5e-5)
        assert back.altitude == pytest.approx(coord.altitude, abs=5.0)

    def test_fixed_osgb36_set_reverses_seed(self, ctx):
        seeded = ctx.get_transform_params(
            Datum.WGS_1984, Datum.ORDNANCE_SURVEY_1936
        )
        assert OSGB36_TO_WGS84.dx == -seeded.dx
        assert OSGB36_TO_WGS84.rz == -seeded.rz
        assert OSGB36_TO_WGS84.scale == -seeded.scale
