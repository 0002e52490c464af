# -*- coding: utf-8 -*-
"""Tests for the ellipsoid registry."""

import pytest

from geodatum_lib.ellipsoid import ELLIPSOIDS
from geodatum_lib.ellipsoid import ellipsoid_for
from geodatum_lib.enums import Datum
from geodatum_lib.errors import InvalidInputError


class TestEllipsoidRegistry:
    """Tests for ellipsoid_for and ELLIPSOIDS."""

    @pytest.mark.parametrize(
        ("datum", "name", "a", "inv_f"),
        [
            (Datum.WGS_1984, "WGS84", 6378137.0, 298.257223563),
            (Datum.MGRS_GRID, "WGS84", 6378137.0, 298.257223563),
            (Datum.UTM_GRID, "WGS84", 6378137.0, 298.257223563),
            (Datum.NORTH_AMERICAN_1983, "GRS80", 6378137.0, 298.257222101),
            (Datum.NORTH_AMERICAN_1927, "Clarke1866", 6378206.4, 294.9786982),
            (Datum.EUROPEAN_1950, "Intl1924", 6378388.0, 297.0),
            (Datum.TOKYO, "Bessel1841", 6377397.155, 299.1528128),
            (Datum.ORDNANCE_SURVEY_1936, "Airy1830", 6377563.396, 299.3249646),
        ],
    )
    def test_lookup(self, datum, name, a, inv_f):
        ell = ellipsoid_for(datum)
        assert ell.name == name
        assert ell.a == a
        assert 1.0 / ell.f == pytest.approx(inv_f, rel=1e-12)

    def test_every_datum_registered(self):
        assert set(ELLIPSOIDS) == set(Datum)

    def test_lookup_by_name(self):
        assert ellipsoid_for("ordnance survey 1936").name == "Airy1830"

    def test_derived_quantities(self):
        for ell in ELLIPSOIDS.values():
            assert ell.b == pytest.approx(ell.a * (1.0 - ell.f))
            assert ell.e2 == pytest.approx(2.0 * ell.f - ell.f**2)
            assert ell.ep2 == pytest.approx(ell.e2 / (1.0 - ell.e2))

    def test_airy_semi_minor_axis(self):
        assert ellipsoid_for(Datum.ORDNANCE_SURVEY_1936).b == pytest.approx(
            6356256.909, abs=1e-3
        )

    def test_unknown_datum(self):
        with pytest.raises(InvalidInputError):
            ellipsoid_for("Mars 2000")

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            ELLIPSOIDS[Datum.WGS_1984] = None  # type: ignore[index]
