# -*- coding: utf-8 -*-
"""Reference ellipsoid registry.

Maps every supported :class:`~geodatum_lib.enums.Datum` to the ellipsoid it
is defined on. The registry is read-only; a context can switch to a custom
ellipsoid through
:meth:`~geodatum_lib.context.TransformContext.set_custom_ellipsoid`.
"""

from __future__ import annotations

from types import MappingProxyType

from geodatum_lib.enums import Datum
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.models import Ellipsoid

WGS84 = Ellipsoid.from_axes(6378137.0, 1.0 / 298.257223563, "WGS84")
GRS80 = Ellipsoid.from_axes(6378137.0, 1.0 / 298.257222101, "GRS80")
CLARKE_1866 = Ellipsoid.from_axes(6378206.4, 1.0 / 294.9786982, "Clarke1866")
INTERNATIONAL_1924 = Ellipsoid.from_axes(6378388.0, 1.0 / 297.0, "Intl1924")
BESSEL_1841 = Ellipsoid.from_axes(6377397.155, 1.0 / 299.1528128, "Bessel1841")
AIRY_1830 = Ellipsoid.from_axes(6377563.396, 1.0 / 299.3249646, "Airy1830")

#: Datum -> ellipsoid lookup table
ELLIPSOIDS: MappingProxyType[Datum, Ellipsoid] = MappingProxyType(
    {
        Datum.WGS_1984: WGS84,
        Datum.MGRS_GRID: WGS84,
        Datum.UTM_GRID: WGS84,
        Datum.NORTH_AMERICAN_1983: GRS80,
        Datum.NORTH_AMERICAN_1927: CLARKE_1866,
        Datum.EUROPEAN_1950: INTERNATIONAL_1924,
        Datum.TOKYO: BESSEL_1841,
        Datum.ORDNANCE_SURVEY_1936: AIRY_1830,
    }
)


def ellipsoid_for(datum: str | Datum) -> Ellipsoid:
    """Look up the reference ellipsoid of a datum.

    Args:
        datum: A Datum member or any name accepted by ``Datum.normalize``

    Returns:
        The ellipsoid the datum is defined on

    Raises:
        InvalidInputError: If the datum is missing or unknown
    """
    try:
        key = Datum.normalize(datum)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e

    if key is None or key not in ELLIPSOIDS:
        raise InvalidInputError(f"No ellipsoid registered for datum {datum!r}")

    return ELLIPSOIDS[key]
