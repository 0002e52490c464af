# -*- coding: utf-8 -*-
"""Ordnance Survey National Grid of Great Britain.

The grid is a transverse Mercator projection of the OSGB36 datum (Airy 1830
ellipsoid) with its true origin at 49N 2W. Grid references are prefixed by
two letters: the first names a 500 km square and the second a 100 km square
inside it, both drawn from a 25-letter alphabet without ``I``.

The inverse projection follows the Ordnance Survey's *A Guide to Coordinate
Systems in Great Britain*, Annex C: the latitude is refined iteratively from
the meridional arc and the Redfearn terms VII-XIIA give the final position.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from geodatum_lib.constants import BRITISH_GRID_LARGE_SQUARE
from geodatum_lib.constants import BRITISH_GRID_MAX_ITERATIONS
from geodatum_lib.constants import BRITISH_GRID_SQUARE_SIZE
from geodatum_lib.constants import BRITISH_GRID_TOLERANCE
from geodatum_lib.constants import DEG_TO_RAD
from geodatum_lib.constants import OSGB36_E0
from geodatum_lib.constants import OSGB36_F0
from geodatum_lib.constants import OSGB36_LAT0
from geodatum_lib.constants import OSGB36_LON0
from geodatum_lib.constants import OSGB36_N0
from geodatum_lib.constants import RAD_TO_DEG
from geodatum_lib.datum import OSGB36_TO_WGS84
from geodatum_lib.datum import convert_datum
from geodatum_lib.datum import helmert_shift
from geodatum_lib.ellipsoid import AIRY_1830
from geodatum_lib.ellipsoid import WGS84
from geodatum_lib.enums import Datum
from geodatum_lib.errors import CalculationError
from geodatum_lib.errors import DatumTransformError
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.errors import OutOfRangeError
from geodatum_lib.grid import tmerc
from geodatum_lib.grid.alphabet import BRITISH_ALPHABET
from geodatum_lib.models import BritishGridPoint
from geodatum_lib.models import GeoCoord
from geodatum_lib.validation import validate_point

if TYPE_CHECKING:
    from geodatum_lib.context import TransformContext

logger = logging.getLogger(__name__)

#: Extent of the lettered area (the 500 km squares H, J, N, O, S and T)
GRID_MAX_EASTING: float = 2 * BRITISH_GRID_LARGE_SQUARE
GRID_MAX_NORTHING: float = 3 * BRITISH_GRID_LARGE_SQUARE

#: Squares per side of a 500 km square
_SQUARES_PER_SIDE: int = 5

#: Index of the last row of 100 km squares, counted from the top of the
#: lettering scheme
_TOP_ROW: int = 19


def _in_grid(easting: float, northing: float) -> bool:
    return 0.0 <= easting < GRID_MAX_EASTING and 0.0 <= northing < GRID_MAX_NORTHING


def british_grid_square(easting: float, northing: float) -> str:
    """Return the two letters of the 100 km square containing a position.

    Args:
        easting: Full grid easting in meters
        northing: Full grid northing in meters

    Returns:
        The square letters, e.g. ``"TQ"`` for central London

    Raises:
        OutOfRangeError: If the position lies outside the lettered grid

    Examples:
        >>> british_grid_square(530000, 180000)
        'TQ'
    """
    if not _in_grid(easting, northing):
        raise OutOfRangeError(
            f"Position ({easting:.0f}, {northing:.0f}) is outside the "
            "British National Grid"
        )

    e100k = int(math.floor(easting / BRITISH_GRID_SQUARE_SIZE))
    n100k = int(math.floor(northing / BRITISH_GRID_SQUARE_SIZE))

    # Squares are lettered from the top-left of each 5x5 block; the false
    # origin sits in square S, two blocks right and one block down from A.
    row = _TOP_ROW - n100k
    first = (row - row % _SQUARES_PER_SIDE) + (e100k + 10) // _SQUARES_PER_SIDE
    second = (row * _SQUARES_PER_SIDE) % 25 + e100k % _SQUARES_PER_SIDE

    return BRITISH_ALPHABET.letter(first) + BRITISH_ALPHABET.letter(second)


def british_grid_square_origin(letters: str) -> tuple[float, float]:
    """Return the south-west corner of a lettered 100 km square.

    Raises:
        InvalidCoordinateError: If the letters do not name a grid square
    """
    if len(letters) != 2:
        raise InvalidCoordinateError(f"Expected two grid letters, got {letters!r}")

    try:
        first = BRITISH_ALPHABET.index(letters[0])
        second = BRITISH_ALPHABET.index(letters[1])
    except ValueError as e:
        raise InvalidCoordinateError(str(e)) from e

    e100k = ((first - 2) % _SQUARES_PER_SIDE) * _SQUARES_PER_SIDE + (
        second % _SQUARES_PER_SIDE
    )
    n100k = (
        _TOP_ROW
        - (first // _SQUARES_PER_SIDE) * _SQUARES_PER_SIDE
        - second // _SQUARES_PER_SIDE
    )

    easting = e100k * BRITISH_GRID_SQUARE_SIZE
    northing = n100k * BRITISH_GRID_SQUARE_SIZE
    if not _in_grid(easting, northing):
        raise InvalidCoordinateError(
            f"Grid square {letters!r} is outside the British National Grid"
        )
    return easting, northing


def geodetic_to_british_grid(
    ctx: TransformContext, coord: GeoCoord
) -> BritishGridPoint:
    """Project a geodetic coordinate onto the British National Grid.

    Coordinates on other datums are first transformed to OSGB36 through the
    context's transformation table.

    Raises:
        InvalidCoordinateError: If the coordinate is out of range
        OutOfRangeError: If the position falls outside the lettered grid
        DatumTransformError: If the shift to OSGB36 failed
    """
    ctx.ensure_open()
    try:
        validate_point(coord)
    except InvalidCoordinateError as e:
        raise ctx.report(InvalidCoordinateError, e.message) from e

    osgb = convert_datum(ctx, coord, Datum.ORDNANCE_SURVEY_1936)

    projected = tmerc.forward(
        AIRY_1830,
        osgb.latitude * DEG_TO_RAD,
        (osgb.longitude - OSGB36_LON0) * DEG_TO_RAD,
        OSGB36_F0,
        OSGB36_LAT0 * DEG_TO_RAD,
    )
    easting = OSGB36_E0 + projected.x
    northing = OSGB36_N0 + projected.y

    try:
        letters = british_grid_square(easting, northing)
    except OutOfRangeError as e:
        raise ctx.report(OutOfRangeError, e.message) from e

    return BritishGridPoint(letters=letters, easting=easting, northing=northing)


def _grid_to_osgb36(easting: float, northing: float) -> tuple[float, float]:
    """Inverse projection onto OSGB36 latitude/longitude in degrees."""
    a = AIRY_1830.a
    e2 = AIRY_1830.e2
    phi0 = OSGB36_LAT0 * DEG_TO_RAD
    m0 = tmerc.meridional_arc(AIRY_1830, phi0)

    phi = phi0
    arc = 0.0
    for _ in range(BRITISH_GRID_MAX_ITERATIONS):
        correction = (northing - OSGB36_N0 - arc) / (a * OSGB36_F0)
        phi += correction
        arc = OSGB36_F0 * (tmerc.meridional_arc(AIRY_1830, phi) - m0)
        if abs(correction) < BRITISH_GRID_TOLERANCE:
            break
    else:
        logger.warning(
            "Latitude iteration did not converge for (%s, %s) after %d steps",
            easting,
            northing,
            BRITISH_GRID_MAX_ITERATIONS,
        )

    sin_phi = math.sin(phi)
    tan_phi = math.tan(phi)
    sec_phi = 1.0 / math.cos(phi)
    t2 = tan_phi * tan_phi
    t4 = t2 * t2
    t6 = t4 * t2

    w = 1.0 - e2 * sin_phi * sin_phi
    nu = a * OSGB36_F0 / math.sqrt(w)
    rho = a * OSGB36_F0 * (1.0 - e2) / (w * math.sqrt(w))
    eta2 = nu / rho - 1.0

    vii = tan_phi / (2.0 * rho * nu)
    viii = tan_phi / (24.0 * rho * nu**3) * (5.0 + 3.0 * t2 + eta2 - 9.0 * t2 * eta2)
    ix = tan_phi / (720.0 * rho * nu**5) * (61.0 + 90.0 * t2 + 45.0 * t4)
    x = sec_phi / nu
    xi = sec_phi / (6.0 * nu**3) * (nu / rho + 2.0 * t2)
    xii = sec_phi / (120.0 * nu**5) * (5.0 + 28.0 * t2 + 24.0 * t4)
    xiia = sec_phi / (5040.0 * nu**7) * (61.0 + 662.0 * t2 + 1320.0 * t4 + 720.0 * t6)

    de = easting - OSGB36_E0
    lat = phi - vii * de**2 + viii * de**4 - ix * de**6
    lon = OSGB36_LON0 * DEG_TO_RAD + x * de - xi * de**3 + xii * de**5 - xiia * de**7

    return lat * RAD_TO_DEG, lon * RAD_TO_DEG


def british_grid_to_geodetic(
    ctx: TransformContext,
    point: BritishGridPoint,
    target_datum: str | Datum = Datum.WGS_1984,
) -> GeoCoord:
    """Convert a British National Grid point to geodetic coordinates.

    The OSGB36 position is shifted to WGS84 with the fixed Ordnance Survey
    parameter set, independent of the context's transformation table. Other
    target datums are then reached from WGS84 through the table.

    Args:
        ctx: Transformation context
        point: Grid point with full easting and northing
        target_datum: Datum of the returned coordinate

    Returns:
        Geodetic coordinate on ``target_datum`` with zero altitude

    Raises:
        InvalidInputError: If the target datum is unknown
        InvalidCoordinateError: If the point lies outside the grid or its
            letters do not match its easting and northing
        CalculationError: If the inverse produced non-finite values
        DatumTransformError: If a datum shift failed
    """
    ctx.ensure_open()
    try:
        target = Datum.normalize(target_datum)
    except ValueError as e:
        raise ctx.report(InvalidInputError, str(e)) from e
    if target is None:
        raise ctx.report(InvalidInputError, "Target datum is required")

    if not _in_grid(point.easting, point.northing):
        raise ctx.report(
            InvalidCoordinateError,
            f"Grid point {point} is outside the British National Grid",
        )
    if british_grid_square(point.easting, point.northing) != point.letters:
        raise ctx.report(
            InvalidCoordinateError,
            f"Grid letters {point.letters!r} do not match "
            f"({point.easting:.0f}, {point.northing:.0f})",
        )

    lat, lon = _grid_to_osgb36(point.easting, point.northing)
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ctx.report(CalculationError, f"British Grid inverse failed for {point}")

    osgb = GeoCoord(
        latitude=lat, longitude=lon, datum=Datum.ORDNANCE_SURVEY_1936
    )
    if target == Datum.ORDNANCE_SURVEY_1936:
        return osgb

    try:
        wgs84 = helmert_shift(
            osgb, OSGB36_TO_WGS84, AIRY_1830, WGS84, Datum.WGS_1984
        )
    except DatumTransformError as e:
        raise ctx.report(DatumTransformError, e.message) from e

    # The shift is computed for a point on the ellipsoid; grid points carry
    # no height.
    wgs84 = wgs84.model_copy(update={"altitude": 0.0})
    return convert_datum(ctx, wgs84, target)
