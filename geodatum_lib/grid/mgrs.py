# -*- coding: utf-8 -*-
"""Military Grid Reference System.

An MGRS reference is a UTM point whose easting and northing are split into
a lettered 100 km square and the offsets inside that square::

    51R UQ 54633 56142
    |   |  |     +-- northing inside the square
    |   |  +-------- easting inside the square
    |   +----------- column letter, row letter
    +--------------- UTM zone and latitude band

Column letters depend on the zone set (``(zone - 1) % 6 + 1``). Row letters
cycle every 2,000 km and are shifted by five letters depending on the zone
parity and the hemisphere.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from geodatum_lib.constants import DEG_TO_RAD
from geodatum_lib.constants import MGRS_ROW_CYCLE
from geodatum_lib.constants import MGRS_ROW_CYCLE_NORTHING
from geodatum_lib.constants import MGRS_ROW_OFFSET
from geodatum_lib.constants import MGRS_SET_COUNT
from geodatum_lib.constants import MGRS_SQUARE_SIZE
from geodatum_lib.constants import UTM_SCALE_FACTOR
from geodatum_lib.constants import UTM_SOUTHERN_HEMISPHERE_OFFSET
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.grid import tmerc
from geodatum_lib.grid.alphabet import MGRS_ALPHABET
from geodatum_lib.grid.alphabet import MGRS_ROW_ALPHABET
from geodatum_lib.grid.utm import band_latitude_range
from geodatum_lib.grid.utm import geodetic_to_utm
from geodatum_lib.grid.utm import utm_to_geodetic
from geodatum_lib.models import Ellipsoid
from geodatum_lib.models import GeoCoord
from geodatum_lib.models import MGRSPoint
from geodatum_lib.models import UTMPoint
from geodatum_lib.validation import validate_mgrs
from geodatum_lib.validation import validate_utm

if TYPE_CHECKING:
    from geodatum_lib.context import TransformContext

logger = logging.getLogger(__name__)

#: First column letter of each zone set (sets 1-6)
_COLUMN_ORIGINS: dict[int, str] = {1: "A", 2: "J", 3: "S", 4: "A", 5: "J", 6: "S"}

#: Number of 100 km columns a zone can hold (eastings 100 km to 900 km)
_COLUMNS_PER_ZONE: int = 8

#: Tolerance when placing a northing inside its latitude band
_BAND_NORTHING_SLACK: float = 1_000.0


def _column_origin(zone: int) -> str:
    return _COLUMN_ORIGINS[(zone - 1) % MGRS_SET_COUNT + 1]


def _row_offset(zone: int, northern: bool) -> int:
    even = zone % 2 == 0
    return MGRS_ROW_OFFSET if even == northern else 0


def grid_square(zone: int, easting: float, northing: float, northern: bool) -> str:
    """Return the two-letter 100 km square of a UTM position.

    Args:
        zone: UTM zone number
        easting: UTM easting in meters
        northing: Northing in meters measured from the equator (negative in
            the southern hemisphere)
        northern: Hemisphere of the position

    Returns:
        Column letter followed by row letter
    """
    col_100k = int(math.floor(easting / MGRS_SQUARE_SIZE))
    column = MGRS_ALPHABET.advance(_column_origin(zone), col_100k - 1)

    row_100k = int(math.floor(northing / MGRS_SQUARE_SIZE)) % MGRS_ROW_CYCLE
    row = MGRS_ROW_ALPHABET.letter(row_100k + _row_offset(zone, northern))

    return column + row


def utm_to_mgrs(point: UTMPoint) -> MGRSPoint:
    """Split a UTM point into an MGRS grid square and in-square offsets.

    Raises:
        InvalidCoordinateError: If the UTM point fails validation
    """
    validate_utm(point)

    northern = point.is_northern_hemisphere
    northing = point.northing
    if not northern:
        northing -= UTM_SOUTHERN_HEMISPHERE_OFFSET

    square = grid_square(point.zone, point.easting, northing, northern)

    return MGRSPoint(
        zone=point.zone,
        band=point.band,
        square=square,
        easting=point.easting % MGRS_SQUARE_SIZE,
        northing=northing % MGRS_SQUARE_SIZE,
        datum=point.datum,
    )


def _row_cycle_start(ellipsoid: Ellipsoid, band: str) -> float:
    """Lowest equator-relative northing of the 2,000 km row cycle of ``band``.

    The cycle is anchored on the band's equator-side edge, where the
    northing on the central meridian is the band's extreme. Bands ``C`` and
    ``X`` also hold the clamped latitudes beyond 80S and 84N, so anchoring
    on their pole-side edge would pick the wrong cycle.
    """
    south, north = band_latitude_range(band)
    if band >= "N":
        edge = tmerc.forward(ellipsoid, south * DEG_TO_RAD, 0.0, UTM_SCALE_FACTOR)
        return edge.y - _BAND_NORTHING_SLACK
    edge = tmerc.forward(ellipsoid, north * DEG_TO_RAD, 0.0, UTM_SCALE_FACTOR)
    return edge.y + _BAND_NORTHING_SLACK - MGRS_ROW_CYCLE_NORTHING


def mgrs_to_utm(ctx: TransformContext, point: MGRSPoint) -> UTMPoint:
    """Rebuild the full UTM easting and northing of an MGRS point.

    The row letters repeat every 2,000 km; the northing is placed in the
    cycle that starts at the equator-side edge of the point's latitude band.

    Raises:
        InvalidCoordinateError: If the point fails validation or the column
            letter is not used by the point's zone
    """
    ctx.ensure_open()
    try:
        validate_mgrs(point)
    except InvalidCoordinateError as e:
        raise ctx.report(InvalidCoordinateError, e.message) from e

    column, row = point.square
    northern = point.band >= "N"

    col_100k = MGRS_ALPHABET.distance(_column_origin(point.zone), column) + 1
    if col_100k > _COLUMNS_PER_ZONE:
        raise ctx.report(
            InvalidCoordinateError,
            f"Column letter {column!r} is not used in zone {point.zone}",
        )
    easting = col_100k * MGRS_SQUARE_SIZE + point.easting

    if row not in MGRS_ROW_ALPHABET:
        raise ctx.report(
            InvalidCoordinateError, f"Row letter {row!r} is out of range"
        )
    row_100k = MGRS_ROW_ALPHABET.distance(
        MGRS_ROW_ALPHABET.letter(_row_offset(point.zone, northern)), row
    )
    northing = row_100k * MGRS_SQUARE_SIZE + point.northing

    cycle_start = _row_cycle_start(ctx.ellipsoid, point.band)
    cycles = math.ceil((cycle_start - northing) / MGRS_ROW_CYCLE_NORTHING)
    northing += cycles * MGRS_ROW_CYCLE_NORTHING

    if not northern:
        northing += UTM_SOUTHERN_HEMISPHERE_OFFSET

    return UTMPoint(
        zone=point.zone,
        band=point.band,
        easting=easting,
        northing=northing,
        datum=point.datum,
    )


def geodetic_to_mgrs(ctx: TransformContext, coord: GeoCoord) -> MGRSPoint:
    """Convert a geodetic coordinate to MGRS.

    Raises:
        InvalidCoordinateError: If the coordinate is out of range
        InvalidUTMZoneError: If no UTM zone can be determined
    """
    utm = geodetic_to_utm(ctx, coord)
    try:
        mgrs = utm_to_mgrs(utm)
    except InvalidCoordinateError as e:
        raise ctx.report(InvalidCoordinateError, e.message) from e
    logger.debug("Encoded %s as MGRS %s", coord.as_tuple(), mgrs)
    return mgrs


def mgrs_to_geodetic(ctx: TransformContext, point: MGRSPoint) -> GeoCoord:
    """Convert an MGRS point to geodetic coordinates.

    Raises:
        InvalidCoordinateError: If the point fails validation
    """
    return utm_to_geodetic(ctx, mgrs_to_utm(ctx, point))
