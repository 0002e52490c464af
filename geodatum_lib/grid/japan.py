# -*- coding: utf-8 -*-
"""Japan Plane Rectangular Coordinate System (Tokyo datum).

Nineteen transverse Mercator zones on the Bessel 1841 ellipsoid, each with
its own true origin and a scale factor of 0.9999. There are no false
offsets: ``x`` is the northing and ``y`` the easting from the zone origin.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from geodatum_lib.constants import DEG_TO_RAD
from geodatum_lib.constants import JAPAN_GRID_SCALE_FACTOR
from geodatum_lib.constants import JAPAN_GRID_ZONES
from geodatum_lib.constants import RAD_TO_DEG
from geodatum_lib.datum import convert_datum
from geodatum_lib.ellipsoid import BESSEL_1841
from geodatum_lib.enums import Datum
from geodatum_lib.errors import CalculationError
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.grid import tmerc
from geodatum_lib.models import GeoCoord
from geodatum_lib.models import JapanGridPoint
from geodatum_lib.validation import validate_point

if TYPE_CHECKING:
    from geodatum_lib.context import TransformContext

logger = logging.getLogger(__name__)


def nearest_japan_zone(latitude: float, longitude: float) -> int:
    """Pick the zone whose origin is closest in degree space.

    Distances are squared differences of latitude and longitude, not
    geodesic distances, and positions far from Japan still get a zone.

    Examples:
        >>> nearest_japan_zone(35.68, 139.77)  # Tokyo
        9
    """
    return min(
        JAPAN_GRID_ZONES,
        key=lambda zone: (
            (latitude - JAPAN_GRID_ZONES[zone][0]) ** 2
            + (longitude - JAPAN_GRID_ZONES[zone][1]) ** 2
        ),
    )


def geodetic_to_japan_grid(
    ctx: TransformContext, coord: GeoCoord
) -> JapanGridPoint:
    """Project a geodetic coordinate onto the nearest Japan grid zone.

    Raises:
        InvalidCoordinateError: If the coordinate is out of range
        CalculationError: If the projection produced non-finite values
    """
    ctx.ensure_open()
    try:
        validate_point(coord)
    except InvalidCoordinateError as e:
        raise ctx.report(InvalidCoordinateError, e.message) from e

    tokyo = convert_datum(ctx, coord, Datum.TOKYO)
    zone = nearest_japan_zone(tokyo.latitude, tokyo.longitude)
    lat0, lon0 = JAPAN_GRID_ZONES[zone]
    logger.debug("Selected Japan grid zone %d for %s", zone, tokyo.as_tuple())

    projected = tmerc.forward(
        BESSEL_1841,
        tokyo.latitude * DEG_TO_RAD,
        (tokyo.longitude - lon0) * DEG_TO_RAD,
        JAPAN_GRID_SCALE_FACTOR,
        lat0 * DEG_TO_RAD,
    )
    if not (math.isfinite(projected.x) and math.isfinite(projected.y)):
        raise ctx.report(
            CalculationError, f"Japan grid projection failed for {coord.as_tuple()}"
        )

    return JapanGridPoint(zone=zone, x=projected.y, y=projected.x)


def japan_grid_to_geodetic(
    ctx: TransformContext,
    point: JapanGridPoint,
    target_datum: str | Datum = Datum.TOKYO,
) -> GeoCoord:
    """Convert a Japan grid point to geodetic coordinates.

    Args:
        ctx: Transformation context
        point: Grid point
        target_datum: Datum of the returned coordinate

    Returns:
        Geodetic coordinate on ``target_datum`` with zero altitude

    Raises:
        InvalidInputError: If the zone or the target datum is unknown
        InvalidCoordinateError: If the offsets are not finite
        DatumTransformError: If the shift to ``target_datum`` failed
    """
    ctx.ensure_open()
    if point.zone not in JAPAN_GRID_ZONES:
        raise ctx.report(InvalidInputError, f"Unknown Japan grid zone: {point.zone}")
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise ctx.report(InvalidCoordinateError, f"Non-finite grid offsets: {point}")

    lat0, lon0 = JAPAN_GRID_ZONES[point.zone]
    phi, dlam = tmerc.inverse(
        BESSEL_1841,
        point.y,
        point.x,
        JAPAN_GRID_SCALE_FACTOR,
        lat0 * DEG_TO_RAD,
    )

    tokyo = GeoCoord(
        latitude=phi * RAD_TO_DEG,
        longitude=lon0 + dlam * RAD_TO_DEG,
        datum=Datum.TOKYO,
    )
    return convert_datum(ctx, tokyo, target_datum)
