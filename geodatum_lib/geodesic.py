# -*- coding: utf-8 -*-
"""Geodesic distance and azimuth problems.

Both problems are solved by ``pyproj.Geod`` (Karney's algorithms) bound to
the context's working ellipsoid. Azimuths are in degrees clockwise from
north in ``[-180, 180)``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from geodatum_lib.datum import convert_datum
from geodatum_lib.errors import CalculationError
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.errors import OutOfRangeError
from geodatum_lib.models import GeoCoord
from geodatum_lib.models import GeodesicResult
from geodatum_lib.validation import normalize_longitude
from geodatum_lib.validation import validate_point

if TYPE_CHECKING:
    from geodatum_lib.context import TransformContext


def _wrap_azimuth(azimuth: float) -> float:
    return (azimuth + 180.0) % 360.0 - 180.0


def _validated(ctx: TransformContext, coord: GeoCoord) -> GeoCoord:
    try:
        validate_point(coord)
    except InvalidCoordinateError as e:
        raise ctx.report(InvalidCoordinateError, e.message) from e
    return coord


def geodesic_inverse(
    ctx: TransformContext, p1: GeoCoord, p2: GeoCoord
) -> GeodesicResult:
    """Solve the inverse geodesic problem between two points.

    ``p2`` is first transformed to the datum of ``p1`` when they differ.

    Args:
        ctx: Transformation context
        p1: First point
        p2: Second point

    Returns:
        Distance in meters, forward azimuth at ``p1`` and forward azimuth at
        ``p2`` (the direction of travel when arriving at ``p2``)

    Raises:
        InvalidCoordinateError: If either point is out of range
        CalculationError: If the solver returned non-finite values
    """
    geod = ctx.geod
    _validated(ctx, p1)
    _validated(ctx, p2)

    if p2.datum != p1.datum:
        p2 = convert_datum(ctx, p2, p1.datum)

    azimuth1, back_azimuth, distance = geod.inv(
        p1.longitude, p1.latitude, p2.longitude, p2.latitude
    )
    if not all(math.isfinite(v) for v in (azimuth1, back_azimuth, distance)):
        raise ctx.report(
            CalculationError,
            f"Geodesic inverse failed between {p1.as_tuple()} and {p2.as_tuple()}",
        )

    return GeodesicResult(
        distance=distance,
        azimuth1=_wrap_azimuth(azimuth1),
        azimuth2=_wrap_azimuth(back_azimuth + 180.0),
    )


def geodesic_distance(ctx: TransformContext, p1: GeoCoord, p2: GeoCoord) -> float:
    """Geodesic distance between two points in meters."""
    return geodesic_inverse(ctx, p1, p2).distance


def geodesic_direct(
    ctx: TransformContext, start: GeoCoord, distance: float, azimuth: float
) -> GeoCoord:
    """Solve the direct geodesic problem.

    Args:
        ctx: Transformation context
        start: Starting point
        distance: Distance to travel in meters (must not be negative)
        azimuth: Initial azimuth in degrees clockwise from north

    Returns:
        The destination on the datum of ``start`` with zero altitude

    Raises:
        InvalidCoordinateError: If ``start`` is out of range
        OutOfRangeError: If ``distance`` is negative
        InvalidInputError: If ``distance`` or ``azimuth`` is not finite
        CalculationError: If the solver returned non-finite values
    """
    geod = ctx.geod
    _validated(ctx, start)

    if not (math.isfinite(distance) and math.isfinite(azimuth)):
        raise ctx.report(
            InvalidInputError,
            f"Distance and azimuth must be finite: {distance}, {azimuth}",
        )
    if distance < 0.0:
        raise ctx.report(OutOfRangeError, f"Distance must not be negative: {distance}")

    lon, lat, _ = geod.fwd(start.longitude, start.latitude, azimuth, distance)
    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise ctx.report(
            CalculationError, f"Geodesic direct failed from {start.as_tuple()}"
        )

    return GeoCoord(
        latitude=lat,
        longitude=normalize_longitude(lon),
        altitude=0.0,
        datum=start.datum,
    )
