# -*- coding: utf-8 -*-
"""Universal Transverse Mercator projection.

Zones are 6 degrees wide, numbered 1-60 eastward from 180W, with the
Norway (32V) and Svalbard (31X-37X) exceptions. Latitude bands are 8
degrees tall and lettered C-X (I and O skipped); band X is 12 degrees tall.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from geodatum_lib.constants import DEG_TO_RAD
from geodatum_lib.constants import RAD_TO_DEG
from geodatum_lib.constants import UTM_BAND_HEIGHT
from geodatum_lib.constants import UTM_FALSE_EASTING
from geodatum_lib.constants import UTM_MAX_BAND_LATITUDE
from geodatum_lib.constants import UTM_MAX_ZONE
from geodatum_lib.constants import UTM_MIN_BAND_LATITUDE
from geodatum_lib.constants import UTM_MIN_ZONE
from geodatum_lib.constants import UTM_SCALE_FACTOR
from geodatum_lib.constants import UTM_SOUTHERN_HEMISPHERE_OFFSET
from geodatum_lib.constants import UTM_ZONE_WIDTH
from geodatum_lib.errors import CalculationError
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.errors import InvalidUTMZoneError
from geodatum_lib.grid import tmerc
from geodatum_lib.grid.alphabet import UTM_BAND_LETTERS
from geodatum_lib.models import GeoCoord
from geodatum_lib.models import UTMPoint
from geodatum_lib.validation import is_valid_latitude
from geodatum_lib.validation import is_valid_longitude
from geodatum_lib.validation import normalize_latitude
from geodatum_lib.validation import normalize_longitude
from geodatum_lib.validation import validate_point
from geodatum_lib.validation import validate_utm

if TYPE_CHECKING:
    from geodatum_lib.context import TransformContext

logger = logging.getLogger(__name__)

#: Start of the 12 degree tall band X
_BAND_X_LATITUDE: float = 72.0


def utm_zone(longitude: float, latitude: float) -> int | None:
    """Determine the UTM zone of a position.

    Args:
        longitude: Longitude in degrees
        latitude: Latitude in degrees

    Returns:
        Zone number 1-60, or None if the position is invalid

    Examples:
        >>> utm_zone(121.47, 31.23)
        51
        >>> utm_zone(5.0, 60.0)  # Norway exception
        32
    """
    if not (math.isfinite(longitude) and math.isfinite(latitude)):
        return None
    if not (is_valid_latitude(latitude) and is_valid_longitude(longitude)):
        return None

    # Norway
    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        return 32

    # Svalbard
    if 72.0 <= latitude < 84.0:
        if 0.0 <= longitude < 9.0:
            return 31
        if 9.0 <= longitude < 21.0:
            return 33
        if 21.0 <= longitude < 33.0:
            return 35
        if 33.0 <= longitude < 42.0:
            return 37

    lon = longitude if longitude < 180.0 else longitude - 360.0
    zone = int(math.floor((lon + 180.0) / UTM_ZONE_WIDTH)) + 1
    return max(UTM_MIN_ZONE, min(UTM_MAX_ZONE, zone))


def utm_band(latitude: float) -> str:
    """Return the latitude band letter.

    Latitudes south of 80S map to ``C`` and latitudes from 72N upward
    (including beyond 84N) map to ``X``.
    """
    if latitude < UTM_MIN_BAND_LATITUDE:
        return UTM_BAND_LETTERS.letter(0)
    if latitude >= _BAND_X_LATITUDE:
        return UTM_BAND_LETTERS.letter(len(UTM_BAND_LETTERS) - 1)
    index = int(math.floor((latitude - UTM_MIN_BAND_LATITUDE) / UTM_BAND_HEIGHT))
    return UTM_BAND_LETTERS.letter(index)


def band_latitude_range(band: str) -> tuple[float, float]:
    """Southern and northern latitude limits of a band letter."""
    index = UTM_BAND_LETTERS.index(band)
    south = UTM_MIN_BAND_LATITUDE + index * UTM_BAND_HEIGHT
    if index == len(UTM_BAND_LETTERS) - 1:
        return south, UTM_MAX_BAND_LATITUDE
    return south, south + UTM_BAND_HEIGHT


def central_meridian(zone: int) -> float:
    """Longitude of the central meridian of a zone, in degrees."""
    return (zone - 1) * UTM_ZONE_WIDTH - 180.0 + UTM_ZONE_WIDTH / 2.0


def geodetic_to_utm(ctx: TransformContext, coord: GeoCoord) -> UTMPoint:
    """Project a geodetic coordinate to UTM on the context ellipsoid.

    Args:
        ctx: Transformation context
        coord: Geodetic coordinate

    Returns:
        The UTM point, including grid convergence and point scale factor

    Raises:
        InvalidCoordinateError: If the coordinate is out of range
        InvalidUTMZoneError: If no zone can be determined
        CalculationError: If the projection produced non-finite values
    """
    ctx.ensure_open()
    try:
        validate_point(coord)
    except InvalidCoordinateError as e:
        raise ctx.report(InvalidCoordinateError, e.message) from e

    zone = utm_zone(coord.longitude, coord.latitude)
    if zone is None:
        raise ctx.report(
            InvalidUTMZoneError, f"No UTM zone for {coord.as_tuple()}"
        )

    dlam = normalize_longitude(coord.longitude - central_meridian(zone))
    projected = tmerc.forward(
        ctx.ellipsoid,
        coord.latitude * DEG_TO_RAD,
        dlam * DEG_TO_RAD,
        UTM_SCALE_FACTOR,
    )

    easting = projected.x + UTM_FALSE_EASTING
    northing = projected.y
    if coord.latitude < 0.0:
        northing += UTM_SOUTHERN_HEMISPHERE_OFFSET

    if not (math.isfinite(easting) and math.isfinite(northing)):
        raise ctx.report(
            CalculationError, f"UTM projection failed for {coord.as_tuple()}"
        )

    band = utm_band(coord.latitude)
    logger.debug("Projected %s into UTM zone %d%s", coord.as_tuple(), zone, band)

    return UTMPoint(
        zone=zone,
        band=band,
        easting=easting,
        northing=northing,
        convergence=projected.convergence,
        scale_factor=projected.scale_factor,
        datum=coord.datum,
    )


def utm_to_geodetic(ctx: TransformContext, point: UTMPoint) -> GeoCoord:
    """Convert a UTM point back to geodetic coordinates.

    Args:
        ctx: Transformation context
        point: UTM point

    Returns:
        Geodetic coordinate on the point's datum with zero altitude.
        Latitudes past the poles are clamped to +/-90.

    Raises:
        InvalidCoordinateError: If the point fails validation
        CalculationError: If the inverse produced non-finite values
    """
    ctx.ensure_open()
    try:
        validate_utm(point)
    except InvalidCoordinateError as e:
        raise ctx.report(InvalidCoordinateError, e.message) from e

    x = point.easting - UTM_FALSE_EASTING
    y = point.northing
    if not point.is_northern_hemisphere:
        y -= UTM_SOUTHERN_HEMISPHERE_OFFSET

    phi, dlam = tmerc.inverse(ctx.ellipsoid, x, y, UTM_SCALE_FACTOR)
    lat = phi * RAD_TO_DEG
    lon = normalize_longitude(central_meridian(point.zone) + dlam * RAD_TO_DEG)

    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ctx.report(CalculationError, f"UTM inverse failed for {point}")

    return GeoCoord(
        latitude=normalize_latitude(lat),
        longitude=lon,
        altitude=0.0,
        datum=point.datum,
    )
