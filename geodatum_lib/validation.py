# -*- coding: utf-8 -*-
"""Validation utilities for coordinates and grid references.

Each check comes in two flavours: ``is_valid_*`` returns a boolean and
``validate_*`` raises :class:`~geodatum_lib.errors.InvalidCoordinateError`
with a message describing the first violated rule.
"""

from geodatum_lib.constants import FEET_TO_METERS
from geodatum_lib.constants import MAX_LATITUDE
from geodatum_lib.constants import MAX_LONGITUDE
from geodatum_lib.constants import METERS_TO_FEET
from geodatum_lib.constants import MGRS_SQUARE_SIZE
from geodatum_lib.constants import MIN_LATITUDE
from geodatum_lib.constants import MIN_LONGITUDE
from geodatum_lib.constants import UTM_MAX_EASTING
from geodatum_lib.constants import UTM_MAX_NORTHING
from geodatum_lib.constants import UTM_MAX_ZONE
from geodatum_lib.constants import UTM_MIN_EASTING
from geodatum_lib.constants import UTM_MIN_NORTHING
from geodatum_lib.constants import UTM_MIN_ZONE
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.grid.alphabet import MGRS_ALPHABET
from geodatum_lib.grid.alphabet import UTM_BAND_LETTERS
from geodatum_lib.models import GeoCoord
from geodatum_lib.models import MGRSPoint
from geodatum_lib.models import UTMPoint


def is_valid_latitude(lat: float) -> bool:
    """Check that a latitude lies within [-90, 90] degrees."""
    return MIN_LATITUDE <= lat <= MAX_LATITUDE


def is_valid_longitude(lon: float) -> bool:
    """Check that a longitude lies within [-180, 180] degrees."""
    return MIN_LONGITUDE <= lon <= MAX_LONGITUDE


def normalize_latitude(lat: float) -> float:
    """Clamp a latitude into [-90, 90] degrees."""
    return max(MIN_LATITUDE, min(MAX_LATITUDE, lat))


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude into [-180, 180] degrees.

    Values already inside the range (including both end points) are
    returned unchanged; others are wrapped into [-180, 180).
    """
    if MIN_LONGITUDE <= lon <= MAX_LONGITUDE:
        return lon
    return (lon - MIN_LONGITUDE) % 360.0 + MIN_LONGITUDE


def meters_to_feet(meters: float) -> float:
    return meters * METERS_TO_FEET


def feet_to_meters(feet: float) -> float:
    return feet * FEET_TO_METERS


def _point_error(coord: GeoCoord) -> str | None:
    if not is_valid_latitude(coord.latitude):
        return f"Latitude out of range: {coord.latitude}"
    if not is_valid_longitude(coord.longitude):
        return f"Longitude out of range: {coord.longitude}"
    return None


def is_valid_point(coord: GeoCoord) -> bool:
    """Check that a geodetic coordinate has a valid latitude and longitude."""
    return _point_error(coord) is None


def validate_point(coord: GeoCoord) -> None:
    """Validate a geodetic coordinate.

    Raises:
        InvalidCoordinateError: If latitude or longitude is out of range
    """
    if (msg := _point_error(coord)) is not None:
        raise InvalidCoordinateError(msg)


def _utm_error(point: UTMPoint) -> str | None:
    if not UTM_MIN_ZONE <= point.zone <= UTM_MAX_ZONE:
        return f"UTM zone must be between 1 and 60, got {point.zone}"

    if point.band not in UTM_BAND_LETTERS:
        return f"Invalid UTM latitude band: {point.band!r}"

    if not UTM_MIN_EASTING <= point.easting <= UTM_MAX_EASTING:
        return f"UTM easting out of range: {point.easting}"

    # Southern northings carry the 10,000,000 m false northing, so both
    # hemispheres share the same numeric range.
    if not UTM_MIN_NORTHING <= point.northing <= UTM_MAX_NORTHING:
        return f"UTM northing out of range: {point.northing}"

    return None


def is_valid_utm(point: UTMPoint) -> bool:
    """Check zone, band, easting and northing of a UTM point."""
    return _utm_error(point) is None


def validate_utm(point: UTMPoint) -> None:
    """Validate a UTM point.

    Raises:
        InvalidCoordinateError: If any component is out of range
    """
    if (msg := _utm_error(point)) is not None:
        raise InvalidCoordinateError(msg)


def _mgrs_error(point: MGRSPoint) -> str | None:
    if not UTM_MIN_ZONE <= point.zone <= UTM_MAX_ZONE:
        return f"MGRS zone must be between 1 and 60, got {point.zone}"

    if point.band not in UTM_BAND_LETTERS:
        return f"Invalid MGRS latitude band: {point.band!r}"

    if not all(letter in MGRS_ALPHABET for letter in point.square):
        return f"Invalid MGRS grid square: {point.square!r}"

    if not 0.0 <= point.easting < MGRS_SQUARE_SIZE:
        return f"MGRS easting must be within the 100 km square: {point.easting}"

    if not 0.0 <= point.northing < MGRS_SQUARE_SIZE:
        return f"MGRS northing must be within the 100 km square: {point.northing}"

    return None


def is_valid_mgrs(point: MGRSPoint) -> bool:
    """Check zone, band, square letters and in-square offsets."""
    return _mgrs_error(point) is None


def validate_mgrs(point: MGRSPoint) -> None:
    """Validate an MGRS point.

    Raises:
        InvalidCoordinateError: If any component is out of range
    """
    if (msg := _mgrs_error(point)) is not None:
        raise InvalidCoordinateError(msg)
