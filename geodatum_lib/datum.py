# -*- coding: utf-8 -*-
"""Datum transformation table and seven-parameter (Helmert) transforms.

A transformation between two datums is carried out through geocentric
Cartesian coordinates:

1. geodetic -> geocentric on the source ellipsoid,
2. Helmert shift (:meth:`~geodatum_lib.models.DatumTransform.apply`),
3. geocentric -> geodetic on the target ellipsoid (Bowring).

Pairs without parameters are treated as identity, i.e. the coordinate is
re-tagged with the target datum without any shift.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from geodatum_lib.constants import DEG_TO_RAD
from geodatum_lib.constants import RAD_TO_DEG
from geodatum_lib.ellipsoid import ellipsoid_for
from geodatum_lib.enums import Datum
from geodatum_lib.errors import DatumTransformError
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.models import DatumTransform
from geodatum_lib.models import Ellipsoid
from geodatum_lib.models import GeoCoord
from geodatum_lib.validation import is_valid_point

if TYPE_CHECKING:
    from collections.abc import Iterator

    from geodatum_lib.context import TransformContext

logger = logging.getLogger(__name__)

#: Identity record returned for pairs without parameters
IDENTITY = DatumTransform()

#: Published parameter sets seeded into every new context.
#: Rotations follow the engine convention documented on ``DatumTransform``.
DEFAULT_TRANSFORMS: tuple[tuple[Datum, Datum, DatumTransform], ...] = (
    # NIMA TR8350.2 mean for the contiguous US, shifts only
    (
        Datum.NORTH_AMERICAN_1927,
        Datum.WGS_1984,
        DatumTransform(dx=-8.0, dy=160.0, dz=176.0),
    ),
    # NIMA TR8350.2 mean for western Europe, shifts only
    (
        Datum.EUROPEAN_1950,
        Datum.WGS_1984,
        DatumTransform(dx=-87.0, dy=-98.0, dz=-121.0),
    ),
    # NIMA TR8350.2 mean for Japan, shifts only
    (
        Datum.TOKYO,
        Datum.WGS_1984,
        DatumTransform(dx=-148.0, dy=507.0, dz=685.0),
    ),
    # Ordnance Survey WGS84 -> OSGB36 set; OS publishes the rotations with
    # the opposite sign
    (
        Datum.WGS_1984,
        Datum.ORDNANCE_SURVEY_1936,
        DatumTransform(
            dx=-446.448,
            dy=125.157,
            dz=-542.060,
            rx=0.1502,
            ry=0.2470,
            rz=0.8421,
            scale=20.4894,
        ),
    ),
)

#: Fixed OSGB36 -> WGS84 parameters used by the British Grid inverse
OSGB36_TO_WGS84 = DatumTransform(
    dx=446.448,
    dy=-125.157,
    dz=542.060,
    rx=-0.1502,
    ry=-0.2470,
    rz=-0.8421,
    scale=-20.4894,
)


def geodetic_to_geocentric(
    ellipsoid: Ellipsoid, lat: float, lon: float, height: float = 0.0
) -> np.ndarray:
    """Convert geodetic degrees and height to geocentric ``(X, Y, Z)``."""
    phi = lat * DEG_TO_RAD
    lam = lon * DEG_TO_RAD
    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)

    n = ellipsoid.a / math.sqrt(1.0 - ellipsoid.e2 * sin_phi * sin_phi)
    return np.array(
        [
            (n + height) * cos_phi * math.cos(lam),
            (n + height) * cos_phi * math.sin(lam),
            (n * (1.0 - ellipsoid.e2) + height) * sin_phi,
        ]
    )


def geocentric_to_geodetic(
    ellipsoid: Ellipsoid, xyz: np.ndarray
) -> tuple[float, float, float]:
    """Convert geocentric ``(X, Y, Z)`` to ``(lat, lon, height)``.

    Uses Bowring's closed-form solution, accurate to well below a millimeter
    for terrestrial heights.
    """
    x, y, z = (float(v) for v in xyz)
    a = ellipsoid.a
    b = ellipsoid.b

    p = math.hypot(x, y)
    theta = math.atan2(z * a, p * b)
    sin_theta = math.sin(theta)
    cos_theta = math.cos(theta)

    phi = math.atan2(
        z + ellipsoid.ep2 * b * sin_theta**3,
        p - ellipsoid.e2 * a * cos_theta**3,
    )
    lam = math.atan2(y, x)

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    n = a / math.sqrt(1.0 - ellipsoid.e2 * sin_phi * sin_phi)
    # p / cos(phi) loses precision towards the poles
    if abs(cos_phi) > abs(sin_phi):
        height = p / cos_phi - n
    else:
        height = z / sin_phi - n * (1.0 - ellipsoid.e2)

    return phi * RAD_TO_DEG, lam * RAD_TO_DEG, height


def helmert_shift(
    coord: GeoCoord,
    params: DatumTransform,
    source: Ellipsoid,
    target: Ellipsoid,
    target_datum: Datum,
) -> GeoCoord:
    """Shift a coordinate between ellipsoids through geocentric space.

    Raises:
        DatumTransformError: If the computation produced non-finite values
    """
    xyz = geodetic_to_geocentric(
        source, coord.latitude, coord.longitude, coord.altitude
    )
    lat, lon, height = geocentric_to_geodetic(target, params.apply(xyz))

    if not all(math.isfinite(v) for v in (lat, lon, height)):
        raise DatumTransformError(
            f"Non-finite result shifting {coord.datum.value} to "
            f"{target_datum.value}"
        )

    return GeoCoord(
        latitude=lat, longitude=lon, altitude=height, datum=target_datum
    )


class DatumTransformTable:
    """Sparse table of datum transformations keyed by ``(from, to)``.

    Setting a pair also stores the derived reverse record, so both
    directions are always available. Missing pairs read as identity.
    Iterating the table yields only the explicitly set records, from which
    the derived ones can be rebuilt.
    """

    def __init__(self) -> None:
        self._params: dict[tuple[Datum, Datum], DatumTransform] = {}
        self._explicit: dict[tuple[Datum, Datum], DatumTransform] = {}

    def __len__(self) -> int:
        return len(self._explicit)

    def __iter__(self) -> Iterator[tuple[Datum, Datum, DatumTransform]]:
        for (src, dst), params in self._explicit.items():
            yield src, dst, params

    def get(self, src: Datum, dst: Datum) -> DatumTransform:
        """Return the parameters for ``src -> dst`` or the identity record."""
        return self._params.get((src, dst), IDENTITY)

    def set(self, src: Datum, dst: Datum, params: DatumTransform) -> None:
        """Store ``src -> dst`` and the derived ``dst -> src`` parameters.

        Raises:
            InvalidInputError: If ``src`` and ``dst`` are the same datum
        """
        if src == dst:
            raise InvalidInputError(
                f"Cannot set a transformation from {src.value} to itself"
            )

        self._explicit.pop((dst, src), None)
        self._explicit[(src, dst)] = params
        self._params[(src, dst)] = params
        self._params[(dst, src)] = params.inverted()
        logger.debug("Stored transformation %s <-> %s", src.value, dst.value)

    def seed_defaults(self) -> None:
        for src, dst, params in DEFAULT_TRANSFORMS:
            self.set(src, dst, params)


def convert_datum(
    ctx: TransformContext, coord: GeoCoord, target_datum: str | Datum
) -> GeoCoord:
    """Transform a geodetic coordinate to another datum.

    Args:
        ctx: Context holding the transformation table
        coord: Coordinate to transform
        target_datum: Datum to transform into

    Returns:
        The coordinate expressed on ``target_datum``. ``coord`` itself is
        returned when it is already on that datum.

    Raises:
        InvalidInputError: If the target datum is unknown
        InvalidCoordinateError: If ``coord`` is out of range
        DatumTransformError: If the transformation failed numerically
    """
    try:
        target = Datum.normalize(target_datum)
    except ValueError as e:
        raise ctx.report(InvalidInputError, str(e)) from e
    if target is None:
        raise ctx.report(InvalidInputError, "Target datum is required")

    if coord.datum == target:
        return coord

    if not is_valid_point(coord):
        raise ctx.report(
            InvalidCoordinateError,
            f"Cannot transform out-of-range point {coord.as_tuple()}",
        )

    params = ctx.get_transform_params(coord.datum, target)
    if params.is_identity:
        logger.debug(
            "No parameters for %s -> %s, passing coordinate through",
            coord.datum.value,
            target.value,
        )
        return coord.model_copy(update={"datum": target})

    try:
        return helmert_shift(
            coord,
            params,
            ellipsoid_for(coord.datum),
            ellipsoid_for(target),
            target,
        )
    except DatumTransformError as e:
        raise ctx.report(DatumTransformError, e.message) from e
