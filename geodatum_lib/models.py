# -*- coding: utf-8 -*-
"""Core data models for coordinate conversions.

All records are immutable Pydantic models. Engine operations take and
return these records; updated values are produced with ``model_copy``.

Range checks on coordinates are performed by the engine (see
:mod:`geodatum_lib.validation`) rather than at construction time, so that an
out-of-range point surfaces as an ``InvalidCoordinateError`` from the
operation that received it.
"""

from __future__ import annotations

from typing import Annotated

import numpy as np
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from geodatum_lib.constants import ARC_SEC_TO_RAD
from geodatum_lib.constants import PPM_TO_SCALE
from geodatum_lib.enums import Datum


def _normalize_datum(value: str | Datum) -> Datum:
    datum = Datum.normalize(value)
    if datum is None:
        raise ValueError("Datum is required")
    return datum


class Ellipsoid(BaseModel):
    """Reference ellipsoid constants.

    Attributes:
        name: Ellipsoid name (e.g. "WGS84", "Airy1830", "Custom")
        a: Semi-major axis in meters
        f: Flattening
        b: Semi-minor axis in meters, ``a * (1 - f)``
        e2: First eccentricity squared, ``2f - f^2``
        ep2: Second eccentricity squared, ``e2 / (1 - e2)``
    """

    model_config = ConfigDict(frozen=True)

    name: str
    a: Annotated[float, Field(gt=0)]
    f: Annotated[float, Field(gt=0, lt=1)]
    b: float
    e2: float
    ep2: float

    @classmethod
    def from_axes(cls, a: float, f: float, name: str) -> Ellipsoid:
        """Build an ellipsoid from its semi-major axis and flattening."""
        e2 = 2.0 * f - f * f
        return cls(
            name=name,
            a=a,
            f=f,
            b=a * (1.0 - f),
            e2=e2,
            ep2=e2 / (1.0 - e2),
        )


class DatumTransform(BaseModel):
    """Seven-parameter (Helmert) datum transformation.

    Rotations use the convention::

        X' = dx + X (1 + s) + Y rz - Z ry
        Y' = dy - X rz + Y (1 + s) + Z rx
        Z' = dz + X ry - Y rx + Z (1 + s)

    Attributes:
        dx, dy, dz: Translation in meters
        rx, ry, rz: Rotation in arc-seconds
        scale: Scale change in parts-per-million
    """

    model_config = ConfigDict(frozen=True)

    dx: float = 0.0
    dy: float = 0.0
    dz: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0
    scale: float = 0.0

    @property
    def is_identity(self) -> bool:
        """True when all seven parameters are exactly zero."""
        return not any(
            (self.dx, self.dy, self.dz, self.rx, self.ry, self.rz, self.scale)
        )

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.dx, self.dy, self.dz])

    @property
    def rotation(self) -> np.ndarray:
        """Rotation vector in radians."""
        return np.array([self.rx, self.ry, self.rz]) * ARC_SEC_TO_RAD

    @property
    def matrix(self) -> np.ndarray:
        """Small-angle scale/rotation matrix applied to geocentric vectors."""
        rx, ry, rz = self.rotation
        m = 1.0 + self.scale * PPM_TO_SCALE
        return np.array(
            [
                [m, rz, -ry],
                [-rz, m, rx],
                [ry, -rx, m],
            ]
        )

    def apply(self, xyz: np.ndarray) -> np.ndarray:
        """Apply the transformation to a geocentric (X, Y, Z) vector."""
        return self.translation + self.matrix @ xyz

    def inverted(self) -> DatumTransform:
        """Derive the approximate reverse transformation.

        Scale and rotations are negated and the translation becomes
        ``-(T + r x T) / (1 + s)``. This is a first-order approximation that
        only holds for the small rotations found in real datum pairs; it is
        not an exact matrix inverse.
        """
        factor = 1.0 / (1.0 + self.scale * PPM_TO_SCALE)
        correction = np.cross(self.rotation, self.translation)
        dx, dy, dz = -(self.translation + correction) * factor
        return DatumTransform(
            dx=float(dx),
            dy=float(dy),
            dz=float(dz),
            rx=-self.rx,
            ry=-self.ry,
            rz=-self.rz,
            scale=-self.scale,
        )


class GeoCoord(BaseModel):
    """Geodetic coordinate.

    Attributes:
        latitude: Latitude in decimal degrees (valid range -90..90)
        longitude: Longitude in decimal degrees (valid range -180..180)
        altitude: Ellipsoidal height in meters
        datum: Datum the coordinate refers to
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    altitude: float = 0.0
    datum: Datum = Datum.WGS_1984

    @field_validator("datum", mode="before")
    @classmethod
    def normalize_datum(cls, value: str | Datum) -> Datum:
        return _normalize_datum(value)

    def as_tuple(self) -> tuple[float, float]:
        """Return (latitude, longitude)."""
        return (self.latitude, self.longitude)


class UTMPoint(BaseModel):
    """Universal Transverse Mercator coordinate.

    The hemisphere is carried by the latitude band: bands ``C``..``M`` are
    south of the equator and their northings include the 10,000,000 m false
    northing.

    Attributes:
        zone: UTM zone number (1-60)
        band: Latitude band letter (C-X, excluding I and O)
        easting: Easting in meters (including the 500,000 m false easting)
        northing: Northing in meters
        convergence: Grid convergence in degrees
        scale_factor: Point scale factor
        datum: Datum of the underlying geodetic coordinate
    """

    model_config = ConfigDict(frozen=True)

    zone: int
    band: Annotated[str, Field(min_length=1, max_length=1)]
    easting: float
    northing: float
    convergence: float = 0.0
    scale_factor: float = 0.9996
    datum: Datum = Datum.WGS_1984

    @field_validator("band", mode="before")
    @classmethod
    def upper_band(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @field_validator("datum", mode="before")
    @classmethod
    def normalize_datum(cls, value: str | Datum) -> Datum:
        return _normalize_datum(value)

    @property
    def is_northern_hemisphere(self) -> bool:
        """Check if the band lies north of the equator."""
        return self.band >= "N"

    def __str__(self) -> str:
        return f"{self.zone}{self.band} {self.easting:.0f}E {self.northing:.0f}N"


class MGRSPoint(BaseModel):
    """Military Grid Reference System coordinate.

    Attributes:
        zone: UTM zone number (1-60)
        band: Latitude band letter (C-X, excluding I and O)
        square: Two-letter 100 km grid square identifier
        easting: Easting inside the grid square in meters (0 <= e < 100000)
        northing: Northing inside the grid square in meters (0 <= n < 100000)
        datum: Datum of the underlying geodetic coordinate
    """

    model_config = ConfigDict(frozen=True)

    zone: int
    band: Annotated[str, Field(min_length=1, max_length=1)]
    square: Annotated[str, Field(min_length=2, max_length=2)]
    easting: float
    northing: float
    datum: Datum = Datum.WGS_1984

    @field_validator("band", "square", mode="before")
    @classmethod
    def upper_letters(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @field_validator("datum", mode="before")
    @classmethod
    def normalize_datum(cls, value: str | Datum) -> Datum:
        return _normalize_datum(value)

    def __str__(self) -> str:
        return (
            f"{self.zone}{self.band} {self.square} "
            f"{int(self.easting):05d} {int(self.northing):05d}"
        )


class BritishGridPoint(BaseModel):
    """Ordnance Survey National Grid coordinate.

    Attributes:
        letters: Two-letter 100 km square identifier (e.g. "TQ")
        easting: Full grid easting in meters
        northing: Full grid northing in meters
        datum: Always OSGB36 once produced by the forward projection
    """

    model_config = ConfigDict(frozen=True)

    letters: Annotated[str, Field(min_length=2, max_length=2)]
    easting: float
    northing: float
    datum: Datum = Datum.ORDNANCE_SURVEY_1936

    @field_validator("letters", mode="before")
    @classmethod
    def upper_letters(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @field_validator("datum", mode="before")
    @classmethod
    def normalize_datum(cls, value: str | Datum) -> Datum:
        return _normalize_datum(value)

    @classmethod
    def from_square(
        cls, letters: str, easting: float, northing: float
    ) -> BritishGridPoint:
        """Build a point from a 100 km square and the offsets inside it.

        Args:
            letters: Two-letter square identifier (e.g. "TQ")
            easting: Easting inside the square in meters
            northing: Northing inside the square in meters

        Raises:
            InvalidCoordinateError: If the letters do not name a grid square
        """
        from geodatum_lib.grid.british import british_grid_square_origin  # noqa: PLC0415

        origin_e, origin_n = british_grid_square_origin(letters.upper())
        return cls(
            letters=letters,
            easting=origin_e + easting,
            northing=origin_n + northing,
        )

    def __str__(self) -> str:
        return f"{self.letters} {self.easting:.0f} {self.northing:.0f}"


class JapanGridPoint(BaseModel):
    """Japan Plane Rectangular coordinate.

    Follows the survey convention: ``x`` is the northing and ``y`` the
    easting, both relative to the zone origin.

    Attributes:
        zone: Zone number (1-19)
        x: Northing from the zone origin in meters
        y: Easting from the zone origin in meters
        datum: Always Tokyo once produced by the forward projection
    """

    model_config = ConfigDict(frozen=True)

    zone: int
    x: float
    y: float
    datum: Datum = Datum.TOKYO

    @field_validator("datum", mode="before")
    @classmethod
    def normalize_datum(cls, value: str | Datum) -> Datum:
        return _normalize_datum(value)

    def __str__(self) -> str:
        return f"Zone {self.zone}: X={self.x:.3f} Y={self.y:.3f}"


class GeodesicResult(BaseModel):
    """Solution of the inverse geodesic problem.

    Attributes:
        distance: Geodesic distance in meters
        azimuth1: Forward azimuth at the first point in degrees
        azimuth2: Forward azimuth at the second point in degrees
    """

    model_config = ConfigDict(frozen=True)

    distance: float
    azimuth1: float
    azimuth2: float
