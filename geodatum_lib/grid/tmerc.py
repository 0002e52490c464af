# -*- coding: utf-8 -*-
"""Transverse Mercator series shared by the UTM, British and Japan grids.

The forward and inverse expansions follow Snyder, *Map Projections - A
Working Manual* (USGS Professional Paper 1395), equations 8-9 to 8-25.
All angles are in radians; distances are in meters on the given ellipsoid.
Grid-specific false offsets are applied by the callers.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from geodatum_lib.constants import RAD_TO_DEG
from geodatum_lib.models import Ellipsoid


class TMPoint(NamedTuple):
    """Projected offsets from the projection origin.

    Attributes:
        x: Easting offset from the central meridian (meters)
        y: Northing offset from the origin latitude (meters)
        convergence: Grid convergence (degrees)
        scale_factor: Point scale factor
    """

    x: float
    y: float
    convergence: float
    scale_factor: float


def meridional_arc(ellipsoid: Ellipsoid, phi: float) -> float:
    """Distance along the meridian from the equator to latitude ``phi``."""
    e2 = ellipsoid.e2
    e4 = e2 * e2
    e6 = e4 * e2
    return ellipsoid.a * (
        (1.0 - e2 / 4.0 - 3.0 * e4 / 64.0 - 5.0 * e6 / 256.0) * phi
        - (3.0 * e2 / 8.0 + 3.0 * e4 / 32.0 + 45.0 * e6 / 1024.0)
        * math.sin(2.0 * phi)
        + (15.0 * e4 / 256.0 + 45.0 * e6 / 1024.0) * math.sin(4.0 * phi)
        - (35.0 * e6 / 3072.0) * math.sin(6.0 * phi)
    )


def footpoint_latitude(ellipsoid: Ellipsoid, arc: float) -> float:
    """Latitude whose meridional arc equals ``arc`` (the footpoint latitude).

    Uses the rectifying latitude ``mu`` and the ``e1`` series.
    """
    e2 = ellipsoid.e2
    e4 = e2 * e2
    e6 = e4 * e2
    mu = arc / (
        ellipsoid.a * (1.0 - e2 / 4.0 - 3.0 * e4 / 64.0 - 5.0 * e6 / 256.0)
    )

    root = math.sqrt(1.0 - e2)
    e1 = (1.0 - root) / (1.0 + root)
    e1_2 = e1 * e1
    e1_3 = e1_2 * e1
    e1_4 = e1_3 * e1

    return (
        mu
        + (3.0 * e1 / 2.0 - 27.0 * e1_3 / 32.0) * math.sin(2.0 * mu)
        + (21.0 * e1_2 / 16.0 - 55.0 * e1_4 / 32.0) * math.sin(4.0 * mu)
        + (151.0 * e1_3 / 96.0) * math.sin(6.0 * mu)
        + (1097.0 * e1_4 / 512.0) * math.sin(8.0 * mu)
    )


def forward(
    ellipsoid: Ellipsoid,
    phi: float,
    dlam: float,
    k0: float,
    phi0: float = 0.0,
) -> TMPoint:
    """Project a geodetic position onto the transverse Mercator plane.

    Args:
        ellipsoid: Reference ellipsoid
        phi: Latitude (radians)
        dlam: Longitude difference from the central meridian (radians)
        k0: Scale factor on the central meridian
        phi0: Latitude of the projection origin (radians)

    Returns:
        Offsets from the origin together with convergence and scale factor
    """
    ep2 = ellipsoid.ep2
    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    tan_phi = math.tan(phi)

    n = ellipsoid.a / math.sqrt(1.0 - ellipsoid.e2 * sin_phi * sin_phi)
    t = tan_phi * tan_phi
    c = ep2 * cos_phi * cos_phi
    a = cos_phi * dlam
    a2 = a * a
    a3 = a2 * a
    a4 = a3 * a
    a5 = a4 * a
    a6 = a5 * a

    m = meridional_arc(ellipsoid, phi)
    m0 = meridional_arc(ellipsoid, phi0) if phi0 else 0.0

    x = (
        k0
        * n
        * (
            a
            + (1.0 - t + c) * a3 / 6.0
            + (5.0 - 18.0 * t + t * t + 72.0 * c - 58.0 * ep2) * a5 / 120.0
        )
    )
    y = k0 * (
        m
        - m0
        + n
        * tan_phi
        * (
            a2 / 2.0
            + (5.0 - t + 9.0 * c + 4.0 * c * c) * a4 / 24.0
            + (61.0 - 58.0 * t + t * t + 600.0 * c - 330.0 * ep2) * a6 / 720.0
        )
    )

    convergence = math.atan(math.tan(dlam) * sin_phi) * RAD_TO_DEG
    scale_factor = k0 * (
        1.0
        + (1.0 + c) * a2 / 2.0
        + (5.0 - 4.0 * t + 42.0 * c + 13.0 * c * c - 28.0 * ep2) * a4 / 24.0
        + (61.0 - 148.0 * t + 16.0 * t * t) * a6 / 720.0
    )

    return TMPoint(x=x, y=y, convergence=convergence, scale_factor=scale_factor)


def inverse(
    ellipsoid: Ellipsoid,
    x: float,
    y: float,
    k0: float,
    phi0: float = 0.0,
) -> tuple[float, float]:
    """Recover latitude and longitude difference from plane offsets.

    Args:
        ellipsoid: Reference ellipsoid
        x: Easting offset from the central meridian (meters)
        y: Northing offset from the origin latitude (meters)
        k0: Scale factor on the central meridian
        phi0: Latitude of the projection origin (radians)

    Returns:
        ``(phi, dlam)`` in radians
    """
    ep2 = ellipsoid.ep2
    e2 = ellipsoid.e2

    m0 = meridional_arc(ellipsoid, phi0) if phi0 else 0.0
    phi1 = footpoint_latitude(ellipsoid, m0 + y / k0)

    sin_phi1 = math.sin(phi1)
    cos_phi1 = math.cos(phi1)
    tan_phi1 = math.tan(phi1)

    c1 = ep2 * cos_phi1 * cos_phi1
    t1 = tan_phi1 * tan_phi1
    w = 1.0 - e2 * sin_phi1 * sin_phi1
    n1 = ellipsoid.a / math.sqrt(w)
    r1 = ellipsoid.a * (1.0 - e2) / (w * math.sqrt(w))
    d = x / (n1 * k0)
    d2 = d * d
    d3 = d2 * d
    d4 = d3 * d
    d5 = d4 * d
    d6 = d5 * d

    phi = phi1 - (n1 * tan_phi1 / r1) * (
        d2 / 2.0
        - (5.0 + 3.0 * t1 + 10.0 * c1 - 4.0 * c1 * c1 - 9.0 * ep2) * d4 / 24.0
        + (
            61.0
            + 90.0 * t1
            + 298.0 * c1
            + 45.0 * t1 * t1
            - 252.0 * ep2
            - 3.0 * c1 * c1
        )
        * d6
        / 720.0
    )

    dlam = (
        d
        - (1.0 + 2.0 * t1 + c1) * d3 / 6.0
        + (
            5.0
            - 2.0 * c1
            + 28.0 * t1
            - 3.0 * c1 * c1
            + 8.0 * ep2
            + 24.0 * t1 * t1
        )
        * d5
        / 120.0
    ) / cos_phi1

    return phi, dlam
