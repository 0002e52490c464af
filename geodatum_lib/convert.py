# -*- coding: utf-8 -*-
"""Single entry point converting a coordinate into any supported grid."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geodatum_lib.datum import convert_datum
from geodatum_lib.enums import GridSystem
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.errors import UnsupportedFormatError
from geodatum_lib.grid.british import geodetic_to_british_grid
from geodatum_lib.grid.japan import geodetic_to_japan_grid
from geodatum_lib.grid.mgrs import geodetic_to_mgrs
from geodatum_lib.grid.utm import geodetic_to_utm
from geodatum_lib.validation import validate_point

if TYPE_CHECKING:
    from collections.abc import Callable

    from geodatum_lib.context import TransformContext
    from geodatum_lib.enums import Datum
    from geodatum_lib.models import BritishGridPoint
    from geodatum_lib.models import GeoCoord
    from geodatum_lib.models import JapanGridPoint
    from geodatum_lib.models import MGRSPoint
    from geodatum_lib.models import UTMPoint

    GridPoint = GeoCoord | UTMPoint | MGRSPoint | BritishGridPoint | JapanGridPoint


def _identity(ctx: TransformContext, coord: GeoCoord) -> GeoCoord:
    ctx.ensure_open()
    return coord


_CONVERTERS: dict[GridSystem, Callable[[TransformContext, GeoCoord], GridPoint]] = {
    GridSystem.GEODETIC: _identity,
    GridSystem.UTM: geodetic_to_utm,
    GridSystem.MGRS: geodetic_to_mgrs,
    GridSystem.BRITISH_GRID: geodetic_to_british_grid,
    GridSystem.JAPAN_GRID: geodetic_to_japan_grid,
}


def convert(
    ctx: TransformContext,
    coord: GeoCoord,
    target: str | GridSystem,
    target_datum: str | Datum | None = None,
) -> GridPoint:
    """Convert a geodetic coordinate into the requested representation.

    Args:
        ctx: Transformation context
        coord: Geodetic coordinate
        target: Grid system to convert into
        target_datum: Datum to transform ``coord`` into first, if any

    Returns:
        The structured record of the target grid system

    Raises:
        InvalidCoordinateError: If ``coord`` is out of range
        UnsupportedFormatError: If ``target`` is not a known grid system

    Examples:
        >>> convert(ctx, GeoCoord(latitude=31.23, longitude=121.47), "utm")
        UTMPoint(zone=51, band='R', ...)
    """
    ctx.ensure_open()
    try:
        validate_point(coord)
    except InvalidCoordinateError as e:
        raise ctx.report(InvalidCoordinateError, e.message) from e

    if isinstance(target, GridSystem):
        system = target
    else:
        try:
            system = GridSystem(str(target).strip().lower())
        except ValueError as e:
            raise ctx.report(
                UnsupportedFormatError, f"Unsupported grid system: {target!r}"
            ) from e

    if target_datum is not None:
        coord = convert_datum(ctx, coord, target_datum)

    return _CONVERTERS[system](ctx, coord)
