# -*- coding: utf-8 -*-
"""Geodetic Datum Library.

A Python library for converting positions between geodetic coordinates and
the UTM, MGRS, British National Grid and Japan Plane Rectangular grids, with
seven-parameter datum transformations and geodesic calculations.

Usage:
    from geodatum_lib import GeoCoord, TransformContext, geodetic_to_mgrs

    with TransformContext() as ctx:
        point = GeoCoord(latitude=31.230416, longitude=121.473701)
        print(geodetic_to_mgrs(ctx, point))  # 51R UQ 54633 56142

    # Structured conversion to any grid
    from geodatum_lib import GridSystem, convert
    bng = convert(ctx, point, GridSystem.BRITISH_GRID)
"""

__version__ = "0.1.0"

# Constants
from geodatum_lib.constants import FEET_TO_METERS
from geodatum_lib.constants import METERS_TO_FEET

# Core
from geodatum_lib.context import TransformContext
from geodatum_lib.convert import convert
from geodatum_lib.datum import DEFAULT_TRANSFORMS
from geodatum_lib.datum import OSGB36_TO_WGS84
from geodatum_lib.datum import DatumTransformTable
from geodatum_lib.datum import convert_datum
from geodatum_lib.datum import geocentric_to_geodetic
from geodatum_lib.datum import geodetic_to_geocentric
from geodatum_lib.ellipsoid import ELLIPSOIDS
from geodatum_lib.ellipsoid import ellipsoid_for

# Enums
from geodatum_lib.enums import Datum
from geodatum_lib.enums import ErrorCode
from geodatum_lib.enums import GridSystem

# Errors
from geodatum_lib.errors import CalculationError
from geodatum_lib.errors import DatumTransformError
from geodatum_lib.errors import ErrorObserver
from geodatum_lib.errors import ErrorRecord
from geodatum_lib.errors import GeodatumError
from geodatum_lib.errors import InvalidCoordinateError
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.errors import InvalidUTMZoneError
from geodatum_lib.errors import OutOfRangeError
from geodatum_lib.errors import UnsupportedFormatError

# Geodesics
from geodatum_lib.geodesic import geodesic_direct
from geodatum_lib.geodesic import geodesic_distance
from geodatum_lib.geodesic import geodesic_inverse

# Grids
from geodatum_lib.grid.british import british_grid_square
from geodatum_lib.grid.british import british_grid_square_origin
from geodatum_lib.grid.british import british_grid_to_geodetic
from geodatum_lib.grid.british import geodetic_to_british_grid
from geodatum_lib.grid.japan import geodetic_to_japan_grid
from geodatum_lib.grid.japan import japan_grid_to_geodetic
from geodatum_lib.grid.japan import nearest_japan_zone
from geodatum_lib.grid.mgrs import geodetic_to_mgrs
from geodatum_lib.grid.mgrs import mgrs_to_geodetic
from geodatum_lib.grid.mgrs import mgrs_to_utm
from geodatum_lib.grid.mgrs import utm_to_mgrs
from geodatum_lib.grid.utm import geodetic_to_utm
from geodatum_lib.grid.utm import utm_band
from geodatum_lib.grid.utm import utm_to_geodetic
from geodatum_lib.grid.utm import utm_zone

# I/O
from geodatum_lib.io import load_transforms
from geodatum_lib.io import save_transforms

# Models
from geodatum_lib.models import BritishGridPoint
from geodatum_lib.models import DatumTransform
from geodatum_lib.models import Ellipsoid
from geodatum_lib.models import GeoCoord
from geodatum_lib.models import GeodesicResult
from geodatum_lib.models import JapanGridPoint
from geodatum_lib.models import MGRSPoint
from geodatum_lib.models import UTMPoint

# Validation
from geodatum_lib.validation import feet_to_meters
from geodatum_lib.validation import is_valid_latitude
from geodatum_lib.validation import is_valid_longitude
from geodatum_lib.validation import is_valid_mgrs
from geodatum_lib.validation import is_valid_point
from geodatum_lib.validation import is_valid_utm
from geodatum_lib.validation import meters_to_feet
from geodatum_lib.validation import normalize_latitude
from geodatum_lib.validation import normalize_longitude
from geodatum_lib.validation import validate_mgrs
from geodatum_lib.validation import validate_point
from geodatum_lib.validation import validate_utm

__all__ = [
    "DEFAULT_TRANSFORMS",
    "ELLIPSOIDS",
    # Constants
    "FEET_TO_METERS",
    "METERS_TO_FEET",
    "OSGB36_TO_WGS84",
    # Models
    "BritishGridPoint",
    # Errors
    "CalculationError",
    # Enums
    "Datum",
    "DatumTransform",
    "DatumTransformError",
    "DatumTransformTable",
    "Ellipsoid",
    "ErrorCode",
    "ErrorObserver",
    "ErrorRecord",
    "GeoCoord",
    "GeodatumError",
    "GeodesicResult",
    "GridSystem",
    "InvalidCoordinateError",
    "InvalidInputError",
    "InvalidUTMZoneError",
    "JapanGridPoint",
    "MGRSPoint",
    "OutOfRangeError",
    # Core
    "TransformContext",
    "UTMPoint",
    "UnsupportedFormatError",
    # Grids
    "british_grid_square",
    "british_grid_square_origin",
    "british_grid_to_geodetic",
    "convert",
    "convert_datum",
    "ellipsoid_for",
    "feet_to_meters",
    "geocentric_to_geodetic",
    # Geodesics
    "geodesic_direct",
    "geodesic_distance",
    "geodesic_inverse",
    "geodetic_to_british_grid",
    "geodetic_to_geocentric",
    "geodetic_to_japan_grid",
    "geodetic_to_mgrs",
    "geodetic_to_utm",
    # Validation
    "is_valid_latitude",
    "is_valid_longitude",
    "is_valid_mgrs",
    "is_valid_point",
    "is_valid_utm",
    "japan_grid_to_geodetic",
    # I/O
    "load_transforms",
    "meters_to_feet",
    "mgrs_to_geodetic",
    "mgrs_to_utm",
    "nearest_japan_zone",
    "normalize_latitude",
    "normalize_longitude",
    "save_transforms",
    "utm_band",
    "utm_to_geodetic",
    "utm_to_mgrs",
    "utm_zone",
    "validate_mgrs",
    "validate_point",
    "validate_utm",
]
