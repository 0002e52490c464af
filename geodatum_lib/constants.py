# -*- coding: utf-8 -*-
"""Constants used throughout the geodatum_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers scattered across the projection code.
"""

import math

# -----------------------------------------------------------------------------
# Angle Conversions
# -----------------------------------------------------------------------------

#: Degrees to radians
DEG_TO_RAD: float = math.pi / 180.0

#: Radians to degrees
RAD_TO_DEG: float = 180.0 / math.pi

#: Arc-seconds to radians (datum rotation parameters are quoted in arc-seconds)
ARC_SEC_TO_RAD: float = math.pi / (180.0 * 3600.0)

#: Parts-per-million to a unitless scale (datum scale parameters are in ppm)
PPM_TO_SCALE: float = 1e-6

# -----------------------------------------------------------------------------
# Unit Conversions
# -----------------------------------------------------------------------------

#: Conversion factor from feet to meters
FEET_TO_METERS: float = 0.3048

#: Conversion factor from meters to feet
METERS_TO_FEET: float = 1.0 / FEET_TO_METERS

# -----------------------------------------------------------------------------
# Coordinate Limits
# -----------------------------------------------------------------------------

MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0
MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0

# -----------------------------------------------------------------------------
# UTM Constants
# -----------------------------------------------------------------------------

#: Central meridian scale factor
UTM_SCALE_FACTOR: float = 0.9996

#: False easting added to every zone (meters)
UTM_FALSE_EASTING: float = 500_000.0

#: False northing added to southern hemisphere northings (meters)
UTM_SOUTHERN_HEMISPHERE_OFFSET: float = 10_000_000.0

#: Width of a standard UTM zone in degrees
UTM_ZONE_WIDTH: float = 6.0

UTM_MIN_ZONE: int = 1
UTM_MAX_ZONE: int = 60

#: Accepted easting range when reading UTM points (meters)
UTM_MIN_EASTING: float = 100_000.0
UTM_MAX_EASTING: float = 900_000.0

#: Accepted northing range when reading UTM points (meters)
UTM_MIN_NORTHING: float = 0.0
UTM_MAX_NORTHING: float = 10_000_000.0

#: Latitude coverage of the lettered bands
UTM_MIN_BAND_LATITUDE: float = -80.0
UTM_MAX_BAND_LATITUDE: float = 84.0

#: Height of a regular latitude band in degrees
UTM_BAND_HEIGHT: float = 8.0

# -----------------------------------------------------------------------------
# MGRS Constants
# -----------------------------------------------------------------------------

#: Side of an MGRS grid square (meters)
MGRS_SQUARE_SIZE: float = 100_000.0

#: Number of row letters before the row lettering repeats
MGRS_ROW_CYCLE: int = 20

#: Northing covered by one full cycle of row letters (meters)
MGRS_ROW_CYCLE_NORTHING: float = MGRS_ROW_CYCLE * MGRS_SQUARE_SIZE

#: Number of zones before the column lettering sets repeat
MGRS_SET_COUNT: int = 6

#: Row letter offset for the zones that do not start at 'A'
MGRS_ROW_OFFSET: int = 5

# -----------------------------------------------------------------------------
# British National Grid Constants (OSGB36 / Airy 1830)
# -----------------------------------------------------------------------------

#: Scale factor on the central meridian
OSGB36_F0: float = 0.9996012717

#: True origin latitude / longitude (degrees)
OSGB36_LAT0: float = 49.0
OSGB36_LON0: float = -2.0

#: False origin offsets (meters)
OSGB36_E0: float = 400_000.0
OSGB36_N0: float = -100_000.0

#: Size of the large (first letter) and small (second letter) grid squares
BRITISH_GRID_LARGE_SQUARE: float = 500_000.0
BRITISH_GRID_SQUARE_SIZE: float = 100_000.0

#: Latitude iteration limits for the inverse projection
BRITISH_GRID_MAX_ITERATIONS: int = 10
BRITISH_GRID_TOLERANCE: float = 1e-12

# -----------------------------------------------------------------------------
# Japan Plane Rectangular Grid Constants (Tokyo / Bessel 1841)
# -----------------------------------------------------------------------------

#: Scale factor at every zone origin
JAPAN_GRID_SCALE_FACTOR: float = 0.9999

#: Zone origins: zone -> (latitude, longitude) in degrees
JAPAN_GRID_ZONES: dict[int, tuple[float, float]] = {
    1: (33.0, 129.0 + 30.0 / 60.0),
    2: (33.0, 131.0),
    3: (36.0, 132.0 + 10.0 / 60.0),
    4: (33.0, 133.0 + 30.0 / 60.0),
    5: (36.0, 134.0 + 20.0 / 60.0),
    6: (36.0, 136.0),
    7: (36.0, 137.0 + 10.0 / 60.0),
    8: (36.0, 138.0 + 30.0 / 60.0),
    9: (36.0, 139.0 + 50.0 / 60.0),
    10: (40.0, 140.0 + 50.0 / 60.0),
    11: (44.0, 140.0 + 15.0 / 60.0),
    12: (44.0, 142.0 + 15.0 / 60.0),
    13: (44.0, 144.0 + 15.0 / 60.0),
    14: (26.0, 142.0),
    15: (26.0, 127.0 + 30.0 / 60.0),
    16: (26.0, 124.0),
    17: (26.0, 131.0),
    18: (20.0, 136.0),
    19: (26.0, 154.0),
}
