# -*- coding: utf-8 -*-
"""Enumerations for datums, grid systems and error codes."""

from enum import Enum


class Datum(str, Enum):
    """Geodetic datums understood by the transformation engine.

    ``MGRS_GRID`` and ``UTM_GRID`` are bookkeeping aliases that share the
    WGS 1984 ellipsoid.

    Attributes:
        WGS_1984: World Geodetic System 1984
        MGRS_GRID: MGRS grid alias of WGS 1984
        UTM_GRID: UTM grid alias of WGS 1984
        NORTH_AMERICAN_1983: North American Datum 1983 (GRS80)
        NORTH_AMERICAN_1927: North American Datum 1927 (Clarke 1866)
        EUROPEAN_1950: European Datum 1950 (International 1924)
        TOKYO: Tokyo Datum (Bessel 1841)
        ORDNANCE_SURVEY_1936: Ordnance Survey of Great Britain 1936 (Airy 1830)
    """

    WGS_1984 = "WGS 1984"
    MGRS_GRID = "MGRS Grid"
    UTM_GRID = "UTM Grid"
    NORTH_AMERICAN_1983 = "North American 1983"
    NORTH_AMERICAN_1927 = "North American 1927"
    EUROPEAN_1950 = "European 1950"
    TOKYO = "Tokyo"
    ORDNANCE_SURVEY_1936 = "Ordnance Survey 1936"

    @classmethod
    def normalize(cls, value: "str | Datum | None") -> "Datum | None":
        """Normalize and validate a datum string to a Datum enum value.

        Performs case-insensitive matching with whitespace normalization.
        Both the enum value ("WGS 1984") and the member name ("WGS_1984")
        are accepted.

        Args:
            value: The datum string to normalize (case-insensitive)

        Returns:
            The corresponding Datum enum value, or None if value is None

        Raises:
            ValueError: If the datum string is not recognized
        """
        if value is None or isinstance(value, Datum):
            return value

        # Normalize: lowercase, strip whitespace, collapse multiple spaces
        normalized = " ".join(value.strip().lower().split())

        for datum in cls:
            if normalized in (datum.value.lower(), datum.name.lower()):
                return datum

        raise ValueError(f"Unknown datum: {value!r}")


class GridSystem(str, Enum):
    """Coordinate representations the engine can convert into.

    Attributes:
        GEODETIC: Latitude / longitude / height
        UTM: Universal Transverse Mercator
        MGRS: Military Grid Reference System
        BRITISH_GRID: Ordnance Survey National Grid
        JAPAN_GRID: Japan Plane Rectangular Coordinate System
    """

    GEODETIC = "geodetic"
    UTM = "utm"
    MGRS = "mgrs"
    BRITISH_GRID = "british_grid"
    JAPAN_GRID = "japan_grid"


class ErrorCode(str, Enum):
    """Failure categories reported by engine operations."""

    INVALID_INPUT = "invalid_input"
    OUT_OF_RANGE = "out_of_range"
    INVALID_COORDINATE = "invalid_coordinate"
    INVALID_UTM_ZONE = "invalid_utm_zone"
    DATUM_TRANSFORM_FAILED = "datum_transform_failed"
    CALCULATION_ERROR = "calculation_error"
    UNSUPPORTED_FORMAT = "unsupported_format"

    @property
    def description(self) -> str:
        """Human-readable description of the error code."""
        return {
            ErrorCode.INVALID_INPUT: "Invalid parameter",
            ErrorCode.OUT_OF_RANGE: "Out of range",
            ErrorCode.INVALID_COORDINATE: "Invalid coordinate",
            ErrorCode.INVALID_UTM_ZONE: "Invalid UTM zone",
            ErrorCode.DATUM_TRANSFORM_FAILED: "Datum transformation failed",
            ErrorCode.CALCULATION_ERROR: "Calculation error",
            ErrorCode.UNSUPPORTED_FORMAT: "Unsupported format",
        }[self]
