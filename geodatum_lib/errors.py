# -*- coding: utf-8 -*-
"""Error handling for coordinate conversions.

Every engine failure is raised as a subclass of :class:`GeodatumError`
carrying an :class:`~geodatum_lib.enums.ErrorCode`. Observers injected into a
:class:`~geodatum_lib.context.TransformContext` receive ``(code, message)``
pairs before the exception is raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from typing import Protocol

from geodatum_lib.enums import ErrorCode


class ErrorObserver(Protocol):
    """Protocol for error observers."""

    def __call__(self, code: ErrorCode, message: str) -> None:
        """Observe an error about to be raised."""
        ...


@dataclass(frozen=True)
class ErrorRecord:
    """Represents a conversion error.

    This is a data record for storing error information, not an exception.
    Use the :class:`GeodatumError` subclasses for raising errors.

    Attributes:
        code: Error category
        message: Human-readable error message
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        """Format as human-readable error string."""
        return f"{self.code.description}: {self.message}"


class GeodatumError(Exception):
    """Base class for all engine errors.

    Attributes:
        message: Error message
        code: Error category (fixed per subclass)
    """

    code: ClassVar[ErrorCode]

    def __init__(self, message: str | None = None):
        self.message = message or self.code.description
        super().__init__(self.message)

    def to_error(self) -> ErrorRecord:
        """Convert exception to an ErrorRecord."""
        return ErrorRecord(code=self.code, message=self.message)


class InvalidInputError(GeodatumError):
    code = ErrorCode.INVALID_INPUT


class OutOfRangeError(GeodatumError):
    code = ErrorCode.OUT_OF_RANGE


class InvalidCoordinateError(GeodatumError):
    code = ErrorCode.INVALID_COORDINATE


class InvalidUTMZoneError(GeodatumError):
    code = ErrorCode.INVALID_UTM_ZONE


class DatumTransformError(GeodatumError):
    code = ErrorCode.DATUM_TRANSFORM_FAILED


class CalculationError(GeodatumError):
    code = ErrorCode.CALCULATION_ERROR


class UnsupportedFormatError(GeodatumError):
    code = ErrorCode.UNSUPPORTED_FORMAT

